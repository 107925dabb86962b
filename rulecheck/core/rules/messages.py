"""
Failure message templates and message construction.

Templates are printf-style: one ``%s`` for the field name followed by one
per rule parameter. A template whose placeholder count does not match the
arguments falls back to a generic message.
"""

import logging

logger = logging.getLogger(__name__)

PLACEHOLDER = "%s"
FALLBACK_MESSAGE = "The %s is invalid."

DEFAULT_MESSAGES = {
    "accepted": "The %s must be accepted.",
    "active_url": "The %s is not a valid URL.",
    "alpha": "The %s may only contain letters.",
    "alpha_dash": "The %s may only contain letters, numbers, and dashes.",
    "alpha_num": "The %s may only contain letters and numbers.",
    "boolean": "The %s field must be true or false.",
    "chars": "The %s field must have %s characters.",
    "chars_between": "The %s field must have between %s and %s characters.",
    "confirmed": "The %s confirmation does not match.",
    "date": "The %s is not a valid date.",
    "different": "The %s and %s must be different.",
    "digits": "The %s must have %s digits.",
    "digits_between": "The %s must have between %s and %s digits.",
    "email": "The %s must be a valid email address.",
    "in": "The selected %s is invalid.",
    "integer": "The %s must be an integer.",
    "ip": "The %s must be a valid IP address.",
    "max_chars": "The %s must have fewer than %s characters.",
    "max_digits": "The %s must have fewer than %s digits.",
    "max_value": "The %s must be less than %s.",
    "min_chars": "The %s must have more than %s characters.",
    "min_digits": "The %s must have more than %s digits.",
    "min_value": "The %s must be greater than %s.",
    "not_in": "The selected %s is invalid.",
    "numeric": "The %s must be a number.",
    "regex": "The %s format is invalid.",
    "required": "The %s field is required.",
    "same": "The %s and %s must match.",
    "url": "The %s format is invalid.",
    "value": "The %s must be %s.",
    "value_between": "The %s must be between %s and %s.",
}


def fallback_message(field_name: str) -> str:
    return FALLBACK_MESSAGE % field_name


def build_error_message(field_name: str, template: str | None, params: list[str]) -> str:
    """
    Build the message reported for a failing rule.

    Args:
        field_name: Field that failed
        template: Registered template for the rule (None if unknown)
        params: Rule parameters, substituted after the field name

    Returns:
        The formatted message, or the generic fallback when the template
        is missing or does not take exactly 1 + len(params) arguments
    """
    if template is None or template.count(PLACEHOLDER) != 1 + len(params):
        return fallback_message(field_name)

    try:
        return template % (field_name, *params)
    except (TypeError, ValueError) as e:
        # e.g. a stray "%d" next to the right number of "%s"
        logger.warning(f"Message template {template!r} could not be formatted: {e}")
        return fallback_message(field_name)
