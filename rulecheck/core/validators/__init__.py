"""
Built-in rule predicates.

Provides predicates for presence, choices, cross-field comparison,
formats, lengths, numeric values and network addresses.
"""

from .format_validator import (
    validate_alpha,
    validate_alpha_dash,
    validate_alpha_num,
    validate_boolean,
    validate_date,
    validate_email,
    validate_integer,
    validate_numeric,
    validate_regex,
)
from .length_validator import (
    validate_chars,
    validate_chars_between,
    validate_digits,
    validate_digits_between,
    validate_max_chars,
    validate_max_digits,
    validate_min_chars,
    validate_min_digits,
)
from .network_validator import validate_active_url, validate_ip, validate_url
from .presence_validator import (
    validate_accepted,
    validate_confirmed,
    validate_different,
    validate_in,
    validate_not_in,
    validate_required,
    validate_same,
)
from .range_validator import (
    validate_max_value,
    validate_min_value,
    validate_value,
    validate_value_between,
)

BUILTIN_VALIDATORS = {
    "accepted": validate_accepted,
    "active_url": validate_active_url,
    "alpha": validate_alpha,
    "alpha_dash": validate_alpha_dash,
    "alpha_num": validate_alpha_num,
    "boolean": validate_boolean,
    "chars": validate_chars,
    "chars_between": validate_chars_between,
    "confirmed": validate_confirmed,
    "date": validate_date,
    "different": validate_different,
    "digits": validate_digits,
    "digits_between": validate_digits_between,
    "email": validate_email,
    "in": validate_in,
    "integer": validate_integer,
    "ip": validate_ip,
    "max_chars": validate_max_chars,
    "max_digits": validate_max_digits,
    "max_value": validate_max_value,
    "min_chars": validate_min_chars,
    "min_digits": validate_min_digits,
    "min_value": validate_min_value,
    "not_in": validate_not_in,
    "numeric": validate_numeric,
    "regex": validate_regex,
    "required": validate_required,
    "same": validate_same,
    "url": validate_url,
    "value": validate_value,
    "value_between": validate_value_between,
}

__all__ = [
    "BUILTIN_VALIDATORS",
    "validate_accepted",
    "validate_active_url",
    "validate_alpha",
    "validate_alpha_dash",
    "validate_alpha_num",
    "validate_boolean",
    "validate_chars",
    "validate_chars_between",
    "validate_confirmed",
    "validate_date",
    "validate_different",
    "validate_digits",
    "validate_digits_between",
    "validate_email",
    "validate_in",
    "validate_integer",
    "validate_ip",
    "validate_max_chars",
    "validate_max_digits",
    "validate_max_value",
    "validate_min_chars",
    "validate_min_digits",
    "validate_min_value",
    "validate_not_in",
    "validate_numeric",
    "validate_regex",
    "validate_required",
    "validate_same",
    "validate_url",
    "validate_value",
    "validate_value_between",
]
