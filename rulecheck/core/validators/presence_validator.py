"""
Presence, choice and cross-field comparison predicates.
"""

ACCEPTED_VALUES = ("1", "true", "yes", "on")


def validate_required(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """Value must be non-empty."""
    return value != ""


def validate_accepted(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """Value must be one of the "checkbox ticked" spellings."""
    return value in ACCEPTED_VALUES


def validate_in(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    return value in params


def validate_not_in(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    return value not in params


def validate_same(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """
    Value must equal the submitted value of another field.

    The other field is named by the single parameter; a missing field
    counts as a mismatch.
    """
    if len(params) != 1:
        return False
    other = params[0]
    return other in inputs and inputs[other] == value


def validate_different(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    return not validate_same(name, value, inputs, params)


def validate_confirmed(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """Value must equal the ``<name>_confirmation`` field."""
    confirmation = f"{name}_confirmation"
    return confirmation in inputs and inputs[confirmation] == value
