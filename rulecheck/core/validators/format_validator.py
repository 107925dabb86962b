"""
Format predicates - character classes, literals, regular expressions and dates.
"""

import re
from datetime import datetime

from .base_validator import parse_float, parse_int, single_param

ALPHA_RE = re.compile(r"[a-zA-Z]+")
ALPHA_DASH_RE = re.compile(r"[a-zA-Z0-9\-_]+")
ALPHA_NUM_RE = re.compile(r"[a-zA-Z0-9]+")

# Structure only, not deliverability
EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}")

BOOLEAN_LITERALS = frozenset({
    "1", "t", "T", "TRUE", "true", "True",
    "0", "f", "F", "FALSE", "false", "False",
})


def validate_alpha(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    return ALPHA_RE.fullmatch(value) is not None


def validate_alpha_dash(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    return ALPHA_DASH_RE.fullmatch(value) is not None


def validate_alpha_num(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    return ALPHA_NUM_RE.fullmatch(value) is not None


def validate_boolean(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    return value in BOOLEAN_LITERALS


def validate_integer(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """Value must be a base-10 integer that fits in 64 bits."""
    return parse_int(value) is not None


def validate_numeric(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    return parse_float(value) is not None


def validate_email(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    return EMAIL_RE.fullmatch(value) is not None


def validate_regex(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """
    Value must fully match the pattern given as the single parameter.

    A pattern that does not compile fails the rule. Patterns containing
    ``,`` or ``:`` cannot be expressed in a rule token; register a
    dedicated rule for those.
    """
    pattern = single_param(params)
    if pattern is None:
        return False
    try:
        compiled = re.compile(pattern)
    except (re.error, OverflowError, RecursionError):
        return False
    return compiled.fullmatch(value) is not None


def validate_date(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """Value must parse under the ``strptime`` layout given as the single parameter."""
    layout = single_param(params)
    if layout is None:
        return False
    try:
        datetime.strptime(value, layout)
    except ValueError:
        return False
    return True
