"""
Length predicates - character counts and digit counts.

Counts are parsed from the parameters as base-10 integers in the signed
16-bit range; anything else fails the rule.
"""

import re

from .base_validator import parse_count, single_param

DIGITS_RE = re.compile(r"[0-9]+")


def _count_param(params: list[str]) -> int | None:
    param = single_param(params)
    if param is None:
        return None
    return parse_count(param)


def _is_digits(value: str) -> bool:
    return DIGITS_RE.fullmatch(value) is not None


def validate_chars(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    count = _count_param(params)
    return count is not None and len(value) == count


def validate_min_chars(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    count = _count_param(params)
    return count is not None and len(value) >= count


def validate_max_chars(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    count = _count_param(params)
    return count is not None and len(value) <= count


def validate_chars_between(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """Length must lie in [MIN, MAX], both inclusive."""
    if len(params) != 2:
        return False
    return (
        validate_min_chars(name, value, inputs, [params[0]])
        and validate_max_chars(name, value, inputs, [params[1]])
    )


def validate_digits(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    count = _count_param(params)
    return count is not None and _is_digits(value) and len(value) == count


def validate_min_digits(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    count = _count_param(params)
    return count is not None and _is_digits(value) and len(value) >= count


def validate_max_digits(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    count = _count_param(params)
    return count is not None and _is_digits(value) and len(value) <= count


def validate_digits_between(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    if len(params) != 2:
        return False
    return (
        validate_min_digits(name, value, inputs, [params[0]])
        and validate_max_digits(name, value, inputs, [params[1]])
    )
