"""
Shared parsing helpers for the built-in rule predicates.

Every predicate has the same signature::

    def predicate(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool

and reports failure by returning False. Helpers here never raise; an
unparseable number is returned as None so predicates can treat it as a
failed precondition.
"""

import math
import re

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOATS = {"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity", "nan", "+nan", "-nan"}

INT16_MIN, INT16_MAX = -(2 ** 15), 2 ** 15 - 1
INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1


def parse_int(text: str, minimum: int = INT64_MIN, maximum: int = INT64_MAX) -> int | None:
    """
    Parse a base-10 integer literal with an optional sign.

    Args:
        text: Literal to parse (no surrounding whitespace, no underscores)
        minimum: Smallest accepted value
        maximum: Largest accepted value

    Returns:
        The integer, or None if the literal is malformed or out of range
    """
    if not _INT_RE.fullmatch(text):
        return None
    try:
        number = int(text)
    except ValueError:
        # longer than the interpreter's int string conversion limit
        return None
    if number < minimum or number > maximum:
        return None
    return number


def parse_count(text: str) -> int | None:
    """Parse a character/digit count parameter (signed 16-bit range)."""
    return parse_int(text, INT16_MIN, INT16_MAX)


def parse_float(text: str) -> float | None:
    """
    Parse a floating point literal.

    Accepts decimal and exponent notation, hexadecimal floats with a
    binary exponent ("0x1p-2") and the inf/infinity/nan spellings.
    Literals that overflow a double are rejected.

    Returns:
        The float, or None if the literal is malformed or out of range
    """
    if text.lower() in _SPECIAL_FLOATS:
        return float(text)

    if _FLOAT_RE.fullmatch(text):
        number = float(text)
    elif _HEX_FLOAT_RE.fullmatch(text):
        try:
            number = float.fromhex(text)
        except OverflowError:
            return None
    else:
        return None

    if math.isinf(number):
        return None
    return number


def single_param(params: list[str]) -> str | None:
    """Return the only parameter, or None when the count is not exactly one."""
    if len(params) == 1:
        return params[0]
    return None
