"""
Numeric value predicates - the submitted text is parsed as a float and
compared against float bounds taken from the parameters.
"""

from .base_validator import parse_float, single_param


def _value_and_bound(value: str, params: list[str]) -> tuple[float, float] | None:
    """Parse both the value and the single bound, or None if either fails."""
    param = single_param(params)
    if param is None:
        return None
    bound = parse_float(param)
    number = parse_float(value)
    if bound is None or number is None:
        return None
    return number, bound


def validate_value(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    parsed = _value_and_bound(value, params)
    return parsed is not None and parsed[0] == parsed[1]


def validate_min_value(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    parsed = _value_and_bound(value, params)
    return parsed is not None and parsed[0] >= parsed[1]


def validate_max_value(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    parsed = _value_and_bound(value, params)
    return parsed is not None and parsed[0] <= parsed[1]


def validate_value_between(name: str, value: str, inputs: dict[str, str], params: list[str]) -> bool:
    """Value must lie in [MIN, MAX], both inclusive."""
    if len(params) != 2:
        return False
    return (
        validate_min_value(name, value, inputs, [params[0]])
        and validate_max_value(name, value, inputs, [params[1]])
    )
