"""
RuleEntry model representing one slot of the rule registry.
"""

from typing import Any, Callable, Dict, List

from pydantic import BaseModel

# predicate(field_name, value, inputs, params) -> passed
Predicate = Callable[[str, str, Dict[str, str], List[str]], bool]


class RuleEntry(BaseModel):
    """
    A predicate and the message template reported when it fails.

    The template carries one ``%s`` for the field name plus one per rule
    parameter. Mismatches are not checked here; they surface when the
    message is built.

    Attributes:
        name: Rule name used in rule strings
        predicate: Callable deciding pass/fail for one value
        message: printf-style message template
    """

    name: str
    predicate: Callable[..., Any]
    message: str

    class Config:
        frozen = True
        arbitrary_types_allowed = True
