"""
ParsedRule model representing one rule token split into name and parameters.
"""

from typing import List

from pydantic import BaseModel, Field


class ParsedRule(BaseModel):
    """
    A single rule token after parsing (e.g. "chars_between:5,10").

    Attributes:
        name: Registry key of the rule ("chars_between")
        params: Positional parameters, order is rule-specific (["5", "10"])
    """

    name: str
    params: List[str] = Field(default_factory=list)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "chars_between",
                "params": ["5", "10"],
            }
        }
