"""
Core data models for the rulecheck field validator.

All models use Pydantic for runtime validation and type safety.
"""

from .parsed_rule import ParsedRule
from .rule_entry import Predicate, RuleEntry
from .validation_result import ValidationError, ValidationResult

__all__ = [
    "ParsedRule",
    "Predicate",
    "RuleEntry",
    "ValidationError",
    "ValidationResult",
]
