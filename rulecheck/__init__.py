"""
rulecheck - declarative field validation for web-application backends.

Usage::

    from rulecheck import validate, add_validator

    result = validate(form, {
        "email": "required|email",
        "password": "required|min_chars:8|confirmed",
        "age": "integer|min_value:0",
    })
    if not result:
        return {"errors": result.messages}, 422
"""

from rulecheck.core.models import ParsedRule, RuleEntry, ValidationError, ValidationResult
from rulecheck.core.rules import (
    RuleConfigBuilder,
    RuleConfigError,
    RuleConfigLoader,
    RuleEngine,
    RuleRegistry,
    add_validator,
    default_registry,
    rules_from_model,
    validate,
)

__all__ = [
    "ParsedRule",
    "RuleConfigBuilder",
    "RuleConfigError",
    "RuleConfigLoader",
    "RuleEngine",
    "RuleEntry",
    "RuleRegistry",
    "ValidationError",
    "ValidationResult",
    "add_validator",
    "default_registry",
    "rules_from_model",
    "validate",
]
