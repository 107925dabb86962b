"""
Rule registry, rule string parsing, evaluation engine and rule set configuration.
"""

from .messages import DEFAULT_MESSAGES, build_error_message
from .parser import split_rule_params, split_rules
from .registry import RuleRegistry, add_validator, default_registry, register_builtins
from .rule_config import (
    RuleConfigBuilder,
    RuleConfigError,
    RuleConfigLoader,
    parse_rule_set,
    rules_from_model,
)
from .rule_engine import RuleEngine, validate

__all__ = [
    "DEFAULT_MESSAGES",
    "RuleConfigBuilder",
    "RuleConfigError",
    "RuleConfigLoader",
    "RuleEngine",
    "RuleRegistry",
    "add_validator",
    "build_error_message",
    "default_registry",
    "parse_rule_set",
    "register_builtins",
    "rules_from_model",
    "split_rule_params",
    "split_rules",
    "validate",
]
