"""
Rule set configuration management.

Rule sets map field names to rule strings. They can be written directly
as a dict, loaded from YAML files, built programmatically, or derived
from the field metadata of a pydantic model.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from rulecheck.observability.logger import log_operation

from .parser import RULE_SEPARATOR

logger = logging.getLogger(__name__)

RULES_SECTION = "rules"
MODEL_RULES_KEY = "validate"


class RuleConfigError(ValueError):
    """Raised when a rule set definition is malformed."""


def normalize_rule_string(field_name: str, rule_def: Any) -> str:
    """
    Turn a YAML rule definition into a rule string.

    Args:
        field_name: Field the rules apply to (for error messages)
        rule_def: A rule string, or a list of rule tokens

    Returns:
        Pipe-delimited rule string

    Raises:
        RuleConfigError: If the definition is neither a string nor a list of strings
    """
    if isinstance(rule_def, str):
        return rule_def
    if isinstance(rule_def, list):
        if not all(isinstance(token, str) for token in rule_def):
            raise RuleConfigError(f"Rules for field '{field_name}' must be a list of strings")
        return RULE_SEPARATOR.join(rule_def)
    raise RuleConfigError(
        f"Rules for field '{field_name}' must be a string or a list, got {type(rule_def).__name__}"
    )


class RuleConfigLoader:
    """
    Loads rule sets from YAML configuration files.

    Expected YAML format:
    ```yaml
    rules:
      email: "required|email"
      password:
        - required
        - min_chars:8
        - confirmed
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load_rules(self) -> dict[str, str]:
        """
        Load and parse the rule set from the YAML file.

        Returns:
            Field name -> rule string, ready for RuleEngine.validate()

        Raises:
            RuleConfigError: If YAML is invalid or the rules section is malformed
        """
        with log_operation("Loading rule set", logger=logger, path=str(self.config_path)):
            with open(self.config_path) as f:
                try:
                    config = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise RuleConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

            return parse_rule_set(config)


def parse_rule_set(config: Any) -> dict[str, str]:
    """
    Parse an already-loaded configuration mapping with a ``rules`` section.

    Raises:
        RuleConfigError: If the ``rules`` section is missing or malformed
    """
    if not isinstance(config, dict) or RULES_SECTION not in config:
        raise RuleConfigError("Configuration must contain a 'rules' section")

    field_rules = config[RULES_SECTION]
    if not isinstance(field_rules, dict):
        raise RuleConfigError("The 'rules' section must map field names to rules")

    return {
        str(field_name): normalize_rule_string(str(field_name), rule_def)
        for field_name, rule_def in field_rules.items()
    }


class RuleConfigBuilder:
    """
    Programmatically build rule sets (for testing or dynamic rules).

    Example::

        rules = RuleConfigBuilder() \\
            .required("email", "email") \\
            .add("nickname", "alpha_dash", "max_chars:20") \\
            .build()
    """

    def __init__(self):
        self.rules: dict[str, list[str]] = {}

    def add(self, field_name: str, *tokens: str) -> "RuleConfigBuilder":
        """Append rule tokens to a field, keeping declaration order."""
        self.rules.setdefault(field_name, []).extend(tokens)
        return self

    def required(self, field_name: str, *tokens: str) -> "RuleConfigBuilder":
        """Add ``required`` followed by any further tokens."""
        return self.add(field_name, "required", *tokens)

    def always(self, field_name: str, *tokens: str) -> "RuleConfigBuilder":
        """Add ``always`` followed by any further tokens."""
        return self.add(field_name, "always", *tokens)

    def build(self) -> dict[str, str]:
        """Build and return the rule set."""
        return {field: RULE_SEPARATOR.join(tokens) for field, tokens in self.rules.items()}


def rules_from_model(model: type[BaseModel]) -> dict[str, str]:
    """
    Derive a rule set from a pydantic model's declared field metadata.

    Fields carry their rule string in ``json_schema_extra`` under
    ``"validate"``; the field's alias (if any) is used as the input name.
    Fields without a rule string are left out.

    Example::

        class SignupForm(BaseModel):
            email: str = Field(json_schema_extra={"validate": "required|email"})
            display_name: str = Field(alias="displayName",
                                      json_schema_extra={"validate": "alpha_num"})

        rules_from_model(SignupForm)
        # {"email": "required|email", "displayName": "alpha_num"}
    """
    rules: dict[str, str] = {}
    for field_name, field_info in model.model_fields.items():
        extra = field_info.json_schema_extra
        if not isinstance(extra, dict):
            continue
        rule_string = extra.get(MODEL_RULES_KEY)
        if not rule_string:
            continue
        input_name = field_info.alias or field_name
        rules[input_name] = normalize_rule_string(input_name, rule_string)
    return rules
