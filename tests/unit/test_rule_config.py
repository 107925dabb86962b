"""
Unit tests for rule set configuration: YAML loading, builder and model derivation.
"""

import tempfile
from pathlib import Path

import pytest
from pydantic import BaseModel, Field

from rulecheck import RuleConfigBuilder, RuleConfigError, RuleConfigLoader, rules_from_model, validate
from rulecheck.core.rules import parse_rule_set


def write_yaml(content: str) -> Path:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(content)
        return Path(f.name)


class TestRuleConfigLoader:
    """Tests for RuleConfigLoader"""

    def test_load_string_and_list_rules(self):
        """Test loading rules written as strings and as token lists"""
        path = write_yaml(
            """
rules:
  email: "required|email"
  password:
    - required
    - min_chars:8
    - confirmed
"""
        )
        try:
            rules = RuleConfigLoader(path).load_rules()
        finally:
            path.unlink()

        assert rules == {
            "email": "required|email",
            "password": "required|min_chars:8|confirmed",
        }

    def test_loaded_rules_validate(self):
        path = write_yaml("rules:\n  age: 'integer|min_value:0'\n")
        try:
            rules = RuleConfigLoader(path).load_rules()
        finally:
            path.unlink()

        result = validate({"age": "-1"}, rules)
        assert result.messages == {"age": "The age must be greater than 0."}

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            RuleConfigLoader("/nonexistent/rules.yaml")

    def test_missing_rules_section_raises(self):
        path = write_yaml("fields:\n  a: required\n")
        try:
            with pytest.raises(RuleConfigError) as exc_info:
                RuleConfigLoader(path).load_rules()
        finally:
            path.unlink()

        assert "rules" in str(exc_info.value)

    def test_invalid_yaml_raises(self):
        path = write_yaml("rules: [unclosed\n")
        try:
            with pytest.raises(RuleConfigError):
                RuleConfigLoader(path).load_rules()
        finally:
            path.unlink()

    def test_rule_config_error_is_value_error(self):
        assert issubclass(RuleConfigError, ValueError)


class TestParseRuleSet:
    """Tests for parse_rule_set"""

    def test_rejects_non_mapping_rules(self):
        with pytest.raises(RuleConfigError):
            parse_rule_set({"rules": ["required"]})

    def test_rejects_non_string_rule(self):
        with pytest.raises(RuleConfigError) as exc_info:
            parse_rule_set({"rules": {"age": 5}})
        assert "age" in str(exc_info.value)

    def test_rejects_non_string_tokens(self):
        with pytest.raises(RuleConfigError):
            parse_rule_set({"rules": {"age": ["integer", 3]}})

    def test_empty_document_raises(self):
        with pytest.raises(RuleConfigError):
            parse_rule_set(None)


class TestRuleConfigBuilder:
    """Tests for RuleConfigBuilder"""

    def test_build_rule_set(self):
        rules = RuleConfigBuilder() \
            .required("email", "email") \
            .add("nickname", "alpha_dash") \
            .add("nickname", "max_chars:20") \
            .always("terms", "accepted") \
            .build()

        assert rules == {
            "email": "required|email",
            "nickname": "alpha_dash|max_chars:20",
            "terms": "always|accepted",
        }

    def test_empty_builder(self):
        assert RuleConfigBuilder().build() == {}


class SignupForm(BaseModel):
    email: str = Field(json_schema_extra={"validate": "required|email"})
    display_name: str = Field(alias="displayName", json_schema_extra={"validate": "alpha_num|max_chars:12"})
    age: str = Field(json_schema_extra={"validate": ["integer", "min_value:13"]})
    note: str = ""


class TestRulesFromModel:
    """Tests for deriving rule sets from pydantic models"""

    def test_rules_from_model(self):
        assert rules_from_model(SignupForm) == {
            "email": "required|email",
            "displayName": "alpha_num|max_chars:12",
            "age": "integer|min_value:13",
        }

    def test_derived_rules_validate(self):
        result = validate(
            {"email": "a@b.io", "displayName": "bad name!", "age": "12"},
            rules_from_model(SignupForm),
        )

        assert result.passed is False
        assert set(result.messages) == {"displayName", "age"}
