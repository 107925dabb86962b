"""
Unit tests for Pydantic data models.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from rulecheck.core.models import ParsedRule, RuleEntry, ValidationError, ValidationResult


class TestValidationResult:
    """Tests for ValidationResult model"""

    def test_passed_result(self):
        result = ValidationResult(passed=True)
        assert result.messages == {}
        assert bool(result) is True
        result.raise_for_errors()  # Should not raise

    def test_failed_result_is_falsy(self):
        result = ValidationResult(passed=False, messages={"name": "The name field is required."})
        assert bool(result) is False

    def test_passed_with_messages_rejected(self):
        """Test that passed=True with messages raises ValidationError"""
        with pytest.raises(PydanticValidationError) as exc_info:
            ValidationResult(passed=True, messages={"name": "bad"})
        assert "passed=True" in str(exc_info.value)

    @pytest.mark.parametrize("kwargs", [{}, {"messages": {}}])
    def test_failed_without_messages_rejected(self, kwargs):
        """Test that passed=False requires at least one message"""
        with pytest.raises(PydanticValidationError) as exc_info:
            ValidationResult(passed=False, **kwargs)
        assert "passed=False" in str(exc_info.value)

    def test_raise_for_errors(self):
        result = ValidationResult(passed=False, messages={"age": "The age must be an integer."})

        with pytest.raises(ValidationError) as exc_info:
            result.raise_for_errors()

        assert exc_info.value.messages == {"age": "The age must be an integer."}
        assert "age: The age must be an integer." in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)

    def test_json_round_trip(self):
        result = ValidationResult(passed=False, messages={"a": "x"})
        assert ValidationResult.model_validate_json(result.model_dump_json()) == result


class TestParsedRule:
    """Tests for ParsedRule model"""

    def test_defaults(self):
        rule = ParsedRule(name="required")
        assert rule.params == []

    def test_frozen(self):
        rule = ParsedRule(name="chars", params=["4"])
        with pytest.raises(PydanticValidationError):
            rule.name = "digits"


class TestRuleEntry:
    """Tests for RuleEntry model"""

    def test_holds_callable(self):
        def predicate(name, value, inputs, params):
            return True

        entry = RuleEntry(name="ok", predicate=predicate, message="The %s is fine.")
        assert entry.predicate is predicate

    def test_rejects_non_callable(self):
        with pytest.raises(PydanticValidationError):
            RuleEntry(name="bad", predicate="not callable", message="The %s.")
