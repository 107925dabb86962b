"""
Rule engine for evaluating rule strings against submitted field values.

The engine decides per field whether its rules run at all (presence,
``required`` and ``always`` policy), runs them left to right and keeps
the message of the last failing rule.
"""

import logging
from collections.abc import Mapping

from rulecheck.core.models import ParsedRule, RuleEntry, ValidationResult
from rulecheck.observability.metrics import (
    record_predicate_error,
    record_rule_failure,
    record_unknown_rule,
    record_validation,
    track_duration,
    validation_duration_seconds,
)

from .messages import build_error_message
from .parser import split_rule_params, split_rules
from .registry import RuleRegistry, default_registry

logger = logging.getLogger(__name__)

REQUIRED_RULE = "required"
ALWAYS_RULE = "always"


class RuleEngine:
    """
    Evaluates rule sets against field value sets.

    Each run validates against a snapshot of the registry taken when the
    run starts.
    """

    def __init__(self, registry: RuleRegistry | None = None):
        """
        Initialize the rule engine.

        Args:
            registry: Rule registry to consult (defaults to the process-wide one)
        """
        self.registry = registry if registry is not None else default_registry

    def validate(self, values: Mapping[str, str], rules: Mapping[str, str]) -> ValidationResult:
        """
        Validate submitted values against per-field rule strings.

        Args:
            values: Field name -> submitted value; absent differs from ""
            rules: Field name -> pipe-delimited rule string

        Returns:
            ValidationResult with the overall flag and at most one message per field
        """
        with track_duration(validation_duration_seconds):
            entries = self.registry.snapshot()
            inputs = dict(values)
            messages: dict[str, str] = {}

            for field_name, rule_string in rules.items():
                message = self._validate_field(field_name, rule_string, inputs, entries)
                if message is not None:
                    messages[field_name] = message

        passed = not messages
        record_validation(passed)
        logger.debug(
            f"Validated {len(rules)} field(s), {len(messages)} failed",
            extra={"passed": passed, "failed_fields": sorted(messages)},
        )
        return ValidationResult(passed=passed, messages=messages)

    def _validate_field(
        self,
        field_name: str,
        rule_string: str,
        inputs: dict[str, str],
        entries: dict[str, RuleEntry],
    ) -> str | None:
        """Return the message for the last failing rule of one field, or None."""
        tokens = split_rules(rule_string)
        is_required = REQUIRED_RULE in tokens
        always_validate = ALWAYS_RULE in tokens
        present = field_name in inputs
        value = inputs.get(field_name, "")

        if is_required and not present:
            record_rule_failure(REQUIRED_RULE)
            return self._message(field_name, ParsedRule(name=REQUIRED_RULE), entries)

        if not (is_required or always_validate or value != ""):
            # Optional and empty/absent: nothing to check
            return None

        message = None
        for token in tokens:
            rule = split_rule_params(token)
            entry = entries.get(rule.name)
            if entry is None:
                if rule.name != ALWAYS_RULE:
                    logger.debug(f"Skipping unknown rule '{rule.name}' on field '{field_name}'")
                    record_unknown_rule(rule.name)
                continue

            if not self._run_predicate(entry, field_name, value, inputs, rule):
                logger.debug(f"Rule '{rule.name}' failed on field '{field_name}'")
                record_rule_failure(rule.name)
                message = self._message(field_name, rule, entries)

        return message

    def _run_predicate(
        self,
        entry: RuleEntry,
        field_name: str,
        value: str,
        inputs: dict[str, str],
        rule: ParsedRule,
    ) -> bool:
        """Call a predicate; one that raises counts as a failed rule."""
        try:
            return bool(entry.predicate(field_name, value, inputs, list(rule.params)))
        except Exception as e:
            logger.warning(
                f"Rule '{rule.name}' raised on field '{field_name}': {e}",
                exc_info=True,
            )
            record_predicate_error(rule.name)
            return False

    @staticmethod
    def _message(field_name: str, rule: ParsedRule, entries: dict[str, RuleEntry]) -> str:
        entry = entries.get(rule.name)
        template = entry.message if entry is not None else None
        return build_error_message(field_name, template, rule.params)


def validate(values: Mapping[str, str], rules: Mapping[str, str]) -> ValidationResult:
    """
    Validate against the process-wide registry.

    Example::

        result = validate(
            {"name": "Bob123", "age": "-5"},
            {"name": "required|alpha", "age": "integer|min_value:0"},
        )
        if not result:
            # result.messages == {"name": "The name may only contain letters.",
            #                     "age": "The age must be greater than 0."}
            ...
    """
    return RuleEngine().validate(values, rules)
