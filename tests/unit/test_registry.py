"""
Unit tests for the rule registry.
"""

import threading

from rulecheck import RuleEngine, RuleRegistry
from rulecheck.core.rules import DEFAULT_MESSAGES, default_registry
from rulecheck.core.validators import BUILTIN_VALIDATORS, validate_alpha


def always_true(name, value, inputs, params):
    return True


class TestRuleRegistry:
    """Tests for RuleRegistry"""

    def test_builtins_registered(self, registry):
        assert len(registry) == len(BUILTIN_VALIDATORS)
        assert registry.names() == sorted(BUILTIN_VALIDATORS)

        entry = registry.lookup("alpha")
        assert entry.predicate is validate_alpha
        assert entry.message == DEFAULT_MESSAGES["alpha"]

    def test_empty_registry(self):
        registry = RuleRegistry(include_builtins=False)
        assert len(registry) == 0
        assert registry.lookup("required") is None

    def test_lookup_unknown_returns_none(self, registry):
        assert registry.lookup("no_such_rule") is None
        assert "no_such_rule" not in registry

    def test_register_replaces_predicate_and_template(self, registry):
        registry.register("alpha", always_true, "Changed %s.")

        entry = registry.lookup("alpha")
        assert entry.predicate is always_true
        assert entry.message == "Changed %s."
        assert len(registry) == len(BUILTIN_VALIDATORS)

    def test_register_accepts_malformed_template(self, registry):
        """Test registration never validates the template"""
        registry.register("odd", always_true, "no placeholders at all")
        assert "odd" in registry

    def test_snapshot_is_isolated(self, registry):
        snapshot = registry.snapshot()
        registry.register("later", always_true, "The %s.")

        assert "later" not in snapshot
        assert "later" in registry

    def test_restore_replaces_entries(self, registry):
        saved = registry.snapshot()
        registry.register("later", always_true, "The %s.")
        registry.register("alpha", always_true, "The %s.")

        registry.restore(saved)

        assert "later" not in registry
        assert registry.lookup("alpha").predicate is validate_alpha
        assert registry.names() == sorted(saved)

    def test_engine_with_empty_registry_ignores_everything(self):
        engine = RuleEngine(RuleRegistry(include_builtins=False))
        assert engine.validate({}, {"f": "required|email"}).passed is True

    def test_default_engine_uses_default_registry(self):
        assert RuleEngine().registry is default_registry

    def test_concurrent_registration(self, registry):
        """Test concurrent writers all land in the registry"""
        def register_many(prefix):
            for i in range(50):
                registry.register(f"{prefix}_{i}", always_true, "The %s.")

        threads = [threading.Thread(target=register_many, args=(f"t{n}",)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry) == len(BUILTIN_VALIDATORS) + 200
