"""
Rule registry mapping rule names to predicates and message templates.

Thread-safety contract: ``register`` and ``lookup`` share one lock, and
the engine validates against a ``snapshot`` taken when a run starts, so a
registration made while a validation is in flight only affects later runs.
"""

import logging
import threading

from rulecheck.core.models import Predicate, RuleEntry
from rulecheck.core.validators import BUILTIN_VALIDATORS

from .messages import DEFAULT_MESSAGES

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Mutable table of rule name -> RuleEntry.

    Registering an existing name replaces both its predicate and its
    message template. Registration never validates the template; a
    template with the wrong number of placeholders only degrades the
    message built on failure.
    """

    def __init__(self, include_builtins: bool = True):
        """
        Initialize the registry.

        Args:
            include_builtins: Populate with the built-in rules
        """
        self._entries: dict[str, RuleEntry] = {}
        self._lock = threading.RLock()
        if include_builtins:
            register_builtins(self)

    def register(self, name: str, predicate: Predicate, message: str) -> None:
        """
        Insert or replace a rule.

        Args:
            name: Rule name as written in rule strings
            predicate: Callable ``(name, value, inputs, params) -> bool``
            message: printf-style template, one ``%s`` for the field plus one per parameter
        """
        entry = RuleEntry(name=name, predicate=predicate, message=message)
        with self._lock:
            replaced = name in self._entries
            self._entries[name] = entry
        if replaced:
            logger.debug(f"Replaced rule '{name}'")

    def lookup(self, name: str) -> RuleEntry | None:
        """Return the entry registered under ``name``, or None."""
        with self._lock:
            return self._entries.get(name)

    def snapshot(self) -> dict[str, RuleEntry]:
        """Return a point-in-time copy of all entries."""
        with self._lock:
            return dict(self._entries)

    def restore(self, entries: dict[str, RuleEntry]) -> None:
        """Replace all entries with a table previously returned by ``snapshot``."""
        with self._lock:
            self._entries = dict(entries)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rules={len(self)})"


def register_builtins(registry: RuleRegistry) -> None:
    """Register every built-in predicate with its default message."""
    for name, predicate in BUILTIN_VALIDATORS.items():
        registry.register(name, predicate, DEFAULT_MESSAGES[name])


# Process-wide registry used by rulecheck.validate()
default_registry = RuleRegistry()


def add_validator(name: str, predicate: Predicate, message: str) -> None:
    """
    Register a rule with the process-wide registry.

    Intended for application startup; see the module docstring for the
    thread-safety contract.
    """
    default_registry.register(name, predicate, message)
