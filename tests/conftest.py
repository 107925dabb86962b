"""
Pytest configuration and fixtures for rulecheck tests

This module provides shared fixtures for the unit tests.
"""
import socket
from typing import Generator

import pytest

from rulecheck import RuleEngine, RuleRegistry
from rulecheck.core.rules import default_registry


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "network: Tests that exercise DNS-dependent rules (resolution is stubbed)"
    )


# =======================
# REGISTRY FIXTURES
# =======================

@pytest.fixture
def registry() -> RuleRegistry:
    """Fresh registry populated with the built-in rules"""
    return RuleRegistry()


@pytest.fixture
def engine(registry) -> RuleEngine:
    """Rule engine bound to a fresh registry"""
    return RuleEngine(registry)


@pytest.fixture
def restore_default_registry() -> Generator[None, None, None]:
    """
    Restore the process-wide registry after a test registers rules in it
    """
    saved = default_registry.snapshot()
    yield
    default_registry.restore(saved)


# =======================
# DNS FIXTURES
# =======================

@pytest.fixture
def fake_dns(monkeypatch) -> set[str]:
    """
    Stub socket.getaddrinfo so only hosts added to the returned set resolve
    """
    known_hosts: set[str] = set()

    def getaddrinfo(host, port, *args, **kwargs):
        if host in known_hosts:
            return [(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("93.184.216.34", 0))]
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    monkeypatch.setattr(socket, "getaddrinfo", getaddrinfo)
    return known_hosts


# =======================
# SAMPLE DATA FIXTURES
# =======================

@pytest.fixture
def signup_values() -> dict[str, str]:
    """Valid sign-up form submission"""
    return {
        "name": "Alice",
        "email": "alice@example.com",
        "password": "s3cretpass",
        "password_confirmation": "s3cretpass",
        "age": "34",
        "terms": "yes",
    }


@pytest.fixture
def signup_rules() -> dict[str, str]:
    """Rule set matching signup_values"""
    return {
        "name": "required|alpha|max_chars:20",
        "email": "required|email",
        "password": "required|min_chars:8|confirmed",
        "age": "integer|value_between:13,120",
        "terms": "required|accepted",
        "nickname": "alpha_dash|chars_between:3,16",
    }
