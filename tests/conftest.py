"""Shared test fixtures for rulecheck."""

from __future__ import annotations

import pytest
import structlog

from rulecheck.config import Settings
from rulecheck.validation.engine import Validator
from rulecheck.validation.evaluator import RuleEvaluator
from rulecheck.validation.store import RuleStore


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test installs."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any .env file in the working directory."""
    return Settings(_env_file=None)


@pytest.fixture
def store() -> RuleStore:
    """An isolated rule store, so tests never touch the process-wide one."""
    return RuleStore()


@pytest.fixture
def evaluator() -> RuleEvaluator:
    return RuleEvaluator()


@pytest.fixture
def validator(store, evaluator, settings) -> Validator:
    """Validator bound to the isolated store."""
    return Validator(store=store, evaluator=evaluator, settings=settings)


@pytest.fixture
def make_validator(store, evaluator):
    """Build a validator on the isolated store with overridden settings."""

    def _make(**overrides) -> Validator:
        return Validator(store=store, evaluator=evaluator, settings=Settings(_env_file=None, **overrides))

    return _make
