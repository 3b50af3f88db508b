"""Rule Evaluator: decides whether one value satisfies one rule.

Dispatches on RuleDescriptor.kind to the registered check for that kind.

Usage:
    evaluator = RuleEvaluator()
    passed = evaluator.evaluate("a@b.co", email())
"""

from typing import Any, Optional

import structlog

from rulecheck.validation.checks import (
    BaseCheck,
    RequiredCheck,
    MinLengthCheck,
    MaxLengthCheck,
    EmailCheck,
    RangeCheck,
    PatternCheck,
    CustomCheck,
)
from rulecheck.validation.models import RuleDescriptor

logger = structlog.get_logger()


class RuleEvaluator:
    """Maps rule kinds to checks and runs them.

    Design principles:
        - Total: evaluate() never raises, whatever the value
        - Permissive: kinds without a check pass
        - Extensible: add checks without modifying the evaluator
    """

    def __init__(self, checks: Optional[list[BaseCheck]] = None):
        """Initialize with the built-in checks or a custom list.

        Args:
            checks: Optional list of checks. If None, uses all defaults.
        """
        self._checks: dict[str, BaseCheck] = {}
        for check in checks if checks is not None else self._default_checks():
            self.add_check(check)

    @staticmethod
    def _default_checks() -> list[BaseCheck]:
        return [
            RequiredCheck(),
            MinLengthCheck(),
            MaxLengthCheck(),
            EmailCheck(),
            RangeCheck(),
            PatternCheck(),
            CustomCheck(),
        ]

    @property
    def kinds(self) -> list[str]:
        return list(self._checks)

    def knows(self, kind: str) -> bool:
        return kind in self._checks

    def evaluate(self, value: Any, rule: RuleDescriptor) -> bool:
        """Return True when ``value`` satisfies ``rule``.

        A check that raises counts as a failed rule; the exception is logged
        and not propagated.
        """
        check = self._checks.get(rule.kind)
        if check is None:
            return True

        try:
            return bool(check.check(value, rule.parameter))
        except Exception as e:
            logger.error(
                "rule_check_crashed",
                kind=rule.kind,
                check=type(check).__name__,
                error=str(e),
            )
            return False

    def add_check(self, check: BaseCheck) -> None:
        """Register a check, replacing any existing check for its kind."""
        self._checks[check.kind] = check

    def remove_check(self, kind: str) -> None:
        """Remove the check for a kind; rules of that kind then always pass."""
        self._checks.pop(kind, None)
