"""Base check: abstract class implementing the Strategy Pattern.

Each check handles one rule kind and is independently testable.
New kinds are added by registering a check, without modifying the evaluator.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from numbers import Real
from typing import Any


class BaseCheck(ABC):
    """Abstract base for all rule checks.

    Contract:
        - check() is deterministic: same value and parameter -> same answer
        - check() returns False for values of the wrong type instead of raising
        - No I/O, no shared state
    """

    @property
    @abstractmethod
    def kind(self) -> str:
        """Rule kind tag this check answers for."""
        ...

    @abstractmethod
    def check(self, value: Any, parameter: Any = None) -> bool:
        """Decide whether ``value`` satisfies the rule.

        Args:
            value: Current attribute value (None when absent)
            parameter: Kind-specific configuration from the RuleDescriptor

        Returns:
            True when the rule passes
        """
        ...

    # ── Helper Methods ──

    def _is_text(self, value: Any) -> bool:
        return isinstance(value, str)

    def _is_number(self, value: Any) -> bool:
        """Real numbers and Decimal; bool is an int subclass but not a quantity."""
        return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r})"
