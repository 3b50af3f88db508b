"""Numeric checks."""

from decimal import Decimal
from typing import Any

from rulecheck.validation.checks.base import BaseCheck
from rulecheck.validation.models import RangeBounds, RuleKind


class RangeCheck(BaseCheck):
    """Inclusive bounds; strings such as "5" fail even when they look numeric, NaN always fails."""

    @property
    def kind(self) -> str:
        return RuleKind.RANGE.value

    def check(self, value: Any, parameter: Any = None) -> bool:
        if not self._is_number(value):
            return False
        # NaN raises when ordered against a Decimal instead of comparing False
        if (value.is_nan() if isinstance(value, Decimal) else value != value):
            return False
        bounds: RangeBounds = parameter
        return bounds.min <= value <= bounds.max
