"""Presence check: the attribute must hold something."""

from typing import Any

from rulecheck.validation.checks.base import BaseCheck
from rulecheck.validation.models import RuleKind


class RequiredCheck(BaseCheck):
    """Fails for None (including absent attributes) and the empty string."""

    @property
    def kind(self) -> str:
        return RuleKind.REQUIRED.value

    def check(self, value: Any, parameter: Any = None) -> bool:
        if value is None:
            return False
        return not (self._is_text(value) and value == "")
