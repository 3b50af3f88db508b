"""Custom check: delegates to a caller-supplied predicate."""

from typing import Any

from rulecheck.validation.checks.base import BaseCheck
from rulecheck.validation.models import RuleKind


class CustomCheck(BaseCheck):

    @property
    def kind(self) -> str:
        return RuleKind.CUSTOM.value

    def check(self, value: Any, parameter: Any = None) -> bool:
        return bool(parameter(value))
