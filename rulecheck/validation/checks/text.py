"""Text checks: length bounds, email shape and regular expressions.

Every check here fails for non-string values, so a number stored where a
name is expected surfaces as a validation error rather than a TypeError.
"""

import re
from typing import Any

from rulecheck.validation.checks.base import BaseCheck
from rulecheck.validation.models import RuleKind

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class MinLengthCheck(BaseCheck):

    @property
    def kind(self) -> str:
        return RuleKind.MIN_LENGTH.value

    def check(self, value: Any, parameter: Any = None) -> bool:
        return self._is_text(value) and len(value) >= parameter


class MaxLengthCheck(BaseCheck):

    @property
    def kind(self) -> str:
        return RuleKind.MAX_LENGTH.value

    def check(self, value: Any, parameter: Any = None) -> bool:
        return self._is_text(value) and len(value) <= parameter


class EmailCheck(BaseCheck):
    """Loose address shape: local@domain.tld, no whitespace, a single @."""

    @property
    def kind(self) -> str:
        return RuleKind.EMAIL.value

    def check(self, value: Any, parameter: Any = None) -> bool:
        # fullmatch so a trailing newline cannot slip past $
        return self._is_text(value) and EMAIL_PATTERN.fullmatch(value) is not None


class PatternCheck(BaseCheck):
    """Passes when the pattern occurs anywhere in the value (search, not match)."""

    @property
    def kind(self) -> str:
        return RuleKind.PATTERN.value

    def check(self, value: Any, parameter: Any = None) -> bool:
        if not self._is_text(value):
            return False
        regex = parameter if isinstance(parameter, re.Pattern) else re.compile(parameter)
        return regex.search(value) is not None
