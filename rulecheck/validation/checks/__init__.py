"""Per-kind rule checks."""

from rulecheck.validation.checks.base import BaseCheck
from rulecheck.validation.checks.presence import RequiredCheck
from rulecheck.validation.checks.text import MinLengthCheck, MaxLengthCheck, EmailCheck, PatternCheck
from rulecheck.validation.checks.numeric import RangeCheck
from rulecheck.validation.checks.custom import CustomCheck

__all__ = [
    "BaseCheck",
    "RequiredCheck",
    "MinLengthCheck",
    "MaxLengthCheck",
    "EmailCheck",
    "PatternCheck",
    "RangeCheck",
    "CustomCheck",
]
