"""rulecheck: declarative, rule-based validation for plain Python objects."""

from rulecheck.config import Settings, get_settings
from rulecheck.exceptions import RulecheckError, RuleConfigurationError, UnknownRuleKindError
from rulecheck.log import configure_logging
from rulecheck.validation import (
    RuleKind,
    RuleDescriptor,
    RangeBounds,
    ValidationError,
    ValidationResult,
    RuleStore,
    rule_store,
    RuleEvaluator,
    Validator,
    validator,
    required,
    min_length,
    max_length,
    email,
    in_range,
    pattern,
    custom,
    register_rule,
    validated,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "RulecheckError",
    "RuleConfigurationError",
    "UnknownRuleKindError",
    "configure_logging",
    "RuleKind",
    "RuleDescriptor",
    "RangeBounds",
    "ValidationError",
    "ValidationResult",
    "RuleStore",
    "rule_store",
    "RuleEvaluator",
    "Validator",
    "validator",
    "required",
    "min_length",
    "max_length",
    "email",
    "in_range",
    "pattern",
    "custom",
    "register_rule",
    "validated",
]
