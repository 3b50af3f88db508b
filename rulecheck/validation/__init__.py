"""Rule-based validation: registry, evaluator and validator.

Usage:
    from rulecheck.validation import validated, required, min_length, validator

    @validated(name=[required(), min_length(2)])
    class User: ...

    result = validator.validate(user)
"""

from rulecheck.validation.models import (
    RuleKind,
    RuleDescriptor,
    RangeBounds,
    ValidationError,
    ValidationResult,
)
from rulecheck.validation.store import RuleStore, rule_store
from rulecheck.validation.evaluator import RuleEvaluator
from rulecheck.validation.engine import Validator, validator
from rulecheck.validation.rules import (
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

__all__ = [
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
