"""Validation models: rule kinds, rule descriptors and the result structure.

All evaluation is deterministic: the same instance and rules always produce
the same errors in the same order.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, Field, field_validator


class RuleKind(str, Enum):
    """Built-in rule kinds.

    Values are the wire tags stored on RuleDescriptor.kind.
    """

    REQUIRED = "required"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    EMAIL = "email"
    RANGE = "range"
    PATTERN = "pattern"
    CUSTOM = "custom"


# Default failure text per kind, formatted with the attribute name and parameter
DEFAULT_MESSAGES = {
    RuleKind.REQUIRED.value: "{property} is required",
    RuleKind.MIN_LENGTH.value: "{property} must be at least {parameter} characters",
    RuleKind.MAX_LENGTH.value: "{property} must be no more than {parameter} characters",
    RuleKind.EMAIL.value: "{property} must be a valid email address",
    RuleKind.RANGE.value: "{property} must be between {parameter.min} and {parameter.max}",
    RuleKind.PATTERN.value: "{property} format is invalid",
}

FALLBACK_MESSAGE = "{property} is invalid"


class RangeBounds(BaseModel):
    """Inclusive numeric bounds for a range rule."""

    min: Union[int, float, Decimal]
    max: Union[int, float, Decimal]

    model_config = {"frozen": True}


class RuleDescriptor(BaseModel):
    """One constraint attached to one attribute."""

    kind: str
    message: Optional[str] = None  # Filled from DEFAULT_MESSAGES when bound
    parameter: Any = None          # Length, RangeBounds, re.Pattern or predicate

    model_config = {"frozen": True}

    @field_validator("kind", mode="before")
    @classmethod
    def _normalise_kind(cls, value: Any) -> Any:
        if isinstance(value, RuleKind):
            return value.value
        return value

    def bind(self, property_name: str) -> "RuleDescriptor":
        """Return a copy whose message is resolved for ``property_name``."""
        if self.message is not None:
            return self
        template = DEFAULT_MESSAGES.get(self.kind, FALLBACK_MESSAGE)
        message = template.format(property=property_name, parameter=self.parameter)
        return self.model_copy(update={"message": message})


class ValidationError(BaseModel):
    """A single failed rule for a single attribute."""

    property: str                # Attribute path, dotted for nested values
    message: str
    value: Any = None            # Offending value, None when the attribute is absent
    kind: Optional[str] = None   # Rule kind that failed


class ValidationResult(BaseModel):
    """Outcome of validating one instance."""

    valid: bool = Field(description="True exactly when errors is empty")
    errors: list[ValidationError] = Field(default_factory=list)

    @classmethod
    def build(cls, errors: list[ValidationError]) -> "ValidationResult":
        """Build a result whose ``valid`` flag agrees with ``errors``."""
        return cls(valid=not errors, errors=list(errors))

    def by_property(self) -> dict[str, list[str]]:
        """Group error messages by attribute path, keeping report order."""
        grouped: dict[str, list[str]] = {}
        for err in self.errors:
            grouped.setdefault(err.property, []).append(err.message)
        return grouped
