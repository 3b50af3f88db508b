"""Validator: runs every registered rule against an instance.

This is the main entry point for validation. It looks up each attribute's
rules in the RuleStore, evaluates them in registration order and collects
every failure into a ValidationResult.

Usage:
    result = validator.validate(user)
    if not result.valid:
        # Show result.errors to the caller
"""

import time
from typing import Any, Optional

import structlog

from rulecheck.config import Settings, get_settings
from rulecheck.exceptions import UnknownRuleKindError
from rulecheck.validation.evaluator import RuleEvaluator
from rulecheck.validation.models import RuleDescriptor, ValidationError, ValidationResult
from rulecheck.validation.store import RuleStore, rule_store

logger = structlog.get_logger()


class Validator:
    """Validates instances against the rules registered for their class.

    Design principles:
        - Fail-slow: every rule of every attribute runs (unless FAIL_FAST)
        - Read-only: never mutates the instance or the store
        - Deterministic: errors come out in registration order
    """

    def __init__(
        self,
        store: Optional[RuleStore] = None,
        evaluator: Optional[RuleEvaluator] = None,
        settings: Optional[Settings] = None,
    ):
        self.store = store if store is not None else rule_store
        self.evaluator = evaluator or RuleEvaluator()
        self.settings = settings or get_settings()

    # ── Registration ──

    def register_rule(self, cls: type, property_name: str, rule: RuleDescriptor) -> RuleDescriptor:
        """Bind the rule's message to ``property_name`` and store it.

        Raises:
            UnknownRuleKindError: In strict mode, when no check handles rule.kind
        """
        if not self.evaluator.knows(rule.kind):
            if self.settings.STRICT_RULE_KINDS:
                raise UnknownRuleKindError(rule.kind)
            logger.warning(
                "unknown_rule_kind",
                kind=rule.kind,
                target=cls.__qualname__,
                property=property_name,
            )

        bound = rule.bind(property_name)
        self.store.add_rule(cls, property_name, bound)
        logger.debug("rule_registered", target=cls.__qualname__, property=property_name, kind=bound.kind)
        return bound

    # ── Validation ──

    def validate(self, instance: Any) -> ValidationResult:
        """Run all rules for all attributes of ``instance``.

        Args:
            instance: Any object whose class (or ancestors) registered rules

        Returns:
            ValidationResult with valid flag and ordered errors
        """
        start_time = time.perf_counter()

        errors: list[ValidationError] = []
        self._validate_object(instance, "", errors, seen=set())
        result = ValidationResult.build(errors)

        logger.debug(
            "validation_complete",
            target=type(instance).__qualname__,
            valid=result.valid,
            total_errors=len(errors),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )
        return result

    def validate_property(self, instance: Any, property_name: str) -> list[ValidationError]:
        """Run the rules of one attribute and return its errors."""
        errors: list[ValidationError] = []
        self._validate_attribute(instance, property_name, property_name, errors, seen={id(instance)})
        return errors

    def get_validation_rules(self, cls: type) -> dict[str, list[RuleDescriptor]]:
        """Map each attribute with rules to its inherited and own rules."""
        rules = {}
        for name in self.store.property_names(cls):
            property_rules = self.store.get_rules(cls, name)
            if property_rules:
                rules[name] = property_rules
        return rules

    # ── Internals ──

    def _validate_object(self, instance: Any, prefix: str, errors: list[ValidationError], seen: set[int]) -> None:
        # seen holds the objects on the current descent path only
        seen.add(id(instance))
        try:
            names = self.store.property_names(type(instance))
            for name in names:
                self._validate_attribute(instance, name, _join(prefix, name), errors, seen)

            if self.settings.VALIDATE_NESTED:
                for name, value in _public_attributes(instance):
                    if name not in names:
                        self._validate_nested(value, _join(prefix, name), errors, seen)
        finally:
            seen.discard(id(instance))

    def _validate_attribute(
        self,
        instance: Any,
        property_name: str,
        path: str,
        errors: list[ValidationError],
        seen: set[int],
    ) -> None:
        value = getattr(instance, property_name, None)

        for rule in self.store.get_rules(type(instance), property_name):
            if not self.evaluator.evaluate(value, rule):
                errors.append(ValidationError(
                    property=path,
                    message=rule.message or rule.bind(property_name).message,
                    value=value,
                    kind=rule.kind,
                ))
                if self.settings.FAIL_FAST:
                    break

        if self.settings.VALIDATE_NESTED:
            self._validate_nested(value, path, errors, seen)

    def _validate_nested(self, value: Any, path: str, errors: list[ValidationError], seen: set[int]) -> None:
        if isinstance(value, (list, tuple)):
            if id(value) in seen:
                return
            seen.add(id(value))
            try:
                for i, item in enumerate(value):
                    self._validate_nested(item, f"{path}[{i}]", errors, seen)
            finally:
                seen.discard(id(value))
        elif id(value) not in seen and self.store.has_rules(type(value)):
            self._validate_object(value, path, errors, seen)


def _join(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def _public_attributes(instance: Any) -> list[tuple[str, Any]]:
    """Instance attributes not starting with an underscore, in assignment order."""
    return [(name, value) for name, value in getattr(instance, "__dict__", {}).items() if not name.startswith("_")]


# Module-level singleton
validator = Validator()
