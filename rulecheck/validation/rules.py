"""Declarative rule registration.

Rules are built with the factory functions below and attached to a class
either explicitly:

    register_rule(User, "name", required(), min_length(2))

or at class-definition time with the @validated decorator, from
``typing.Annotated`` metadata and/or keyword arguments:

    @validated(email=[required(), email()])
    class User:
        name: Annotated[str, required(), min_length(2), max_length(50)]

Factories check their own parameters; a rule that could never be evaluated
raises RuleConfigurationError when the class is defined, not when it is
validated.
"""

import inspect
import math
import re
import sys
from decimal import Decimal
from numbers import Real
from typing import Annotated, Any, Callable, Optional, Union, get_origin

from rulecheck.exceptions import RuleConfigurationError
from rulecheck.validation.engine import Validator, validator as default_validator
from rulecheck.validation.models import RangeBounds, RuleDescriptor, RuleKind

RuleInput = Union[RuleDescriptor, list[RuleDescriptor], tuple[RuleDescriptor, ...]]


# ── Factories ──

def required(message: Optional[str] = None) -> RuleDescriptor:
    return RuleDescriptor(kind=RuleKind.REQUIRED, message=message)


def min_length(length: int, message: Optional[str] = None) -> RuleDescriptor:
    return RuleDescriptor(kind=RuleKind.MIN_LENGTH, message=message, parameter=_length(length))


def max_length(length: int, message: Optional[str] = None) -> RuleDescriptor:
    return RuleDescriptor(kind=RuleKind.MAX_LENGTH, message=message, parameter=_length(length))


def email(message: Optional[str] = None) -> RuleDescriptor:
    return RuleDescriptor(kind=RuleKind.EMAIL, message=message)


def in_range(
    minimum: Union[Real, Decimal],
    maximum: Union[Real, Decimal],
    message: Optional[str] = None,
) -> RuleDescriptor:
    """Inclusive numeric range. Named to avoid shadowing the ``range`` builtin."""
    for bound in (minimum, maximum):
        if not isinstance(bound, (Real, Decimal)) or isinstance(bound, bool):
            raise RuleConfigurationError(f"Range bounds must be numbers, got {type(bound).__name__}")
        if _is_nan(bound):
            raise RuleConfigurationError("Range bounds must not be NaN")
    if minimum > maximum:
        raise RuleConfigurationError(f"Range minimum {minimum} is greater than maximum {maximum}")
    return RuleDescriptor(
        kind=RuleKind.RANGE,
        message=message,
        parameter=RangeBounds(min=minimum, max=maximum),
    )


def pattern(regex: Union[str, re.Pattern], message: Optional[str] = None) -> RuleDescriptor:
    if isinstance(regex, str):
        try:
            regex = re.compile(regex)
        except re.error as e:
            raise RuleConfigurationError(f"Invalid pattern {regex!r}: {e}") from e
    elif not isinstance(regex, re.Pattern):
        raise RuleConfigurationError(f"Pattern must be a string or compiled regex, got {type(regex).__name__}")
    return RuleDescriptor(kind=RuleKind.PATTERN, message=message, parameter=regex)


def custom(predicate: Callable[[Any], bool], message: Optional[str] = None) -> RuleDescriptor:
    """Rule backed by any callable; a falsy return (or an exception) fails it."""
    if not callable(predicate):
        raise RuleConfigurationError(f"Custom rule needs a callable, got {type(predicate).__name__}")
    return RuleDescriptor(kind=RuleKind.CUSTOM, message=message, parameter=predicate)


def _is_nan(number: Any) -> bool:
    if isinstance(number, Decimal):
        return number.is_nan()
    return isinstance(number, float) and math.isnan(number)


def _length(length: int) -> int:
    if not isinstance(length, int) or isinstance(length, bool) or length < 0:
        raise RuleConfigurationError(f"Length must be a non-negative integer, got {length!r}")
    return length


# ── Registration ──

def register_rule(
    cls: type,
    property_name: str,
    *rules: RuleDescriptor,
    using: Optional[Validator] = None,
) -> list[RuleDescriptor]:
    """Attach rules to ``cls.property_name`` in the given order.

    Returns:
        The stored rules, with default messages resolved
    """
    target = using or default_validator
    return [target.register_rule(cls, property_name, rule) for rule in rules]


def validated(cls: Optional[type] = None, *, using: Optional[Validator] = None, **field_rules: RuleInput):
    """Class decorator registering rules at class-definition time.

    Rules in ``Annotated`` metadata of the class's own annotations are
    registered first, in declaration order, then the keyword arguments.
    Works bare (``@validated``) or called (``@validated(name=required())``).

    String annotations (``from __future__ import annotations``) are resolved
    against the defining module, with the class itself in scope.
    """

    def decorate(klass: type) -> type:
        for name, annotation in _own_annotations(klass).items():
            annotated = _annotated_rules(annotation)
            if annotated:
                register_rule(klass, name, *annotated, using=using)

        for name, rules in field_rules.items():
            if isinstance(rules, RuleDescriptor):
                rules = [rules]
            register_rule(klass, name, *rules, using=using)
        return klass

    if cls is None:
        return decorate
    return decorate(cls)


def _annotated_rules(annotation: Any) -> list[RuleDescriptor]:
    if get_origin(annotation) is not Annotated:
        return []
    return [meta for meta in annotation.__metadata__ if isinstance(meta, RuleDescriptor)]


def _own_annotations(klass: type) -> dict[str, Any]:
    """The class's own annotations, with string annotations evaluated.

    A string that cannot be resolved is skipped, unless it spells out
    ``Annotated``: rules there would otherwise be lost without notice.
    """
    module = sys.modules.get(klass.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = {**vars(klass), klass.__name__: klass}

    resolved = {}
    for name, annotation in inspect.get_annotations(klass).items():
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, globalns, localns)
            except NameError as e:
                if "Annotated" in annotation:
                    raise RuleConfigurationError(
                        f"Cannot resolve annotation of {klass.__qualname__}.{name}: {e}"
                    ) from e
                continue
        resolved[name] = annotation
    return resolved
