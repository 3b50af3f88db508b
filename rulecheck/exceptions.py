"""Exceptions for rule definition mistakes.

Invalid data never raises; it is reported through ValidationResult. These
exceptions signal programming errors made while declaring rules.
"""


class RulecheckError(Exception):
    """Base class for all rulecheck exceptions."""


class RuleConfigurationError(RulecheckError, ValueError):
    """A rule was declared with parameters that can never be satisfied or used."""


class UnknownRuleKindError(RuleConfigurationError):
    """A rule kind with no registered check was declared in strict mode."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown rule kind '{kind}'")
