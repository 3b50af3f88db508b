"""Tests for the rule evaluator and the built-in checks."""

import re
from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from rulecheck.validation.checks import BaseCheck, RequiredCheck
from rulecheck.validation.evaluator import RuleEvaluator
from rulecheck.validation.models import RangeBounds, RuleDescriptor


def rule(kind, parameter=None):
    return RuleDescriptor(kind=kind, parameter=parameter)


class TestRequired:
    """Test the required rule."""

    @pytest.mark.parametrize("value", ["x", " ", 0, False, [], {}])
    def test_present_values_pass(self, evaluator, value):
        """Only None and the empty string count as missing."""
        assert evaluator.evaluate(value, rule("required")) is True

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_values_fail(self, evaluator, value):
        assert evaluator.evaluate(value, rule("required")) is False


class TestLength:
    """Test minLength and maxLength."""

    def test_boundary_length_passes_both(self, evaluator):
        """A value of exactly n characters satisfies minLength(n) and maxLength(n)."""
        assert evaluator.evaluate("abc", rule("minLength", 3)) is True
        assert evaluator.evaluate("abc", rule("maxLength", 3)) is True

    def test_too_short(self, evaluator):
        assert evaluator.evaluate("ab", rule("minLength", 3)) is False

    def test_too_long(self, evaluator):
        assert evaluator.evaluate("abcd", rule("maxLength", 3)) is False

    @pytest.mark.parametrize("value", [None, 12345, ["a", "b", "c"], b"abc"])
    def test_non_text_fails(self, evaluator, value):
        """Non-strings fail instead of raising."""
        assert evaluator.evaluate(value, rule("minLength", 1)) is False
        assert evaluator.evaluate(value, rule("maxLength", 100)) is False


class TestEmail:
    """Test the email rule."""

    @pytest.mark.parametrize("value", ["a@b.co", "first.last@example.com", "x+tag@sub.domain.org"])
    def test_valid_addresses(self, evaluator, value):
        assert evaluator.evaluate(value, rule("email")) is True

    @pytest.mark.parametrize(
        "value",
        ["not-an-email", "a@b", "@b.co", "a@.", "a b@c.de", "a@b@c.de", "a@b.co\n", "", None, 42],
    )
    def test_invalid_addresses(self, evaluator, value):
        assert evaluator.evaluate(value, rule("email")) is False


class TestRange:
    """Test the inclusive range rule."""

    bounds = RangeBounds(min=18, max=65)

    @pytest.mark.parametrize("value", [18, 40, 65, 18.0, 64.5, Decimal("30")])
    def test_inside_bounds(self, evaluator, value):
        assert evaluator.evaluate(value, rule("range", self.bounds)) is True

    @pytest.mark.parametrize("value", [17, 65.01, -1])
    def test_outside_bounds(self, evaluator, value):
        assert evaluator.evaluate(value, rule("range", self.bounds)) is False

    @pytest.mark.parametrize("value", ["30", None, True, [30]])
    def test_non_numeric_fails(self, evaluator, value):
        """Strings, None and booleans fail regardless of bounds."""
        assert evaluator.evaluate(value, rule("range", RangeBounds(min=-1000, max=1000))) is False

    def test_nan_fails(self, evaluator):
        assert evaluator.evaluate(float("nan"), rule("range", self.bounds)) is False

    @pytest.mark.parametrize(
        "value, bounds",
        [
            (Decimal("NaN"), RangeBounds(min=18, max=65)),
            (float("nan"), RangeBounds(min=Decimal("18"), max=Decimal("65"))),
        ],
    )
    def test_nan_fails_quietly(self, evaluator, value, bounds):
        """NaN is a plain failure, not a crashed check, whatever the bound types."""
        with capture_logs() as logs:
            assert evaluator.evaluate(value, rule("range", bounds)) is False

        assert not [entry for entry in logs if entry["event"] == "rule_check_crashed"]

    def test_decimal_bounds(self, evaluator):
        bounds = RangeBounds(min=Decimal("0.1"), max=Decimal("0.3"))
        assert evaluator.evaluate(Decimal("0.2"), rule("range", bounds)) is True
        assert evaluator.evaluate(0.25, rule("range", bounds)) is True
        assert evaluator.evaluate(Decimal("0.31"), rule("range", bounds)) is False


class TestPattern:
    """Test the pattern rule."""

    def test_search_semantics(self, evaluator):
        """The pattern may match anywhere in the value."""
        assert evaluator.evaluate("order-123", rule("pattern", re.compile(r"\d+"))) is True

    def test_anchored_pattern(self, evaluator):
        digits_only = re.compile(r"^\d+$")
        assert evaluator.evaluate("123", rule("pattern", digits_only)) is True
        assert evaluator.evaluate("12a", rule("pattern", digits_only)) is False

    def test_string_pattern_is_compiled(self, evaluator):
        assert evaluator.evaluate("abc", rule("pattern", "b")) is True

    def test_non_text_fails(self, evaluator):
        assert evaluator.evaluate(123, rule("pattern", re.compile(r"\d+"))) is False


class TestCustom:
    """Test custom predicate rules."""

    def test_truthy_predicate_passes(self, evaluator):
        assert evaluator.evaluate(4, rule("custom", lambda v: v % 2 == 0)) is True

    def test_falsy_predicate_fails(self, evaluator):
        assert evaluator.evaluate(3, rule("custom", lambda v: v % 2 == 0)) is False

    def test_raising_predicate_fails_and_is_logged(self, evaluator):
        """A crashing check is reported as a failure, never propagated."""
        with capture_logs() as logs:
            assert evaluator.evaluate(None, rule("custom", lambda v: v % 2 == 0)) is False

        crash = [entry for entry in logs if entry["event"] == "rule_check_crashed"]
        assert len(crash) == 1
        assert crash[0]["kind"] == "custom"
        assert crash[0]["log_level"] == "error"


class TestDispatch:
    """Test kind dispatch and extensibility."""

    def test_unknown_kind_passes(self, evaluator):
        """Kinds without a check are permissive."""
        assert evaluator.evaluate(None, rule("postcode")) is True

    def test_default_kinds(self, evaluator):
        assert evaluator.kinds == ["required", "minLength", "maxLength", "email", "range", "pattern", "custom"]

    def test_add_check(self, evaluator):
        """New kinds are added without touching the evaluator."""

        class UppercaseCheck(BaseCheck):
            @property
            def kind(self) -> str:
                return "uppercase"

            def check(self, value, parameter=None) -> bool:
                return self._is_text(value) and value.isupper()

        evaluator.add_check(UppercaseCheck())

        assert evaluator.knows("uppercase")
        assert evaluator.evaluate("ABC", rule("uppercase")) is True
        assert evaluator.evaluate("abc", rule("uppercase")) is False

    def test_remove_check_makes_kind_permissive(self, evaluator):
        evaluator.remove_check("required")
        assert not evaluator.knows("required")
        assert evaluator.evaluate(None, rule("required")) is True

    def test_custom_check_list(self):
        evaluator = RuleEvaluator(checks=[RequiredCheck()])
        assert evaluator.kinds == ["required"]
        assert evaluator.evaluate("", rule("minLength", 5)) is True
