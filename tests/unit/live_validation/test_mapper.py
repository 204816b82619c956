"""Tests for the live validation rule mapper."""

from datetime import datetime

import pytest

from former.context import RenderContext
from former.form.fields import File, Input
from former.live_validation import LiveValidation, Rule, RuleKind
from former.mimes import MimeLookup


@pytest.fixture
def context():
    """Fresh render context with default configuration."""
    return RenderContext()


@pytest.fixture
def text_field(context):
    return Input("text", "username", context=context)


@pytest.fixture
def number_field(context):
    return Input("number", "age", context=context)


@pytest.fixture
def file_field(context):
    return File("file", "avatar", context=context)


class TestApply:
    """Test rule application as a whole."""

    def test_empty_rules_return_false(self, text_field):
        """An empty rule set is reported as nothing applied."""
        before = dict(text_field.attributes)

        assert LiveValidation(text_field).apply({}) is False
        assert text_field.attributes == before

    @pytest.mark.parametrize("empty", [[], iter([]), (rule for rule in ())])
    def test_empty_iterables_return_false(self, text_field, empty):
        before = dict(text_field.attributes)

        assert LiveValidation(text_field).apply(empty) is False
        assert text_field.attributes == before

    def test_non_empty_rules_return_true(self, text_field):
        assert LiveValidation(text_field).apply({"required": []}) is True

    def test_unknown_rules_leave_field_unchanged(self, text_field):
        """Rules without a client-side equivalent are skipped silently."""
        before = dict(text_field.attributes)

        result = LiveValidation(text_field).apply({"unique": ["users"], "confirmed": []})

        assert result is True
        assert text_field.attributes == before
        assert text_field.type == "text"

    def test_end_to_end_required_email_between(self, text_field):
        """required, email and between combine on one text field."""
        LiveValidation(text_field).apply({"required": [], "email": [], "between": [3, 10]})

        assert text_field.attributes["required"] is True
        assert text_field.type == "email"
        assert text_field.attributes["pattern"] == ".{3,10}"
        assert text_field.attributes["maxlength"] == 10

    def test_description_string(self, text_field):
        """A rule description string is parsed before applying."""
        LiveValidation(text_field).apply("required|max:20")

        assert text_field.is_required()
        assert text_field.attributes["maxlength"] == "20"

    def test_rule_values(self, text_field):
        LiveValidation(text_field).apply([Rule(RuleKind.URL), Rule(RuleKind.MIN, (4,))])

        assert text_field.type == "url"
        assert text_field.attributes["pattern"] == ".{4,}"

    def test_last_pattern_wins(self, text_field):
        """Pattern rules overwrite each other in application order."""
        LiveValidation(text_field).apply({"alpha": [], "integer": []})

        assert text_field.attributes["pattern"] == r"\d+"

    def test_every_rule_kind_has_a_handler(self, text_field):
        assert set(LiveValidation(text_field).handlers) == set(RuleKind)


class TestTypeRules:
    """Test rules changing the field type or requirement."""

    def test_email(self, text_field):
        LiveValidation(text_field).apply({"email": []})
        assert text_field.type == "email"

    def test_url(self, text_field):
        LiveValidation(text_field).apply({"url": []})
        assert text_field.type == "url"

    def test_required(self, text_field):
        LiveValidation(text_field).apply({"required": []})
        assert text_field.attributes["required"] is True


class TestPatternRules:
    """Test rules producing a pattern attribute."""

    @pytest.mark.parametrize("rule,pattern", [
        ("integer", r"\d+"),
        ("not_numeric", r"\D+"),
        ("alpha", "[a-zA-Z]+"),
        ("alpha_num", "[a-zA-Z0-9]+"),
        ("alpha_dash", r"[a-zA-Z0-9_\-]+"),
    ])
    def test_fixed_patterns(self, text_field, rule, pattern):
        LiveValidation(text_field).apply({rule: []})
        assert text_field.attributes["pattern"] == pattern

    def test_numeric_on_text(self, text_field):
        LiveValidation(text_field).apply({"numeric": []})

        assert text_field.attributes["pattern"] == r"[+-]?\d*\.?\d+"
        assert "step" not in text_field.attributes

    def test_numeric_on_number(self, number_field):
        """Number fields accept any decimal through a free step."""
        LiveValidation(number_field).apply({"numeric": []})

        assert number_field.attributes["step"] == "any"
        assert "pattern" not in number_field.attributes

    def test_in_single_value(self, text_field):
        LiveValidation(text_field).apply({"in": ["a"]})
        assert text_field.attributes["pattern"] == "^a$"

    def test_in_several_values(self, text_field):
        LiveValidation(text_field).apply({"in": ["a", "b"]})
        assert text_field.attributes["pattern"] == "^(a|b)$"

    def test_not_in(self, text_field):
        LiveValidation(text_field).apply({"not_in": ["a", "b"]})
        assert text_field.attributes["pattern"] == "(?:(?!^a$|^b$).)*"

    def test_match_strips_delimiters(self, text_field):
        LiveValidation(text_field).apply({"match": ["/^[a-z]+$/"]})
        assert text_field.attributes["pattern"] == "^[a-z]+$"

    def test_regex_strips_delimiters(self, text_field):
        LiveValidation(text_field).apply({"regex": ["#^(foo|bar)$#"]})
        assert text_field.attributes["pattern"] == "^(foo|bar)$"


class TestBoundaryRules:
    """Test max, min, size and between."""

    def test_max_on_number(self, number_field):
        LiveValidation(number_field).apply({"max": [10]})

        assert number_field.attributes["max"] == 10
        assert "maxlength" not in number_field.attributes

    def test_max_on_text(self, text_field):
        LiveValidation(text_field).apply({"max": [10]})

        assert text_field.attributes["maxlength"] == 10
        assert "max" not in text_field.attributes

    def test_max_on_file_sets_size(self, file_field):
        """File fields turn max into an upload size limit."""
        LiveValidation(file_field).apply({"max": [5]})

        assert file_field.max_size == 5
        assert file_field.max_size_units == "KB"
        assert "max" not in file_field.attributes

    def test_size(self, number_field):
        LiveValidation(number_field).apply({"size": [3]})
        assert number_field.attributes["max"] == 3

    def test_min_on_number(self, number_field):
        LiveValidation(number_field).apply({"min": [3]})

        assert number_field.attributes["min"] == 3
        assert "pattern" not in number_field.attributes

    def test_min_on_text(self, text_field):
        LiveValidation(text_field).apply({"min": [3]})
        assert text_field.attributes["pattern"] == ".{3,}"

    def test_between_on_number(self, number_field):
        LiveValidation(number_field).apply({"between": [1, 5]})

        assert number_field.attributes["min"] == 1
        assert number_field.attributes["max"] == 5
        assert "pattern" not in number_field.attributes

    def test_between_on_text(self, text_field):
        LiveValidation(text_field).apply({"between": [3, 10]})

        assert text_field.attributes["pattern"] == ".{3,10}"
        assert text_field.attributes["maxlength"] == 10


class TestFileRules:
    """Test mimes and image."""

    def test_mimes_on_non_file_is_noop(self, text_field):
        before = dict(text_field.attributes)

        result = LiveValidation(text_field).mimes(["jpg", "png"])

        assert result is False
        assert text_field.attributes == before

    def test_mimes_on_file(self, file_field):
        LiveValidation(file_field).apply({"mimes": ["jpg", "png"]})
        assert file_field.attributes["accept"] == "image/jpeg,image/png"

    def test_image(self, file_field):
        LiveValidation(file_field).apply({"image": []})
        assert file_field.attributes["accept"] == "image/jpeg,image/png,image/gif,image/bmp"

    def test_custom_mime_lookup(self, file_field):
        lookup = MimeLookup({"heic": "image/heic"})

        LiveValidation(file_field, mimes=lookup).apply({"mimes": ["heic"]})

        assert file_field.attributes["accept"] == "image/heic"


class TestDateRules:
    """Test before and after."""

    def test_before_on_date(self, context):
        field = Input("date", "birthday", context=context)

        LiveValidation(field).apply({"before": ["2024-01-31"]})

        assert field.attributes["max"] == "2024-01-31"

    def test_after_on_datetime_local(self, context):
        """Datetime fields also get the time of day."""
        field = Input("datetime-local", "meeting", context=context)

        LiveValidation(field).apply({"after": ["2024-01-31T10:30:00"]})

        assert field.attributes["min"] == "2024-01-31T10:30:00"

    def test_relative_keyword(self, context):
        field = Input("date", "delivery", context=context)

        LiveValidation(field, now=datetime(2024, 5, 1, 12, 0)).apply({"after": ["tomorrow"]})

        assert field.attributes["min"] == "2024-05-02"

    def test_invalid_date(self, context):
        field = Input("date", "delivery", context=context)

        with pytest.raises(ValueError, match="Unable to parse date"):
            LiveValidation(field).apply({"before": ["not a date"]})
