"""Tests for framework strategies and their lookup."""

import pytest

from former.config import FormerConfig
from former.context import RenderContext
from former.exceptions import FormerError, InvalidFrameworkException, UnsupportedFrameworkOperation
from former.form.fields import Button, Checkbox, Input
from former.framework import (
    Capability,
    Nude,
    TwitterBootstrap3,
    TwitterBootstrap4,
    available_frameworks,
    get_framework,
    register_framework,
)
from former.framework.factory import FRAMEWORKS


class TestGetFramework:
    """Test framework lookup by name."""

    def test_available(self):
        assert available_frameworks() == ["Nude", "TwitterBootstrap3", "TwitterBootstrap4"]

    @pytest.mark.parametrize("name,strategy", [
        ("Nude", Nude),
        ("TwitterBootstrap3", TwitterBootstrap3),
        ("TwitterBootstrap4", TwitterBootstrap4),
    ])
    def test_known(self, name, strategy):
        framework = get_framework(name)

        assert isinstance(framework, strategy)
        assert framework.name == name
        assert framework.is_framework(name)

    def test_unknown_raises(self):
        with pytest.raises(InvalidFrameworkException) as exc_info:
            get_framework("Foo")

        assert str(exc_info.value) == "Framework was not found [Foo]"
        assert exc_info.value.framework == "Foo"
        assert isinstance(exc_info.value, FormerError)
        assert isinstance(exc_info.value, RuntimeError)

    def test_register(self):
        class Foundation(Nude):
            @property
            def name(self):
                return "Foundation"

        register_framework("Foundation", Foundation)
        try:
            assert get_framework("Foundation").name == "Foundation"
        finally:
            FRAMEWORKS.pop("Foundation")

    def test_config_is_passed(self):
        config = FormerConfig(form_type="horizontal")
        assert get_framework("TwitterBootstrap3", config).config is config


class TestInvalidFrameworkException:
    """Test the exception message."""

    def test_default_message(self):
        assert str(InvalidFrameworkException()) == "Framework was not found"

    def test_set_framework_returns_self(self):
        exception = InvalidFrameworkException()
        assert exception.set_framework("Bar") is exception
        assert str(exception) == "Framework was not found [Bar]"

    def test_constructor_framework(self):
        assert str(InvalidFrameworkException("Baz")) == "Framework was not found [Baz]"


class TestCapabilities:
    """Test capability queries."""

    def test_nude_has_none(self):
        nude = get_framework("Nude")

        for capability in Capability:
            assert not nude.supports(capability)

    @pytest.mark.parametrize("name", ["TwitterBootstrap3", "TwitterBootstrap4"])
    def test_bootstrap_has_all(self, name):
        framework = get_framework(name)

        for capability in Capability:
            assert framework.supports(capability)

    def test_isnt_framework(self):
        assert get_framework("Nude").isnt_framework("TwitterBootstrap3")
        assert not get_framework("Nude").isnt_framework("Nude")

    def test_block_help_unsupported(self):
        with pytest.raises(UnsupportedFrameworkOperation) as exc_info:
            get_framework("Nude").create_block_help("Help")

        assert exc_info.value.operation == "block_help"
        assert exc_info.value.framework == "Nude"


class TestStates:
    """Test state filtering."""

    @pytest.mark.parametrize("state,expected", [
        ("error", "has-error"),
        ("has-warning", "has-warning"),
        ("success", "has-success"),
        ("bogus", None),
        (None, None),
    ])
    def test_bootstrap3(self, state, expected):
        assert get_framework("TwitterBootstrap3").filter_state(state) == expected

    @pytest.mark.parametrize("state,expected", [
        ("error", "is-invalid"),
        ("danger", "is-invalid"),
        ("success", "is-valid"),
        ("is-valid", "is-valid"),
        ("warning", None),
    ])
    def test_bootstrap4(self, state, expected):
        assert get_framework("TwitterBootstrap4").filter_state(state) == expected

    def test_nude_passes_through(self):
        assert get_framework("Nude").filter_state("whatever") == "whatever"

    def test_error_states(self):
        assert get_framework("Nude").error_state() == "error"
        assert get_framework("TwitterBootstrap3").error_state() == "has-error"
        assert get_framework("TwitterBootstrap4").error_state() == "is-invalid"


class TestClasses:
    """Test group, label and field classes."""

    @pytest.fixture
    def context(self):
        return RenderContext()

    def test_bootstrap3_field_classes(self, context):
        framework = get_framework("TwitterBootstrap3")

        assert framework.get_field_classes(Input("text", "name", context=context)) == ["form-control"]
        assert framework.get_field_classes(Checkbox("checkbox", "agree", context=context)) == []
        assert framework.get_field_classes(Button("submit", "Save", context=context)) == ["btn"]

    def test_bootstrap4_field_classes(self, context):
        framework = get_framework("TwitterBootstrap4")

        assert framework.get_field_classes(Checkbox("checkbox", "agree", context=context)) == ["form-check-input"]

    def test_vertical_labels(self):
        assert get_framework("TwitterBootstrap3").get_label_classes() == ["control-label"]
        assert get_framework("TwitterBootstrap4").get_label_classes() == []

    def test_horizontal_labels(self):
        config = FormerConfig(form_type="horizontal")

        assert get_framework("TwitterBootstrap3", config).get_label_classes() == ["control-label", "col-sm-2"]
        assert get_framework("TwitterBootstrap4", config).get_label_classes() == ["col-form-label", "col-sm-2"]
        assert get_framework("TwitterBootstrap4", config).get_group_classes() == ["form-group", "row"]

    def test_inline_labels(self):
        config = FormerConfig(form_type="inline")
        assert get_framework("TwitterBootstrap3", config).get_label_classes() == ["sr-only"]

    def test_horizontal_ignored_without_capability(self):
        config = FormerConfig(form_type="horizontal")
        assert not get_framework("Nude", config).is_horizontal

    def test_horizontal_wraps_field(self):
        config = FormerConfig(form_type="horizontal")

        wrapped = get_framework("TwitterBootstrap3", config).wrap_field("<input>")

        assert wrapped == '<div class="col-sm-10"><input></div>'


class TestIcons:
    """Test icon creation."""

    def test_bootstrap3(self):
        icon = get_framework("TwitterBootstrap3").create_icon("user")
        assert icon.render() == '<span class="glyphicon glyphicon-user"></span>'

    def test_bootstrap4(self):
        icon = get_framework("TwitterBootstrap4").create_icon("user")
        assert icon.render() == '<i class="fa fa-user"></i>'

    def test_nude(self):
        icon = get_framework("Nude").create_icon("user")
        assert icon.render() == '<i class="icon-user"></i>'

    def test_configured_settings(self):
        config = FormerConfig(icons={"prefix": "bi", "set": "bi", "tag": "i"})

        icon = get_framework("TwitterBootstrap3", config).create_icon("star")

        assert icon.render() == '<i class="bi bi-star"></i>'

    def test_call_settings_win(self):
        icon = get_framework("TwitterBootstrap4").create_icon("star", settings={"set": "fas"})
        assert icon.render() == '<i class="fas fa-star"></i>'


class TestDecorations:
    """Test prepend/append markup."""

    @pytest.fixture
    def field(self):
        return Input("text", "price", context=RenderContext())

    def test_bootstrap3_addon(self):
        assert get_framework("TwitterBootstrap3").place_around("$") == '<span class="input-group-addon">$</span>'

    def test_bootstrap3_button(self):
        placed = get_framework("TwitterBootstrap3").place_around("<button>Go</button>")
        assert placed == '<span class="input-group-btn"><button>Go</button></span>'

    def test_bootstrap4_prepend_append(self, field):
        framework = get_framework("TwitterBootstrap4")

        markup = framework.prepend_append(field, [framework.place_around("$")], [])

        assert markup.startswith('<div class="input-group"><div class="input-group-prepend">')
        assert '<span class="input-group-text">$</span>' in markup
        assert "input-group-append" not in markup

    def test_nude_concatenates(self):
        framework = get_framework("Nude")
        field = Input("text", "price", context=RenderContext(framework=framework))

        markup = framework.prepend_append(field, ["$"], [".00"])

        assert markup == '$<input type="text" name="price" id="price">.00'
