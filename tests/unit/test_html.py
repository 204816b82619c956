"""Tests for the HTML element model."""

from former.html import Element, escape, render_attributes


class TestRenderAttributes:
    """Test attribute serialization."""

    def test_boolean_attributes(self):
        assert render_attributes({"required": True, "disabled": False, "title": None}) == " required"

    def test_values_are_escaped(self):
        assert render_attributes({"value": 'say "hi" & <go>'}) == ' value="say &quot;hi&quot; &amp; &lt;go&gt;"'

    def test_lists_are_joined(self):
        assert render_attributes({"class": ["a", "b"], "data-x": []}) == ' class="a b"'


class TestElement:
    """Test elements."""

    def test_render(self):
        assert Element("span", "Hi", {"id": "greeting"}).render() == '<span id="greeting">Hi</span>'

    def test_void_element(self):
        assert Element("input", "ignored", {"type": "text"}).render() == '<input type="text">'

    def test_add_class_skips_duplicates(self):
        element = Element("div").add_class("a b").add_class(["b", "c"])

        assert element.get_classes() == ["a", "b", "c"]
        assert element.has_class("c")

    def test_empty_element_renders_content_only(self):
        element = Element("", "content", {"class": "hidden"})

        assert element.open() == ""
        assert element.close() == ""
        assert element.render() == "content"

    def test_attribute_helpers(self):
        element = Element.create("a").set_attribute("href", "/").set_value("Home")

        assert element.get_attribute("href") == "/"
        assert str(element) == '<a href="/">Home</a>'
        assert element.remove_attribute("href").render() == "<a>Home</a>"

    def test_escape(self):
        assert escape("<b>") == "&lt;b&gt;"
        assert escape(None) == ""
