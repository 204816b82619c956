"""Select boxes."""

from collections.abc import Mapping
from typing import Any

from ...html import Element, escape
from ...registry import register_field
from ..field import Field


@register_field()
class Select(Field):
    """A <select>, or a multiple select when created as ``multiselect``.

    Options map values to their text; a nested mapping becomes an <optgroup>.
    """

    tag = "select"

    def __init__(self, type_: str = "select", name: str | None = None, label: str | None = None,
                 options: Mapping[Any, Any] | list[Any] | None = None, selected: Any = None,
                 attributes: dict[str, Any] | None = None, *, context=None):
        super().__init__("select", name, label, selected, attributes, context=context)
        self.choices: dict[Any, Any] = {}
        self.placeholder_text: str | None = None

        if type_ == "multiselect":
            self.multiple()
        if options:
            self.options(options)

    def options(self, options: Mapping[Any, Any] | list[Any], selected: Any = None) -> "Select":
        if isinstance(options, Mapping):
            self.choices = dict(options)
        else:
            self.choices = {option: option for option in options}

        if selected is not None:
            self.select(selected)
        return self

    def select(self, selected: Any) -> "Select":
        self.value = selected
        return self

    def placeholder(self, text: str) -> "Select":
        self.placeholder_text = text
        return self

    def multiple(self, is_multiple: bool = True) -> "Select":
        self.attributes["multiple"] = is_multiple
        return self

    def get_selected(self) -> set[str]:
        if self.value is None:
            return set()
        if isinstance(self.value, (list, tuple, set)):
            return {str(value) for value in self.value}
        return {str(self.value)}

    def render(self) -> str:
        attributes = self.get_render_attributes()
        name = attributes.get("name")
        if attributes.get("multiple") and name and not str(name).endswith("[]"):
            attributes["name"] = f"{name}[]"

        content = ""
        if self.placeholder_text is not None:
            content += Element("option", escape(self.placeholder_text), {
                "value": "",
                "disabled": True,
                "selected": not self.get_selected(),
            }).render()
        content += self._render_options(self.choices)

        return Element("select", content, attributes).render()

    def _render_options(self, choices: Mapping[Any, Any]) -> str:
        selected = self.get_selected()
        rendered = []

        for value, text in choices.items():
            if isinstance(text, Mapping):
                group = Element("optgroup", self._render_options(text), {"label": value})
                rendered.append(group.render())
                continue

            option = Element("option", escape(text), {
                "value": value,
                "selected": str(value) in selected,
            })
            rendered.append(option.render())

        return "".join(rendered)
