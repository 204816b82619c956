"""Multiline text areas."""

from typing import Any

from ...html import Element, escape
from ...registry import register_field
from ..field import Field


@register_field()
class Textarea(Field):
    tag = "textarea"

    def __init__(self, type_: str = "textarea", name: str | None = None, label: str | None = None,
                 value: Any = None, attributes: dict[str, Any] | None = None, *, context=None):
        super().__init__("textarea", name, label, value, attributes, context=context)

    def rows(self, rows: int) -> "Textarea":
        self.attributes["rows"] = rows
        return self

    def cols(self, cols: int) -> "Textarea":
        self.attributes["cols"] = cols
        return self

    def render(self) -> str:
        return Element("textarea", escape(self.value), self.get_render_attributes()).render()
