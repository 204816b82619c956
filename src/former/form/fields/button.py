"""Buttons and links."""

from typing import Any

from ...html import Element, escape
from ...registry import register_field
from ...utils.strings import singular
from ..field import Field


@register_field()
class Button(Field):
    """A submit, reset or plain button, or a link styled as one.

    The first argument after the type is the button text, not a field name.
    """

    tag = "button"

    def __init__(self, type_: str = "button", value: Any = None, link: str | None = None,
                 attributes: dict[str, Any] | None = None, *, context=None):
        # "buttons" resolves here too
        super().__init__(singular(type_), None, None, value, attributes, context=context)
        self.link = link

    def create_group(self, label):
        return None

    def is_button(self) -> bool:
        return True

    def is_unwrappable(self) -> bool:
        return True

    def has_label(self) -> bool:
        return False

    def render(self) -> str:
        attributes = self.get_render_attributes()

        if self.is_of_type("link"):
            return Element("a", escape(self.value), {"href": self.link or "#", **attributes}).render()

        return Element("button", escape(self.value), {"type": self.type, **attributes}).render()
