"""Shared behaviour of checkboxes and radios."""

from collections.abc import Mapping
from typing import Any

from ...html import Element, escape
from ..field import Field


class Checkable(Field):
    """A single checkable, or a series of them sharing one name.

    Items map their label to their value; a plain list uses each entry as
    both.
    """

    # The input type rendered
    checkable = "checkbox"

    def __init__(self, type_: str | None = None, name: str | None = None, label: str | None = None,
                 value: Any = None, attributes: dict[str, Any] | None = None, *, context=None):
        super().__init__(self.checkable, name, label, value, attributes, context=context)
        self.choices: list[tuple[str, Any]] = []
        self.checked_values: set[str] = set()
        self.text_label: str | None = None
        self.is_inline = False

    def is_checkable(self) -> bool:
        return True

    def items(self, *items: Any) -> "Checkable":
        """Set the series of checkables."""
        if len(items) == 1 and isinstance(items[0], (Mapping, list, tuple)):
            items = items[0]

        if isinstance(items, Mapping):
            self.choices = [(str(label), value) for label, value in items.items()]
        else:
            self.choices = [(str(item), item) for item in items]
        return self

    def text(self, text: str) -> "Checkable":
        """Text next to a single checkable."""
        self.text_label = text
        return self

    def check(self, *values: Any) -> "Checkable":
        self.checked_values.update(str(value) for value in values)
        return self

    def inline(self, is_inline: bool = True) -> "Checkable":
        self.is_inline = is_inline
        return self

    def get_item_name(self) -> str | None:
        return self.name

    def render(self) -> str:
        if not self.choices:
            value = 1 if self.value is None else self.value
            return self._render_checkable(self.text_label, value, self.name, self.get_attribute("id"))

        base_id = self.get_attribute("id") or self.name or self.checkable
        return "".join(
            self._render_checkable(label, value, self.get_item_name(), f"{base_id}_{index}")
            for index, (label, value) in enumerate(self.choices)
        )

    def _render_checkable(self, label: str | None, value: Any, name: str | None, item_id: str | None) -> str:
        attributes = {
            "type": self.checkable,
            **self.get_render_attributes(),
            "name": name,
            "id": item_id,
            "value": value,
            "checked": str(value) in self.checked_values,
        }
        field = Element("input", attributes=attributes).render()

        if not label:
            return field

        label_class = f"{self.checkable}-inline" if self.is_inline else self.checkable
        return Element("label", field + escape(label), {"for": item_id}).add_class(label_class).render()
