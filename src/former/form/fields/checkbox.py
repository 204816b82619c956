"""Checkboxes."""

from ...registry import register_field
from .checkable import Checkable


@register_field()
class Checkbox(Checkable):
    checkable = "checkbox"

    def checkboxes(self, *items) -> "Checkbox":
        """Create a series of checkboxes."""
        self.items(*items)
        return self

    def get_item_name(self) -> str | None:
        # A series posts a list of values
        if self.name and self.choices and not self.name.endswith("[]"):
            return f"{self.name}[]"
        return self.name
