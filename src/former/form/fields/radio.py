"""Creating radio elements since 1873."""

from ...registry import register_field
from .checkable import Checkable


@register_field()
class Radio(Checkable):
    checkable = "radio"

    def radios(self, *items) -> "Radio":
        """Create a series of radios."""
        self.items(*items)
        return self
