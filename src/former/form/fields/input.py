"""Text-like inputs: text, email, number, dates, hidden and friends."""

from ...registry import register_field
from ..field import Field


@register_field()
class Input(Field):
    """An <input> of any non-file type."""

    def datalist(self, datalist_id: str) -> "Input":
        """Attach a <datalist> by id."""
        self.attributes["list"] = datalist_id
        return self
