"""File upload inputs."""

from typing import Any

from ...html import Element
from ...registry import register_field
from .input import Input

# Multipliers from a size unit to bytes
SIZE_UNITS = {
    "B": 1,
    "KB": 1024,
    "MB": 1024 ** 2,
    "GB": 1024 ** 3,
}


@register_field()
class File(Input):
    """A file input, with an optional upload size limit.

    The size limit is rendered as a hidden MAX_FILE_SIZE input placed before
    the file input, in bytes.
    """

    def __init__(self, type_: str = "file", name: str | None = None, label: str | None = None,
                 value: Any = None, attributes: dict[str, Any] | None = None, *, context=None):
        super().__init__("file", name, label, None, attributes, context=context)
        self.max_size: Any = None
        self.max_size_units = "KB"

    def max(self, size: Any, units: str = "KB") -> "File":
        """Set the maximum upload size."""
        units = units.upper()
        if units not in SIZE_UNITS:
            raise ValueError(f"Unknown size unit: {units}")

        self.max_size = size
        self.max_size_units = units
        return self

    def get_max_size_bytes(self) -> int | None:
        if self.max_size is None:
            return None
        return int(float(self.max_size) * SIZE_UNITS[self.max_size_units])

    def multiple(self) -> "File":
        self.attributes["multiple"] = True
        if self.name and not self.name.endswith("[]"):
            self.attributes["name"] = f"{self.name}[]"
        return self

    def render(self) -> str:
        hidden = ""
        if self.max_size is not None:
            hidden = Element("input", attributes={
                "type": "hidden",
                "name": "MAX_FILE_SIZE",
                "value": self.get_max_size_bytes(),
            }).render()

        return hidden + super().render()
