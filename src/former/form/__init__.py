"""Form building blocks: fields and the groups wrapping them."""

from .field import Field, FieldType
from .group import Group

__all__ = [
    "Field",
    "FieldType",
    "Group",
]
