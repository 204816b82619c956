"""Minimal HTML element model used by fields, groups and frameworks."""

import html
from typing import Any

# Elements rendered without a closing tag
VOID_ELEMENTS = {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source"}


def render_attributes(attributes: dict[str, Any]) -> str:
    """Serialize attributes, in insertion order.

    True renders as a bare boolean attribute, False and None are dropped,
    lists are joined with spaces.
    """
    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = " ".join(str(item) for item in value)
        parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return "".join(parts)


def escape(value: Any) -> str:
    """Escape text content."""
    return html.escape("" if value is None else str(value), quote=False)


class Element:
    """An HTML tag with attributes and verbatim content.

    An empty tag name renders as its content alone, which lets a wrapper
    disappear without changing the code that builds it.
    """

    def __init__(self, element: str = "div", value: Any = None, attributes: dict[str, Any] | None = None):
        self.element = element
        self.value = value
        self.attributes: dict[str, Any] = dict(attributes or {})

    @classmethod
    def create(cls, element: str, value: Any = None, attributes: dict[str, Any] | None = None) -> "Element":
        return cls(element, value, attributes)

    def add_class(self, classes: str | list[str] | None) -> "Element":
        """Add one or more classes, keeping existing ones and skipping duplicates."""
        if not classes:
            return self
        if isinstance(classes, str):
            classes = classes.split()

        current = self.get_classes()
        for class_name in classes:
            for part in str(class_name).split():
                if part not in current:
                    current.append(part)
        self.attributes["class"] = " ".join(current)
        return self

    def get_classes(self) -> list[str]:
        return str(self.attributes.get("class") or "").split()

    def has_class(self, class_name: str) -> bool:
        return class_name in self.get_classes()

    def set_attribute(self, name: str, value: Any) -> "Element":
        self.attributes[name] = value
        return self

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)

    def remove_attribute(self, name: str) -> "Element":
        self.attributes.pop(name, None)
        return self

    def set_value(self, value: Any) -> "Element":
        self.value = value
        return self

    def open(self) -> str:
        if not self.element:
            return ""
        return f"<{self.element}{render_attributes(self.attributes)}>"

    def close(self) -> str:
        if not self.element or self.element in VOID_ELEMENTS:
            return ""
        return f"</{self.element}>"

    def get_content(self) -> str:
        if self.value is None or self.value is False:
            return ""
        return str(self.value)

    def render(self) -> str:
        if self.element in VOID_ELEMENTS:
            return self.open()
        return self.open() + self.get_content() + self.close()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.element!r}, attributes={self.attributes!r})"
