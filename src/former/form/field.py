"""Base class of every form field."""

from enum import Enum
from typing import Any

from ..context import RenderContext
from ..html import Element
from ..live_validation import LiveValidation
from .group import Group


class FieldType(str, Enum):
    """Types a field can take."""
    TEXT = "text"
    EMAIL = "email"
    URL = "url"
    NUMBER = "number"
    FILE = "file"
    DATE = "date"
    DATETIME = "datetime"
    DATETIME_LOCAL = "datetime-local"
    TIME = "time"
    MONTH = "month"
    WEEK = "week"
    PASSWORD = "password"
    HIDDEN = "hidden"
    SEARCH = "search"
    TEL = "tel"
    COLOR = "color"
    RANGE = "range"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SUBMIT = "submit"
    RESET = "reset"
    BUTTON = "button"
    LINK = "link"


def humanize(name: str) -> str:
    """Label text derived from a field name.

    Examples:
        >>> humanize("first_name")
        'First name'
    """
    text = name.removesuffix("[]").replace("_", " ").strip()
    return text[:1].upper() + text[1:]


class Field(Element):
    """A form control: its type, attributes and the group wrapping it.

    Setters return the field so calls can be chained.
    """

    tag = "input"

    def __init__(self, type_: str, name: str | None = None, label: str | None = None,
                 value: Any = None, attributes: dict[str, Any] | None = None,
                 *, context: RenderContext | None = None):
        base = {}
        if name is not None:
            base = {"name": name, "id": name.removesuffix("[]")}
        super().__init__(self.tag, None, {**base, **(attributes or {})})

        self.context = context or RenderContext()
        self.type = ""
        self.set_type(type_)
        self.name = name
        self.value = value

        if label is None and name and self.has_label() and self.context.config.automatic_label:
            label = humanize(name)

        self.group = self.create_group(label)

    def __str__(self) -> str:
        return self.wrap_and_render()

    def create_group(self, label: str | None) -> Group | None:
        """Use the open custom group, or a new group for this field."""
        if self.context.custom_group_open and self.context.active_group is not None:
            return self.context.active_group
        return Group(self.context, label)

    # Type

    def set_type(self, type_: str) -> "Field":
        try:
            self.type = FieldType(type_).value
        except ValueError:
            raise ValueError(f"Unknown field type: {type_}")
        return self

    def is_of_type(self, *types: str) -> bool:
        return self.type in types

    def is_button(self) -> bool:
        return False

    def is_checkable(self) -> bool:
        return False

    def is_unwrappable(self) -> bool:
        """Fields rendered without a group."""
        return self.is_of_type("hidden")

    def has_label(self) -> bool:
        return not self.is_of_type("hidden")

    # Attributes

    def required(self, is_required: bool = True) -> "Field":
        self.attributes["required"] = is_required
        return self

    def is_required(self) -> bool:
        return bool(self.attributes.get("required"))

    def pattern(self, pattern: str) -> "Field":
        self.attributes["pattern"] = pattern
        return self

    def min(self, minimum: Any) -> "Field":
        self.attributes["min"] = minimum
        return self

    def max(self, maximum: Any) -> "Field":
        self.attributes["max"] = maximum
        return self

    def maxlength(self, length: Any) -> "Field":
        self.attributes["maxlength"] = length
        return self

    def step(self, step: Any) -> "Field":
        self.attributes["step"] = step
        return self

    def accept(self, *mimes: str) -> "Field":
        self.attributes["accept"] = ",".join(mimes)
        return self

    def placeholder(self, text: str) -> "Field":
        self.attributes["placeholder"] = text
        return self

    def disabled(self, is_disabled: bool = True) -> "Field":
        self.attributes["disabled"] = is_disabled
        return self

    # Group

    def label(self, text: str | Element) -> "Field":
        if self.group is not None:
            self.group.set_label(text)
        return self

    def help(self, text: str, attributes: dict[str, Any] | None = None) -> "Field":
        if self.group is not None:
            self.group.help(text, attributes)
        return self

    def inline_help(self, text: str, attributes: dict[str, Any] | None = None) -> "Field":
        if self.group is not None:
            self.group.inline_help(text, attributes)
        return self

    def block_help(self, text: str, attributes: dict[str, Any] | None = None) -> "Field":
        if self.group is not None:
            self.group.block_help(text, attributes)
        return self

    def prepend(self, *items: Any) -> "Field":
        if self.group is not None:
            self.group.prepend(*items)
        return self

    def append(self, *items: Any) -> "Field":
        if self.group is not None:
            self.group.append(*items)
        return self

    def prepend_icon(self, icon: str, attributes: dict[str, Any] | None = None,
                     icon_settings: dict[str, str] | None = None) -> "Field":
        if self.group is not None:
            self.group.prepend_icon(icon, attributes, icon_settings)
        return self

    def append_icon(self, icon: str, attributes: dict[str, Any] | None = None,
                    icon_settings: dict[str, str] | None = None) -> "Field":
        if self.group is not None:
            self.group.append_icon(icon, attributes, icon_settings)
        return self

    def state(self, state: str) -> "Field":
        if self.group is not None:
            self.group.state(state)
        return self

    def raw(self) -> "Field":
        if self.group is not None:
            self.group.raw()
        return self

    # Rendering

    def get_rules(self) -> dict[str, list[Any]]:
        return self.context.get_rules(self.name)

    def apply_live_validation(self) -> bool:
        """Apply the rules registered for this field, if live validation is on."""
        if not self.context.config.live_validation:
            return False

        rules = self.get_rules()
        if not rules:
            return False

        return LiveValidation(self).apply(rules)

    def get_render_attributes(self) -> dict[str, Any]:
        """Attributes with the framework field classes merged in, the field is left untouched."""
        element = Element(self.tag, attributes=self.attributes)
        element.add_class(self.context.framework.get_field_classes(self))
        return element.attributes

    def wrap_and_render(self) -> str:
        """Render the field inside its group, or alone when it has none."""
        self.context.current_field = self
        self.apply_live_validation()

        if (self.context.custom_group_open or self.group is None
                or self.group.is_raw() or self.is_unwrappable()):
            return self.render()

        return self.group.wrap_field(self)

    def render(self) -> str:
        attributes = {"type": self.type, **self.get_render_attributes()}
        if self.value is not None:
            attributes["value"] = self.value
        return Element(self.tag, attributes=attributes).render()
