"""Framework strategy interface.

A framework strategy supplies the CSS classes and markup snippets of one
front-end toolkit. Groups and fields ask it for classes and wrappers instead
of hard-coding them.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..config import FormerConfig, FormType
from ..exceptions import UnsupportedFrameworkOperation
from ..html import Element

if TYPE_CHECKING:
    from ..form.field import Field


class Capability(str, Enum):
    """Optional features a framework may provide."""
    GROUP_MARKUP = "group_markup"  # groups render a wrapping element
    BLOCK_HELP = "block_help"
    HORIZONTAL = "horizontal"


class FrameworkStrategy(ABC):
    """Base class for framework strategies."""

    capabilities: frozenset[Capability] = frozenset()

    # tag, set and prefix of icon elements
    icon_defaults: dict[str, str] = {"tag": "i", "set": "", "prefix": "icon"}

    def __init__(self, config: FormerConfig | None = None):
        self.config = config or FormerConfig()

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the framework."""
        pass

    def supports(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def is_framework(self, name: str) -> bool:
        return self.name == name

    def isnt_framework(self, name: str) -> bool:
        return not self.is_framework(name)

    @property
    def is_horizontal(self) -> bool:
        return self.supports(Capability.HORIZONTAL) and self.config.form_type == FormType.HORIZONTAL

    # Classes

    @abstractmethod
    def get_group_classes(self) -> list[str]:
        pass

    @abstractmethod
    def get_label_classes(self) -> list[str]:
        pass

    @abstractmethod
    def get_field_classes(self, field: "Field") -> list[str]:
        pass

    # States

    @abstractmethod
    def error_state(self) -> str:
        """State class marking a group in error."""
        pass

    def filter_state(self, state: str | None) -> str | None:
        """Translate a state name into a class the framework knows, or None."""
        return state

    # Help and errors

    @abstractmethod
    def create_help(self, text: str, attributes: dict[str, Any] | None = None) -> Element:
        pass

    def create_block_help(self, text: str, attributes: dict[str, Any] | None = None) -> Element:
        raise UnsupportedFrameworkOperation("block_help", self.name)

    @abstractmethod
    def create_validation_error(self, errors: str) -> Element:
        pass

    # Icons

    def create_icon(self, icon: str, attributes: dict[str, Any] | None = None,
                    settings: dict[str, str] | None = None) -> Element:
        """Create an icon element.

        Settings are layered: framework defaults, then the configured icon
        section, then the ``settings`` argument.
        """
        merged = {**self.icon_defaults, **self.config.icons.as_settings(), **(settings or {})}

        icon_class = f"{merged['prefix']}-{icon}"
        classes = [merged["set"], icon_class] if merged.get("set") else [icon_class]

        return Element(merged["tag"], attributes=attributes).add_class(classes)

    # Wrappers

    def wrap_field(self, content: Any) -> str:
        return str(content)

    def wrap_label(self, label: Element) -> Element:
        return label

    def create_label_of(self, field: "Field", label: Element) -> Element:
        """Point the label at the field it describes.

        Checkables carry their own labels, so the group label stays unbound.
        """
        if field.is_checkable():
            return label.remove_attribute("for")

        field_id = field.get_attribute("id")
        if field_id:
            label.set_attribute("for", field_id)
        return label

    def place_around(self, item: Any) -> str:
        return str(item)

    @abstractmethod
    def prepend_append(self, field: "Field", prepend: list[str], append: list[str]) -> str:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(form_type={self.config.form_type!r})"
