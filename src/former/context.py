"""Request-scoped rendering state.

Everything a render pass shares (configuration, framework, errors, rules and
the custom group currently open) lives on one ``RenderContext``. Each request
builds its own context, so nothing leaks between concurrent renders.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .config import FormerConfig
from .framework import FrameworkStrategy, get_framework
from .live_validation import ValidationRuleSet, parse_rules

if TYPE_CHECKING:
    from .form.field import Field
    from .form.group import Group

logger = logging.getLogger(__name__)


class ErrorProvider(ABC):
    """Source of validation error messages."""

    @abstractmethod
    def get_errors(self, key: str | None = None) -> str:
        """Error text for a key, empty string when there is none."""
        pass


class MessageBag(ErrorProvider):
    """Error messages grouped by field name."""

    def __init__(self, messages: Mapping[str, Any] | None = None):
        self.messages: dict[str, list[str]] = {}
        for key, value in (messages or {}).items():
            values = [value] if isinstance(value, str) else list(value)
            for message in values:
                self.add(key, message)

    def add(self, key: str, message: str) -> "MessageBag":
        self.messages.setdefault(key, []).append(message)
        return self

    def has(self, key: str) -> bool:
        return bool(self.messages.get(key))

    def first(self, key: str) -> str:
        messages = self.messages.get(key)
        return messages[0] if messages else ""

    def get_errors(self, key: str | None = None) -> str:
        if key is None:
            return ""
        return self.first(key)

    def __bool__(self) -> bool:
        return any(self.messages.values())


@dataclass
class RenderContext:
    """Shared state of one form render pass."""
    config: FormerConfig = field(default_factory=FormerConfig)
    framework: FrameworkStrategy | None = None
    errors: ErrorProvider | None = None
    rules: dict[str, dict[str, list[Any]]] = field(default_factory=dict)

    # Custom group tracking
    custom_group_open: bool = False
    active_group: "Group | None" = None

    # The field being rendered
    current_field: "Field | None" = None

    def __post_init__(self):
        if self.framework is None:
            self.framework = get_framework(self.config.framework, self.config)

    def get_errors(self, key: str | None = None) -> str:
        """Errors for a key, or for the field being rendered when no key is given."""
        if self.errors is None:
            return ""
        if key is None and self.current_field is not None:
            key = self.current_field.name
        if key is None:
            return ""
        return self.errors.get_errors(key) or ""

    def add_rules(self, name: str, rules: str | ValidationRuleSet) -> None:
        """Register rules for a field, merged with rules already known."""
        self.rules.setdefault(name, {}).update(parse_rules(rules))

    def get_rules(self, name: str | None) -> dict[str, list[Any]]:
        if name is None:
            return {}
        # Array fields share the rules of their base name
        return self.rules.get(name) or self.rules.get(name.removesuffix("[]"), {})

    def open_custom_group(self, group: "Group") -> None:
        if self.custom_group_open:
            logger.debug("Opening a custom group while another one is open, replacing it")
        self.custom_group_open = True
        self.active_group = group

    def close_custom_group(self) -> "Group | None":
        group = self.active_group
        self.custom_group_open = False
        self.active_group = None
        return group
