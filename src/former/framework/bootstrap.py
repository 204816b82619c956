"""Twitter Bootstrap framework strategies."""

from typing import Any

from ..config import FormType
from ..html import Element, escape
from .base import Capability, FrameworkStrategy


def _is_button(item: Any) -> bool:
    """Whether a prepended/appended item is a button rather than text."""
    if hasattr(item, "is_button"):
        return item.is_button()
    return str(item).lstrip().startswith(("<button", "<a ", "<input type=\"submit\""))


class TwitterBootstrap3(FrameworkStrategy):
    """Bootstrap 3 classes and markup."""

    capabilities = frozenset({Capability.GROUP_MARKUP, Capability.BLOCK_HELP, Capability.HORIZONTAL})

    icon_defaults = {"tag": "span", "set": "glyphicon", "prefix": "glyphicon"}

    states = {"has-error", "has-warning", "has-success"}

    @property
    def name(self) -> str:
        return "TwitterBootstrap3"

    def get_group_classes(self) -> list[str]:
        return ["form-group"]

    def get_label_classes(self) -> list[str]:
        if self.is_horizontal:
            return ["control-label", self.config.columns.label]
        if self.config.form_type == FormType.INLINE:
            return ["sr-only"]
        return ["control-label"]

    def get_field_classes(self, field) -> list[str]:
        if field.is_button():
            return ["btn"]
        if field.is_checkable():
            return []
        if field.is_of_type("hidden"):
            return []
        return ["form-control"]

    def error_state(self) -> str:
        return "has-error"

    def filter_state(self, state: str | None) -> str | None:
        if not state:
            return None
        if state in self.states:
            return state
        prefixed = f"has-{state}"
        return prefixed if prefixed in self.states else None

    def create_help(self, text: str, attributes: dict[str, Any] | None = None) -> Element:
        return Element("span", escape(text), attributes).add_class("help-block")

    def create_block_help(self, text: str, attributes: dict[str, Any] | None = None) -> Element:
        return Element("p", escape(text), attributes).add_class("help-block")

    def create_validation_error(self, errors: str) -> Element:
        return Element("span", escape(errors)).add_class("help-block")

    def wrap_field(self, content: Any) -> str:
        if self.is_horizontal:
            return Element("div", content).add_class(self.config.columns.field).render()
        return str(content)

    def place_around(self, item: Any) -> str:
        if _is_button(item):
            return Element("span", item).add_class("input-group-btn").render()
        return Element("span", item).add_class("input-group-addon").render()

    def prepend_append(self, field, prepend: list[str], append: list[str]) -> str:
        content = "".join(prepend) + field.render() + "".join(append)
        return Element("div", content).add_class("input-group").render()


class TwitterBootstrap4(TwitterBootstrap3):
    """Bootstrap 4 classes and markup."""

    icon_defaults = {"tag": "i", "set": "fa", "prefix": "fa"}

    states = {"is-invalid", "is-valid"}

    state_aliases = {
        "error": "is-invalid",
        "danger": "is-invalid",
        "success": "is-valid",
    }

    @property
    def name(self) -> str:
        return "TwitterBootstrap4"

    def get_group_classes(self) -> list[str]:
        if self.is_horizontal:
            return ["form-group", "row"]
        return ["form-group"]

    def get_label_classes(self) -> list[str]:
        if self.is_horizontal:
            return ["col-form-label", self.config.columns.label]
        if self.config.form_type == FormType.INLINE:
            return ["sr-only"]
        return []

    def get_field_classes(self, field) -> list[str]:
        if field.is_button():
            return ["btn"]
        if field.is_checkable():
            return ["form-check-input"]
        if field.is_of_type("hidden"):
            return []
        return ["form-control"]

    def error_state(self) -> str:
        return "is-invalid"

    def filter_state(self, state: str | None) -> str | None:
        if not state:
            return None
        if state in self.states:
            return state
        return self.state_aliases.get(state)

    def create_help(self, text: str, attributes: dict[str, Any] | None = None) -> Element:
        return Element("small", escape(text), attributes).add_class(["form-text", "text-muted"])

    def create_block_help(self, text: str, attributes: dict[str, Any] | None = None) -> Element:
        return Element("div", escape(text), attributes).add_class(["form-text", "text-muted"])

    def create_validation_error(self, errors: str) -> Element:
        return Element("div", escape(errors)).add_class(["invalid-feedback", "d-block"])

    def place_around(self, item: Any) -> str:
        if _is_button(item):
            return str(item)
        return Element("span", item).add_class("input-group-text").render()

    def prepend_append(self, field, prepend: list[str], append: list[str]) -> str:
        content = ""
        if prepend:
            content += Element("div", "".join(prepend)).add_class("input-group-prepend").render()
        content += field.render()
        if append:
            content += Element("div", "".join(append)).add_class("input-group-append").render()
        return Element("div", content).add_class("input-group").render()
