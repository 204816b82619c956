"""Framework-free markup."""

from typing import Any

from ..html import Element, escape
from .base import FrameworkStrategy


class Nude(FrameworkStrategy):
    """Plain markup without any CSS framework classes.

    Groups render no wrapping element.
    """

    @property
    def name(self) -> str:
        return "Nude"

    def get_group_classes(self) -> list[str]:
        return []

    def get_label_classes(self) -> list[str]:
        return []

    def get_field_classes(self, field) -> list[str]:
        return []

    def error_state(self) -> str:
        return "error"

    def create_help(self, text: str, attributes: dict[str, Any] | None = None) -> Element:
        return Element("span", escape(text), attributes).add_class("help")

    def create_validation_error(self, errors: str) -> Element:
        return Element("span", escape(errors)).add_class(["help", "error"])

    def prepend_append(self, field, prepend: list[str], append: list[str]) -> str:
        return "".join(prepend) + field.render() + "".join(append)
