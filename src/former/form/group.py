"""Helper class to build groups: the label, help and error markup around a field."""

from typing import TYPE_CHECKING, Any

from ..exceptions import UnsupportedFrameworkOperation
from ..framework import Capability, FrameworkStrategy
from ..html import Element, escape

if TYPE_CHECKING:
    from ..context import RenderContext
    from .field import Field


class Group(Element):
    """The wrapping markup of one field, or of several fields in a custom group."""

    def __init__(self, context: "RenderContext", label: str | Element | None = None,
                 validations: str | list[str] | None = None):
        super().__init__("div")
        self.context = context

        # Current state class (e.g. has-error)
        self.current_state: str | None = None
        self._raw = False
        self.label: Element | None = None
        self.help_blocks: dict[str, Element] = {}
        self.prepended: list[str] = []
        self.appended: list[str] = []

        self.add_class(self.framework.get_group_classes())

        # Invisible when the framework has no group markup
        if not self.framework.supports(Capability.GROUP_MARKUP):
            self.element = ""

        if label:
            self.set_label(label)

        # Validations used to override the group's own conclusions
        if isinstance(validations, str):
            validations = [validations]
        self.validations: list[str] = list(validations or [])

    @property
    def framework(self) -> FrameworkStrategy:
        return self.context.framework

    def __str__(self) -> str:
        """The opening of the group followed by its label."""
        return self.open() + str(self.get_formatted_label() or "")

    def open(self) -> str:
        """Opening tag, with state and required classes applied."""
        if self.get_errors():
            self.state(self.framework.error_state())

        if self.current_state:
            self.add_class(self.current_state)

        field = self.context.current_field
        if field is not None and field.group is self and field.is_required():
            self.add_class(self.context.config.required_class)

        return super().open()

    def contents(self, contents: Any) -> str:
        """Wrap arbitrary contents in the group."""
        return self.wrap(contents, self.get_formatted_label())

    def wrap_field(self, field: "Field") -> str:
        """Wrap a field with its label, decorations and help."""
        label = self.get_label(field)
        content = self.prepend_append(field)
        content += self.get_help()

        return self.wrap(content, label)

    def wrap(self, contents: Any, label: Any = None) -> str:
        group = self.open()
        group += str(label or "")
        group += self.framework.wrap_field(contents)
        group += self.close()

        return group

    # Field methods

    def state(self, state: str | None) -> None:
        """Set the state of the group, filtered by the framework."""
        self.current_state = self.framework.filter_state(state)

    def add_group_class(self, class_name: str) -> None:
        self.add_class(class_name)

    def set_label(self, label: str | Element) -> None:
        if not isinstance(label, Element):
            label = Element("label", escape(label), {"for": label})

        self.label = label

    def get_formatted_label(self) -> Element | None:
        if not self.label:
            return None

        return self.label.add_class(self.framework.get_label_classes())

    def raw(self) -> None:
        """Disable the group for the current field."""
        self._raw = True

    def is_raw(self) -> bool:
        return self._raw

    # Help blocks

    def help(self, help_text: str | None, attributes: dict[str, Any] | None = None) -> bool | None:
        return self.inline_help(help_text, attributes)

    def inline_help(self, help_text: str | None, attributes: dict[str, Any] | None = None) -> bool | None:
        """Add an inline help, False when there is no text."""
        if not help_text:
            return False

        self.help_blocks["inline"] = self.framework.create_help(help_text, attributes)
        return None

    def block_help(self, help_text: str | None, attributes: dict[str, Any] | None = None) -> bool | None:
        """Add a block help, only available on Bootstrap frameworks.

        Raises:
            UnsupportedFrameworkOperation: If the framework has no block help
        """
        if not self.framework.supports(Capability.BLOCK_HELP):
            raise UnsupportedFrameworkOperation(
                "block_help",
                self.framework.name,
                "This method is only available on the Bootstrap framework"
            )

        if not help_text:
            return False

        self.help_blocks["block"] = self.framework.create_block_help(help_text, attributes)
        return None

    # Prepend/append

    def prepend(self, *items: Any) -> None:
        self.place_around(items, "prepend")

    def append(self, *items: Any) -> None:
        self.place_around(items, "append")

    def prepend_icon(self, icon: str, attributes: dict[str, Any] | None = None,
                     icon_settings: dict[str, str] | None = None) -> None:
        self.prepend(self.framework.create_icon(icon, attributes, icon_settings))

    def append_icon(self, icon: str, attributes: dict[str, Any] | None = None,
                    icon_settings: dict[str, str] | None = None) -> None:
        self.append(self.framework.create_icon(icon, attributes, icon_settings))

    # Helpers

    def get_errors(self) -> str:
        """Errors deciding the state of the group.

        Outside a custom group the errors of the current field apply. Inside
        one, only the errors of the group's validation keys count, and none
        at all when no keys were given.
        """
        if not self.context.custom_group_open:
            return self.context.get_errors()

        if self.validations:
            return "".join(self.context.get_errors(validation) for validation in self.validations)

        return ""

    def get_label(self, field: "Field | None" = None) -> Element | None:
        """The label of a field, wrapped in framework classes."""
        if field is None or not self.label:
            return None

        label = self.label.add_class(self.framework.get_label_classes())
        label = self.framework.create_label_of(field, label)
        return self.framework.wrap_label(label)

    def get_help(self) -> str:
        """Help markup, replaced by the error message when there is one."""
        inline = self.help_blocks.get("inline")
        block = self.help_blocks.get("block")

        errors = self.context.get_errors()
        if errors and self.context.config.error_messages:
            inline = self.framework.create_validation_error(errors)

        return "".join(str(part) for part in (inline, block) if part)

    def prepend_append(self, field: "Field") -> str:
        if not self.prepended and not self.appended:
            return field.render()

        return self.framework.prepend_append(field, self.prepended, self.appended)

    def place_around(self, items: Any, place: str) -> None:
        target = self.prepended if place == "prepend" else self.appended
        for item in items:
            target.append(self.framework.place_around(item))
