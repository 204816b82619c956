"""The Former facade: creates fields and groups sharing one render context."""

from collections.abc import Mapping
from functools import partial
from typing import Any

from .config import FormerConfig
from .context import ErrorProvider, MessageBag, RenderContext
from .dispatcher import MethodDispatcher
from .form.field import Field
from .form.group import Group
from .framework import FrameworkStrategy, get_framework
from .live_validation import ValidationRuleSet


class Former:
    """Fluent form builder.

    Any unknown attribute is treated as a field method, so ``former.email("login")``
    creates an email input and ``former.checkboxes("tags")`` a series of
    checkboxes. One instance holds the state of one render pass; build a new
    one per request.

    Example:
        >>> former = Former().with_rules({"login": "required|email"})
        >>> html = str(former.text("login"))
    """

    def __init__(self, config: FormerConfig | None = None, framework: str | None = None,
                 errors: ErrorProvider | Mapping[str, Any] | None = None):
        self.config = config or FormerConfig()
        self.context = RenderContext(
            config=self.config,
            framework=get_framework(framework or self.config.framework, self.config),
        )
        self.dispatcher = MethodDispatcher(self.config.fields_repositories)

        if errors is not None:
            self.with_errors(errors)

    def __getattr__(self, method: str):
        if method.startswith("_"):
            raise AttributeError(method)
        return partial(self.field, method)

    @property
    def framework(self) -> FrameworkStrategy:
        return self.context.framework

    def field(self, method: str, *args: Any, **kwargs: Any) -> Field:
        """Create a field from its method name, e.g. ``field("email", "login")``."""
        return self.dispatcher.to_fields(method, *args, context=self.context, **kwargs)

    def use_framework(self, name: str) -> "Former":
        """Switch the framework used by fields created from now on.

        Raises:
            InvalidFrameworkException: If the framework is unknown
        """
        self.context.framework = get_framework(name, self.config)
        return self

    def with_rules(self, rules: Mapping[str, str | ValidationRuleSet]) -> "Former":
        """Register validation rules per field name, applied as live validation."""
        for name, field_rules in rules.items():
            self.context.add_rules(name, field_rules)
        return self

    def with_errors(self, errors: ErrorProvider | Mapping[str, Any]) -> "Former":
        """Use an error provider, or a mapping of field name to messages."""
        if not isinstance(errors, ErrorProvider):
            errors = MessageBag(errors)
        self.context.errors = errors
        return self

    def get_errors(self, name: str | None = None) -> str:
        return self.context.get_errors(name)

    def get_option(self, key: str) -> Any:
        return getattr(self.config, key)

    def group(self, label: str | None = None, validations: str | list[str] | None = None) -> Group:
        """Open a custom group wrapping the fields created until ``close_group``.

        Args:
            label: The group label
            validations: Field names whose errors put the group in error state
        """
        group = Group(self.context, label, validations)
        self.context.open_custom_group(group)
        return group

    def close_group(self) -> str:
        """Close the custom group, returning its closing markup."""
        group = self.context.close_custom_group()
        if group is None:
            return ""
        return group.close()
