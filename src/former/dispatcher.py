"""Dispatch field creation calls to the field builder classes.

A field method name (``text``, ``checkboxes``, ``submit``) is resolved to a
builder class by looking it up in each repository of the search path, then
through a fixed alias table.
"""

import logging
from typing import Any

from .form import fields  # noqa: F401  registers the bundled field builders
from .context import RenderContext
from .form.field import Field
from .registry import FIELDSPACE, FieldRegistry, default_registry
from .utils.strings import singular, studly, title

logger = logging.getLogger(__name__)

# Method names served by a builder of another name
ALIASES = {
    "submit": "Button",
    "link": "Button",
    "reset": "Button",
    "multiselect": "Select",
}

DEFAULT_CLASS = "Input"


def resolve(name: str, search_path: list[str], registry: FieldRegistry | None = None) -> str:
    """Get the builder class to use for a field method.

    Args:
        name: The field method, e.g. 'checkboxes'
        search_path: Namespace prefixes to look the class up in, in order
        registry: Registry to look classes up in (default: process-wide registry)

    Returns:
        Fully qualified builder name, e.g. 'former.form.fields.Checkbox'
    """
    if registry is None:
        registry = default_registry

    # If the field's name directly matches a class, use it
    class_name = singular(title(name))
    studly_class = singular(studly(name))
    for repository in search_path:
        if registry.exists(repository + studly_class):
            return repository + studly_class
        if registry.exists(repository + class_name):
            return repository + class_name

    # Else convert known fields to their classes
    return FIELDSPACE + ALIASES.get(name, DEFAULT_CLASS)


class MethodDispatcher:
    """Creates fields from method names."""

    def __init__(self, repositories: str | list[str] | None = None,
                 registry: FieldRegistry | None = None):
        if repositories is None:
            repositories = [FIELDSPACE]
        elif isinstance(repositories, str):
            repositories = [repositories]

        self.repositories: list[str] = list(repositories)
        self.registry = registry if registry is not None else default_registry

    def add_repository(self, repository: str) -> None:
        """Search a namespace before the ones already known."""
        if repository in self.repositories:
            self.repositories.remove(repository)
        self.repositories.insert(0, repository)

    def get_class_from_method(self, method: str) -> str:
        return resolve(method, self.repositories, self.registry)

    def to_fields(self, method: str, *args: Any, context: RenderContext | None = None, **kwargs: Any) -> Field:
        """Create the field a method name stands for.

        The method name is handed to the builder as the field type.
        """
        qualified = self.get_class_from_method(method)
        field_class = self.registry.get(qualified)

        logger.debug(f"Dispatching {method} to {qualified}")
        return field_class(method, *args, context=context, **kwargs)
