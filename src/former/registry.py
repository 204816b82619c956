"""Registry of field builder classes.

Builder modules register their classes under a namespace prefix when they are
imported. The dispatcher resolves field names against this registry instead of
probing for classes at runtime.
"""

import logging

logger = logging.getLogger(__name__)

# Namespace the bundled field builders register under
FIELDSPACE = "former.form.fields."


class FieldRegistry:
    """Mapping of fully qualified builder names to builder classes."""

    def __init__(self):
        self._classes: dict[str, type] = {}

    def register(self, cls: type, namespace: str = FIELDSPACE) -> type:
        """Register a builder class under a namespace prefix."""
        qualified = f"{namespace}{cls.__name__}"
        self._classes[qualified] = cls
        logger.debug(f"Registered field builder {qualified}")
        return cls

    def exists(self, qualified: str) -> bool:
        """Check whether a fully qualified builder name is registered."""
        return qualified in self._classes

    def get(self, qualified: str) -> type:
        """Get the builder class registered under a qualified name.

        Raises:
            KeyError: If nothing is registered under that name
        """
        if qualified not in self._classes:
            raise KeyError(f"No field builder registered as {qualified}")
        return self._classes[qualified]

    def names(self) -> list[str]:
        """All registered qualified names, sorted."""
        return sorted(self._classes)

    def __contains__(self, qualified: str) -> bool:
        return self.exists(qualified)

    def __len__(self) -> int:
        return len(self._classes)


default_registry = FieldRegistry()


def register_field(namespace: str = FIELDSPACE, registry: FieldRegistry | None = None):
    """Class decorator registering a field builder.

    Args:
        namespace: Namespace prefix to register under
        registry: Registry to use (default: the process-wide registry)
    """
    def decorator(cls):
        target = registry if registry is not None else default_registry
        target.register(cls, namespace)
        return cls
    return decorator
