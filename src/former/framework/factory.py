"""Lookup of framework strategies by name."""

import logging

from ..config import FormerConfig
from ..exceptions import InvalidFrameworkException
from .base import FrameworkStrategy
from .bootstrap import TwitterBootstrap3, TwitterBootstrap4
from .nude import Nude

logger = logging.getLogger(__name__)

FRAMEWORKS: dict[str, type[FrameworkStrategy]] = {
    "Nude": Nude,
    "TwitterBootstrap3": TwitterBootstrap3,
    "TwitterBootstrap4": TwitterBootstrap4,
}


def register_framework(name: str, strategy: type[FrameworkStrategy]) -> None:
    """Make a framework strategy available under a name."""
    FRAMEWORKS[name] = strategy


def available_frameworks() -> list[str]:
    return sorted(FRAMEWORKS)


def get_framework(name: str, config: FormerConfig | None = None) -> FrameworkStrategy:
    """Create the framework strategy registered under a name.

    Args:
        name: Framework name, e.g. 'TwitterBootstrap3'
        config: Configuration handed to the strategy

    Returns:
        The framework strategy

    Raises:
        InvalidFrameworkException: If no framework is registered under that name
    """
    if name not in FRAMEWORKS:
        raise InvalidFrameworkException().set_framework(name)

    logger.debug(f"Using framework {name}")
    return FRAMEWORKS[name](config)
