"""Framework strategies supplying CSS-framework classes and markup snippets."""

from .base import Capability, FrameworkStrategy
from .bootstrap import TwitterBootstrap3, TwitterBootstrap4
from .factory import available_frameworks, get_framework, register_framework
from .nude import Nude

__all__ = [
    "Capability",
    "FrameworkStrategy",
    "Nude",
    "TwitterBootstrap3",
    "TwitterBootstrap4",
    "available_frameworks",
    "get_framework",
    "register_framework",
]
