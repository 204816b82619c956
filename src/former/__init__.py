"""former - Fluent HTML form builder with live validation.

former renders inputs, selects, labels and grouping markup for the CSS
framework of your choice, and turns server-side validation rules into HTML5
attributes checked by the browser.
"""

__version__ = "0.1.0"
__author__ = "former contributors"
__description__ = "Fluent HTML form builder with live validation"

from former.config import FormerConfig
from former.exceptions import FormerError, InvalidFrameworkException, UnsupportedFrameworkOperation
from former.former import Former

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "Former",
    "FormerConfig",
    "FormerError",
    "InvalidFrameworkException",
    "UnsupportedFrameworkOperation",
]
