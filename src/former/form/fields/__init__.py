"""Field builders.

Importing this package registers every bundled builder under
``former.form.fields.``.
"""

from .button import Button
from .checkable import Checkable
from .checkbox import Checkbox
from .file import File
from .input import Input
from .radio import Radio
from .select import Select
from .textarea import Textarea

__all__ = [
    "Button",
    "Checkable",
    "Checkbox",
    "File",
    "Input",
    "Radio",
    "Select",
    "Textarea",
]
