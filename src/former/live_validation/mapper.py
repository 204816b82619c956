"""Transformation of validation rules into HTML5 live validation attributes."""

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any

from ..mimes import MimeLookup, default_mime_lookup
from ..utils.dates import parse_date
from .rules import Rule, RuleKind, ValidationRuleSet, to_rules

if TYPE_CHECKING:
    from ..form.field import Field

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
TIME_SUFFIX = "T%H:%M:%S"

# Extensions accepted by the image rule
IMAGE_EXTENSIONS = ["jpg", "png", "gif", "bmp"]


class LiveValidation:
    """Applies validation rules to a field as client-side attributes.

    The field is mutated in place. Pattern-producing rules overwrite each
    other: the last one applied wins.
    """

    def __init__(self, field: "Field", mimes: MimeLookup | None = None,
                 now: datetime | None = None):
        self.field = field
        self.mime_lookup = mimes or default_mime_lookup
        self.now = now
        self.handlers: dict[RuleKind, Callable[[list[Any]], Any]] = {
            RuleKind.EMAIL: self.email,
            RuleKind.URL: self.url,
            RuleKind.REQUIRED: self.required,
            RuleKind.INTEGER: self.integer,
            RuleKind.NUMERIC: self.numeric,
            RuleKind.NOT_NUMERIC: self.not_numeric,
            RuleKind.ALPHA: self.alpha,
            RuleKind.ALPHA_NUM: self.alpha_num,
            RuleKind.ALPHA_DASH: self.alpha_dash,
            RuleKind.IN: self.in_,
            RuleKind.NOT_IN: self.not_in,
            RuleKind.MATCH: self.match,
            RuleKind.REGEX: self.regex,
            RuleKind.MAX: self.max,
            RuleKind.SIZE: self.size,
            RuleKind.MIN: self.min,
            RuleKind.BETWEEN: self.between,
            RuleKind.MIMES: self.mimes,
            RuleKind.IMAGE: self.image,
            RuleKind.BEFORE: self.before,
            RuleKind.AFTER: self.after,
        }

    def apply(self, rules: ValidationRuleSet | Iterable[Rule]) -> bool:
        """Apply live validation rules to the field.

        Args:
            rules: Mapping of rule name to parameters, or Rule values.
                Unsupported rule names are skipped.

        Returns:
            False if there was nothing to apply, True otherwise
        """
        if not isinstance(rules, (Mapping, str)):
            rules = list(rules)
        if not rules:
            return False

        for rule in to_rules(rules):
            logger.debug(f"Applying rule {rule} to field {self.field.name}")
            self.handlers[rule.kind](list(rule.parameters))

        return True

    # Field types

    def email(self, parameters: list[Any] | None = None) -> None:
        self.field.set_type("email")

    def url(self, parameters: list[Any] | None = None) -> None:
        self.field.set_type("url")

    def required(self, parameters: list[Any] | None = None) -> None:
        self.field.required()

    # Patterns

    def integer(self, parameters: list[Any] | None = None) -> None:
        self.field.pattern(r"\d+")

    def numeric(self, parameters: list[Any] | None = None) -> None:
        """Number fields get a free step, other fields a decimal pattern."""
        if self.field.is_of_type("number"):
            self.field.step("any")
        else:
            self.field.pattern(r"[+-]?\d*\.?\d+")

    def not_numeric(self, parameters: list[Any] | None = None) -> None:
        self.field.pattern(r"\D+")

    def alpha(self, parameters: list[Any] | None = None) -> None:
        self.field.pattern(r"[a-zA-Z]+")

    def alpha_num(self, parameters: list[Any] | None = None) -> None:
        self.field.pattern(r"[a-zA-Z0-9]+")

    def alpha_dash(self, parameters: list[Any] | None = None) -> None:
        self.field.pattern(r"[a-zA-Z0-9_\-]+")

    def in_(self, possible: list[Any]) -> None:
        """Only accept one of the listed values."""
        if len(possible) == 1:
            choices = str(possible[0])
        else:
            choices = "(" + "|".join(str(value) for value in possible) + ")"

        self.field.pattern(f"^{choices}$")

    def not_in(self, impossible: list[Any]) -> None:
        """Accept anything but the listed values."""
        excluded = "$|^".join(str(value) for value in impossible)
        self.field.pattern(f"(?:(?!^{excluded}$).)*")

    def match(self, pattern: list[Any]) -> None:
        """Use an existing regex, stripped of its delimiters."""
        self.field.pattern(str(pattern[0])[1:-1])

    def regex(self, pattern: list[Any]) -> None:
        self.match(pattern)

    # Boundaries

    def max(self, maximum: list[Any]) -> None:
        """File fields get a size bound, others a value or length bound."""
        if self.field.is_of_type("file"):
            self.size(maximum)
        else:
            self._set_max(maximum[0])

    def size(self, size: list[Any]) -> None:
        self.field.max(size[0])

    def min(self, minimum: list[Any]) -> None:
        self._set_min(minimum[0])

    def between(self, between: list[Any]) -> None:
        minimum, maximum = between
        self._set_between(minimum, maximum)

    def mimes(self, mimes: list[Any]) -> bool | None:
        """Set accepted MIME types, only on file fields.

        Returns:
            False if the field does not take files
        """
        if not self.field.is_of_type("file"):
            return False

        self.field.accept(self.mime_lookup.accept(mimes))
        return None

    def image(self, parameters: list[Any] | None = None) -> None:
        self.mimes(IMAGE_EXTENSIONS)

    # Dates

    def before(self, value: list[Any]) -> None:
        self.field.max(self._format_date(value[0]))

    def after(self, value: list[Any]) -> None:
        self.field.min(self._format_date(value[0]))

    # Helpers

    def _format_date(self, value: Any) -> str:
        """Format a date the way date inputs expect it.

        Datetime fields also get the time of day.
        """
        date_format = DATE_FORMAT
        if self.field.is_of_type("datetime", "datetime-local"):
            date_format += TIME_SUFFIX

        return parse_date(value, now=self.now).strftime(date_format)

    def _set_max(self, maximum: Any) -> None:
        if self.field.is_of_type("number"):
            self.field.max(maximum)
        else:
            self.field.maxlength(maximum)

    def _set_min(self, minimum: Any) -> None:
        if self.field.is_of_type("number"):
            self.field.min(minimum)
        else:
            self.field.pattern(f".{{{minimum},}}")

    def _set_between(self, minimum: Any, maximum: Any) -> None:
        if self.field.is_of_type("number"):
            self.field.min(minimum)
            self.field.max(maximum)
        else:
            self.field.pattern(f".{{{minimum},{maximum}}}")

            # still let the browser stop text input once the max is reached
            self.field.maxlength(maximum)
