"""Rule kinds and the rule description parser.

Validation rules arrive either as a mapping of rule name to parameters or as
the pipe-delimited description language (``required|email|between:3,10``).
Both are normalized into ``Rule`` values carrying a closed ``RuleKind``.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

# Rule name -> parameter list
ValidationRuleSet = Mapping[str, Sequence[Any]]


class RuleKind(str, Enum):
    """Rules that translate into client-side attributes."""
    EMAIL = "email"
    URL = "url"
    REQUIRED = "required"
    INTEGER = "integer"
    NUMERIC = "numeric"
    NOT_NUMERIC = "not_numeric"
    ALPHA = "alpha"
    ALPHA_NUM = "alpha_num"
    ALPHA_DASH = "alpha_dash"
    IN = "in"
    NOT_IN = "not_in"
    MATCH = "match"
    REGEX = "regex"
    MAX = "max"
    SIZE = "size"
    MIN = "min"
    BETWEEN = "between"
    MIMES = "mimes"
    IMAGE = "image"
    BEFORE = "before"
    AFTER = "after"


# Rules whose single parameter is a delimited pattern that may contain "|" or ","
PATTERN_RULES = {RuleKind.MATCH.value, RuleKind.REGEX.value}


@dataclass(frozen=True)
class Rule:
    """A supported rule with its parameters."""
    kind: RuleKind
    parameters: tuple = ()

    @classmethod
    def from_entry(cls, name: str, parameters: Any = None) -> "Rule | None":
        """Build a rule from a rule set entry, None when the name is unsupported."""
        try:
            kind = RuleKind(str(name).strip().lower())
        except ValueError:
            return None
        return cls(kind, tuple(_as_parameter_list(parameters)))

    @property
    def name(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        if not self.parameters:
            return self.name
        return f"{self.name}:{','.join(str(p) for p in self.parameters)}"


def to_rules(rules: ValidationRuleSet | Iterable[Rule]) -> list[Rule]:
    """Normalize a rule set into supported rules, skipping unknown names."""
    if isinstance(rules, str):
        rules = parse_rules(rules)

    if isinstance(rules, Mapping):
        entries = rules.items()
    else:
        entries = []
        for rule in rules:
            if isinstance(rule, Rule):
                entries.append((rule.kind.value, rule.parameters))
            else:
                entries.append(parse_rule(rule))

    supported = []
    for name, parameters in entries:
        rule = Rule.from_entry(name, parameters)
        if rule is None:
            logger.debug(f"Skipping unsupported rule: {name}")
            continue
        supported.append(rule)
    return supported


def parse_rule(segment: str) -> tuple[str, list[str]]:
    """Split ``name:param,param`` into its name and parameters.

    Examples:
        >>> parse_rule("between:3,10")
        ('between', ['3', '10'])
        >>> parse_rule("regex:/^a,b$/")
        ('regex', ['/^a,b$/'])
    """
    name, _, raw = segment.partition(":")
    name = name.strip().lower()

    if not raw:
        return name, []
    if name in PATTERN_RULES:
        return name, [raw]
    return name, [parameter.strip() for parameter in raw.split(",")]


def parse_rules(description: str | Iterable[str] | ValidationRuleSet | None) -> dict[str, list[Any]]:
    """Parse a rule description into a rule set.

    Args:
        description: ``"required|email|between:3,10"``, a list of such
            segments, or an existing mapping of rule names to parameters

    Returns:
        Mapping of rule name to parameter list
    """
    if not description:
        return {}

    if isinstance(description, Mapping):
        return {
            str(name).strip().lower(): _as_parameter_list(parameters)
            for name, parameters in description.items()
        }

    if isinstance(description, str):
        segments = _split_description(description)
    else:
        segments = [str(segment).strip() for segment in description if str(segment).strip()]

    rules: dict[str, list[Any]] = {}
    for segment in segments:
        name, parameters = parse_rule(segment)
        if name:
            rules[name] = parameters
    return rules


def _split_description(description: str) -> list[str]:
    """Split on "|" while keeping delimited patterns whole.

    A pattern whose closing delimiter never comes is kept as its own
    segment, so the rules after it still parse.
    """
    pieces = description.split("|")
    segments = []

    while pieces:
        segment = pieces.pop(0)
        name, separator, raw = segment.partition(":")

        if separator and name.strip().lower() in PATTERN_RULES and raw:
            delimiter = raw[0]
            closing = None
            if delimiter not in raw[1:]:
                closing = next((index for index, piece in enumerate(pieces) if delimiter in piece), None)
            if closing is not None:
                raw = "|".join([raw, *pieces[:closing + 1]])
                del pieces[:closing + 1]
            segment = f"{name}:{raw}"

        if segment.strip():
            segments.append(segment.strip())

    return segments


def _as_parameter_list(parameters: Any) -> list[Any]:
    if parameters is None:
        return []
    if isinstance(parameters, (str, bytes)) or not isinstance(parameters, Iterable):
        return [parameters]
    return list(parameters)
