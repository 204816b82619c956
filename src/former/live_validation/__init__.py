"""Live validation: HTML5 attributes derived from server-side validation rules.

Rules such as ``required``, ``email`` or ``between:3,10`` are mapped to the
``required``, ``type``, ``pattern``, ``min``/``max``/``maxlength`` and
``accept`` attributes browsers check before a form is submitted.
"""

from .mapper import LiveValidation
from .rules import Rule, RuleKind, ValidationRuleSet, parse_rule, parse_rules, to_rules

__all__ = [
    "LiveValidation",
    "Rule",
    "RuleKind",
    "ValidationRuleSet",
    "parse_rule",
    "parse_rules",
    "to_rules",
]
