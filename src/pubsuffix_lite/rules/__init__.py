"""Public Suffix List parsing."""

from pubsuffix_lite.rules.parser import (
    RuleSyntaxError,
    load_rules,
    parse_rule,
    parse_rules,
)

__all__ = [
    "RuleSyntaxError",
    "load_rules",
    "parse_rule",
    "parse_rules",
]
