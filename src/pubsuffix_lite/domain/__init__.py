"""Domain model for pubsuffix-lite.

Re-exports all public types for convenient access:
    from pubsuffix_lite.domain import Category, Rule, SuffixMatch, SuffixOptions
"""
from pubsuffix_lite.domain.category import Category
from pubsuffix_lite.domain.options import SuffixOptions, set_defaults
from pubsuffix_lite.domain.results import SuffixMatch
from pubsuffix_lite.domain.rule import Rule
from pubsuffix_lite.domain.types import (
    EXCEPTION_MARKER,
    PUNYCODE_PREFIX,
    WILDCARD,
    Hostname,
    Label,
)

__all__ = [
    "Category",
    "Rule",
    "SuffixMatch",
    "SuffixOptions",
    "set_defaults",
    "EXCEPTION_MARKER",
    "PUNYCODE_PREFIX",
    "WILDCARD",
    "Hostname",
    "Label",
]
