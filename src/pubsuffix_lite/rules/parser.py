"""Public Suffix List loader.

Turns the list's text format into Rule records:

    // ===BEGIN ICANN DOMAINS===
    uk
    co.uk
    *.kawasaki.jp
    !city.kawasaki.jp
    // ===END ICANN DOMAINS===
    // ===BEGIN PRIVATE DOMAINS===
    github.io
    // ===END PRIVATE DOMAINS===

One rule per line, "//" starts a comment line, and only the first
whitespace-delimited token of a line is the rule. The BEGIN/END markers
decide each rule's category; rules outside any section count as ICANN.
Punycode labels in rules are decoded so they share keys with decoded
hostname labels.
"""
from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from pubsuffix_lite.domain.category import Category
from pubsuffix_lite.domain.rule import Rule
from pubsuffix_lite.domain.types import EXCEPTION_MARKER
from pubsuffix_lite.matching.labels import decode_label

log = logging.getLogger(__name__)

_COMMENT = "//"
_SECTION_MARKERS = {
    "===BEGIN ICANN DOMAINS===": Category.ICANN,
    "===END ICANN DOMAINS===": Category.ICANN,
    "===BEGIN PRIVATE DOMAINS===": Category.PRIVATE,
    "===END PRIVATE DOMAINS===": Category.ICANN,
}


class RuleSyntaxError(ValueError):
    """Raised when a line of the rule list is not a valid rule."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def parse_rule(pattern: str, category: Category = Category.ICANN) -> Rule:
    """Build a Rule from its list form, e.g. "!city.kawasaki.jp"."""
    source = pattern
    text = pattern.strip().lower()
    exception = text.startswith(EXCEPTION_MARKER)
    if exception:
        text = text[len(EXCEPTION_MARKER):]
    if not text:
        raise RuleSyntaxError(f"empty rule: {source!r}")

    labels = text.split(".")
    if any(not label for label in labels):
        raise RuleSyntaxError(f"empty label in rule: {source!r}")
    labels.reverse()

    try:
        return Rule(
            parts=tuple(decode_label(label) for label in labels),
            exception=exception,
            category=category,
            source=source,
        )
    except ValueError as e:
        raise RuleSyntaxError(str(e)) from e


def parse_rules(lines: Iterable[str]) -> list[Rule]:
    """Parse rule list text, one line per item, into Rules."""
    rules: list[Rule] = []
    category = Category.ICANN
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        if line.startswith(_COMMENT):
            marker = line[len(_COMMENT):].strip()
            category = _SECTION_MARKERS.get(marker, category)
            continue

        token = line.split()[0]
        try:
            rules.append(parse_rule(token, category))
        except RuleSyntaxError as e:
            raise RuleSyntaxError(str(e), line_number) from e
    return rules


def load_rules(path: str | os.PathLike[str]) -> list[Rule]:
    """Read and parse a rule list file (UTF-8)."""
    with open(path, "r", encoding="utf-8") as f:
        rules = parse_rules(f)
    exceptions = sum(1 for r in rules if r.exception)
    private = sum(1 for r in rules if r.is_private)
    log.info(
        "Loaded %d rules (%d exceptions, %d private) from %s",
        len(rules),
        exceptions,
        private,
        path,
    )
    return rules
