"""RuleStore: the public suffix ruleset organized for lookup.

Holds two RuleTries, one for ordinary rules and one for exception
rules. Keeping exceptions apart lets the matcher find the best ordinary
match and the best exception match independently and let the exception
win whenever there is one.

The store is filled once by build() and only read afterwards, so a
single instance can be shared by any number of threads without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pubsuffix_lite.domain.rule import Rule
from pubsuffix_lite.domain.types import Label
from pubsuffix_lite.matching.labels import decode_label
from pubsuffix_lite.matching.trie import RuleTrie, TrieNode

log = logging.getLogger(__name__)


class RuleStore:
    def __init__(self) -> None:
        self._rules = RuleTrie()
        self._exceptions = RuleTrie()

    @classmethod
    def build(cls, rules: Iterable[Rule]) -> RuleStore:
        """Route every rule into the ordinary or exception trie."""
        store = cls()
        for rule in rules:
            if not isinstance(rule, Rule):
                raise TypeError(f"Expected Rule, got {type(rule).__name__}")
            target = store._exceptions if rule.exception else store._rules
            target.insert(rule.parts, rule.category)
        log.debug(
            "Built rule store: %d rules, %d exceptions, %d nodes",
            store.rule_count,
            store.exception_count,
            store.node_count(),
        )
        return store

    @property
    def rules(self) -> TrieNode:
        """Root of the ordinary-rules trie."""
        return self._rules.root

    @property
    def exceptions(self) -> TrieNode:
        """Root of the exception-rules trie."""
        return self._exceptions.root

    @property
    def rule_count(self) -> int:
        return self._rules.rule_count

    @property
    def exception_count(self) -> int:
        return self._exceptions.rule_count

    def node_count(self) -> int:
        return self._rules.node_count() + self._exceptions.node_count()

    def has_tld(self, label: Label) -> bool:
        """Check whether label is a top-level rule.

        Every TLD sits directly under the root of the ordinary trie, so
        this is a single dictionary probe.
        """
        return decode_label(label) in self._rules.root.children
