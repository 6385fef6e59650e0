"""SuffixMatcher: longest-match public suffix lookup.

Usage:
    store = RuleStore.build(load_rules("public_suffix_list.dat"))
    matcher = SuffixMatcher(store)

    matcher.lookup("www.example.co.uk")
    # SuffixMatch(public_suffix="co.uk", is_icann=True, is_private=False)

    matcher.lookup("foo.github.io", SuffixOptions(allow_private_domains=True))
    # SuffixMatch(public_suffix="github.io", is_icann=False, is_private=True)

A lookup walks the ordinary trie from the rightmost label inward,
following both the exact label and the wildcard branch at every level,
and keeps the candidate that consumed the most labels. If that finds
anything, the exception trie is walked the same way; an exception match
replaces the ordinary one and gives up its own leftmost label, which is
how "!city.kawasaki.jp" turns city.kawasaki.jp back into a registrable
domain under "kawasaki.jp".

Recursion only follows existing trie nodes, so its depth is bounded by
the longest rule no matter how many labels the hostname has.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pubsuffix_lite.domain.category import Category
from pubsuffix_lite.domain.options import SuffixOptions
from pubsuffix_lite.domain.results import SuffixMatch
from pubsuffix_lite.domain.types import Hostname, Label
from pubsuffix_lite.matching.labels import split_labels
from pubsuffix_lite.matching.rule_store import RuleStore
from pubsuffix_lite.matching.trie import TrieNode

_DEFAULT_OPTIONS = SuffixOptions()


@dataclass(frozen=True, slots=True)
class MatchCandidate:
    """A terminal node reached during traversal.

    index is where the matched suffix starts in the hostname's label
    list, so a smaller index means more labels were consumed.
    category holds the accepted bits (terminal mask & allowed mask).
    """
    index: int
    category: Category

    @property
    def is_icann(self) -> bool:
        return Category.ICANN in self.category

    @property
    def is_private(self) -> bool:
        # A terminal accepted under both categories reports as ICANN.
        return self.category == Category.PRIVATE


def longest_match(
    a: MatchCandidate | None, b: MatchCandidate | None
) -> MatchCandidate | None:
    """Return the candidate that consumed more labels. Ties go to b."""
    if a is None:
        return b
    if b is None:
        return a
    return a if a.index < b.index else b


def lookup_in_trie(
    parts: Sequence[Label],
    node: TrieNode,
    index: int,
    allowed: Category,
) -> MatchCandidate | None:
    """Find the deepest terminal reachable from node.

    parts are decoded hostname labels, index is the next label to
    consume (walking right to left). Returns None when no terminal with
    an allowed category is reachable.
    """
    best: MatchCandidate | None = None
    if node.terminal is not None:
        accepted = node.terminal & allowed
        if accepted:
            best = MatchCandidate(index=index + 1, category=accepted)

    # All labels consumed.
    if index == -1:
        return best

    child = node.children.get(parts[index])
    if child is not None:
        best = longest_match(best, lookup_in_trie(parts, child, index - 1, allowed))

    if node.wildcard is not None:
        best = longest_match(
            best, lookup_in_trie(parts, node.wildcard, index - 1, allowed)
        )

    return best


class SuffixMatcher:
    """Public suffix lookups against a built RuleStore.

    Holds no per-call state; one instance can serve concurrent callers.
    """

    def __init__(self, store: RuleStore) -> None:
        self._store = store

    @property
    def store(self) -> RuleStore:
        return self._store

    def has_tld(self, label: Label) -> bool:
        return self._store.has_tld(label)

    def lookup(
        self, hostname: Hostname, options: SuffixOptions | None = None
    ) -> SuffixMatch | None:
        """Return the public suffix of hostname, or None if none is known.

        hostname is expected to be lower-cased already. The returned
        suffix is made of the hostname's own labels, punycode included.
        """
        if not hostname:
            return None
        opts = options if options is not None else _DEFAULT_OPTIONS
        allowed = opts.allowed_mask

        raw, parts = split_labels(hostname)
        last = len(parts) - 1

        match = lookup_in_trie(parts, self._store.rules, last, allowed)
        if match is None:
            return None

        exception = lookup_in_trie(parts, self._store.exceptions, last, allowed)
        if exception is not None:
            return SuffixMatch(
                public_suffix=".".join(raw[exception.index + 1:]),
                is_icann=exception.is_icann,
                is_private=exception.is_private,
            )

        return SuffixMatch(
            public_suffix=".".join(raw[match.index:]),
            is_icann=match.is_icann,
            is_private=match.is_private,
        )
