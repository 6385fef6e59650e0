"""Rule tries and public suffix matching."""

from pubsuffix_lite.matching.labels import decode_label, split_labels
from pubsuffix_lite.matching.rule_store import RuleStore
from pubsuffix_lite.matching.suffix_matcher import (
    MatchCandidate,
    SuffixMatcher,
    longest_match,
    lookup_in_trie,
)
from pubsuffix_lite.matching.trie import RuleTrie, TrieNode

__all__ = [
    "MatchCandidate",
    "RuleStore",
    "RuleTrie",
    "SuffixMatcher",
    "TrieNode",
    "decode_label",
    "longest_match",
    "lookup_in_trie",
    "split_labels",
]
