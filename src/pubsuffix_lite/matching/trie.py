"""Label trie for public suffix rules.

Rules are inserted label by label starting at the rightmost hostname
label, so "co.uk" and "org.uk" share the "uk" node and branch only
where they diverge:

    root
     └── uk        terminal: ICANN   (rule "uk")
          ├── co   terminal: ICANN   (rule "co.uk")
          └── org  terminal: ICANN   (rule "org.uk")

Wildcard labels ("*") are not stored among the literal children. Each
node has a dedicated wildcard slot, so a lookup checks at most two
branches per level: the exact label and the wildcard.

A node is terminal when at least one rule ends on it. The terminal mask
is the union of the categories of all rules ending there; inserting the
same path twice never drops a category.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from pubsuffix_lite.domain.category import Category
from pubsuffix_lite.domain.types import WILDCARD, Label


@dataclass(slots=True)
class TrieNode:
    """A node in the rule trie.

    children maps a literal label to the next node.
    wildcard is the node reached through a "*" label, if any rule has one here.
    terminal is the category mask of rules ending here, None if none do.
    """
    children: dict[Label, TrieNode] = field(default_factory=dict)
    wildcard: TrieNode | None = None
    terminal: Category | None = None

    def child(self, label: Label) -> TrieNode | None:
        return self.children.get(label)


class RuleTrie:
    """Trie over reversed rule labels."""

    def __init__(self) -> None:
        self._root = TrieNode()
        self._rule_count = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    @property
    def rule_count(self) -> int:
        return self._rule_count

    def insert(self, parts: Sequence[Label], category: Category) -> None:
        """Insert a rule given as labels in match order (rightmost first).

        Intermediate nodes are created on demand and the category is
        OR-ed into the last node's terminal mask.
        """
        if not parts:
            raise ValueError("Cannot insert a rule with no labels")
        node = self._root
        for part in parts:
            if part == WILDCARD:
                if node.wildcard is None:
                    node.wildcard = TrieNode()
                node = node.wildcard
            else:
                nxt = node.children.get(part)
                if nxt is None:
                    nxt = TrieNode()
                    node.children[part] = nxt
                node = nxt
        if node.terminal is None:
            node.terminal = category
        else:
            node.terminal |= category
        self._rule_count += 1

    def node_count(self) -> int:
        """Count total nodes in the trie (for memory reporting)."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
            if node.wildcard is not None:
                stack.append(node.wildcard)
        return count

    def height(self) -> int:
        """Length of the longest label path, which bounds lookup recursion."""
        best = 0
        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for nxt in node.children.values():
                stack.append((nxt, depth + 1))
            if node.wildcard is not None:
                stack.append((node.wildcard, depth + 1))
        return best
