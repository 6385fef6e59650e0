"""Rule entity: a single public suffix pattern.

A rule is stored in the order it is matched, rightmost hostname label
first. The list entry "co.uk" becomes parts ("uk", "co"), and the
exception "!city.kawasaki.jp" becomes ("jp", "kawasaki", "city") with
exception=True.

Rules are validated at construction. The trie has no way to detect a
rule that matches nothing (an empty label) or everything (no labels at
all), so malformed records are rejected here instead of being absorbed.
"""
from __future__ import annotations

from dataclasses import dataclass

from pubsuffix_lite.domain.category import Category
from pubsuffix_lite.domain.types import Label


@dataclass(frozen=True, slots=True)
class Rule:
    parts: tuple[Label, ...]
    exception: bool
    category: Category
    source: str = ""

    def __post_init__(self) -> None:
        if not self.parts:
            raise ValueError(f"Rule must have at least one label: {self.source!r}")
        if any(not part for part in self.parts):
            raise ValueError(f"Rule has an empty label: {self.source!r}")
        if not isinstance(self.category, Category) or not self.category.is_single():
            raise ValueError(
                f"Rule category must be ICANN or PRIVATE, got {self.category!r}"
            )
        if self.exception and len(self.parts) < 2:
            # The leftmost label is dropped from an exception match.
            raise ValueError(f"Exception rule needs two or more labels: {self.source!r}")

    @property
    def is_icann(self) -> bool:
        return self.category is Category.ICANN

    @property
    def is_private(self) -> bool:
        return self.category is Category.PRIVATE

    @property
    def depth(self) -> int:
        """Number of labels this rule spans."""
        return len(self.parts)
