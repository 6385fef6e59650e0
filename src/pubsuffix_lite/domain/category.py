"""Rule categories: where a public suffix rule comes from."""
from enum import Flag


class Category(Flag):
    """Origin of a rule.

    ICANN rules come from the root zone database, PRIVATE rules from
    private submissions (github.io, blogspot.com, ...). Members combine
    with ``|`` so a trie terminal can carry both, and ``Category(0)`` is
    the empty mask that never matches.
    """
    ICANN = 1
    PRIVATE = 2

    def is_single(self) -> bool:
        return self in (Category.ICANN, Category.PRIVATE)
