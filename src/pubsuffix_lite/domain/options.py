"""Lookup options: which rule categories a lookup may match.

Defaults follow the public suffix list convention: ICANN rules are
always wanted, PRIVATE rules (hosting platforms, dynamic DNS providers)
only on request.
"""
from __future__ import annotations

from dataclasses import dataclass, fields

from pubsuffix_lite.domain.category import Category


@dataclass(frozen=True, slots=True)
class SuffixOptions:
    allow_icann_domains: bool = True
    allow_private_domains: bool = False

    @property
    def allowed_mask(self) -> Category:
        """Union of the categories a terminal node may carry to match.

        Both flags off gives the empty mask, which is valid and simply
        never matches.
        """
        mask = Category(0)
        if self.allow_private_domains:
            mask |= Category.PRIVATE
        if self.allow_icann_domains:
            mask |= Category.ICANN
        return mask


_OPTION_NAMES = frozenset(f.name for f in fields(SuffixOptions))


def set_defaults(**overrides: bool) -> SuffixOptions:
    """Build SuffixOptions from a partial set of values.

    Anything not given keeps its default. Unknown names raise TypeError
    so a typo does not silently fall back to a default.
    """
    unknown = set(overrides) - _OPTION_NAMES
    if unknown:
        raise TypeError(f"Unknown option(s): {', '.join(sorted(unknown))}")
    return SuffixOptions(**overrides)
