"""Lookup result returned by the suffix matcher."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SuffixMatch:
    """Public suffix of a hostname.

    public_suffix keeps the hostname's own label text, so a punycode
    hostname gets a punycode suffix back even though matching happened
    on the decoded labels.
    """
    public_suffix: str
    is_icann: bool
    is_private: bool

    @property
    def suffix_length(self) -> int:
        """Number of hostname labels in the suffix."""
        if not self.public_suffix:
            return 0
        return self.public_suffix.count(".") + 1
