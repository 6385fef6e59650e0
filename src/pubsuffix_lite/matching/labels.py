"""Hostname label normalization.

Rules are stored with Unicode labels ("中国", not "xn--fiqs8s"), so any
hostname label carrying the ASCII compatibility prefix is decoded before
it is used as a trie key. Labels without the prefix are left alone: case
folding and other cleanup are the caller's job.
"""
from __future__ import annotations

import logging

import idna

from pubsuffix_lite.domain.types import PUNYCODE_PREFIX, Hostname, Label

log = logging.getLogger(__name__)


def decode_label(label: Label) -> Label:
    """Decode a single xn-- label to Unicode.

    A label that does not decode is returned unchanged; it can still
    match a rule spelled the same way.
    """
    if not label.startswith(PUNYCODE_PREFIX):
        return label
    try:
        return idna.decode(label)
    except (UnicodeError, IndexError):
        log.debug("Could not decode punycode label %r, matching it verbatim", label)
        return label


def split_labels(hostname: Hostname) -> tuple[list[Label], list[Label]]:
    """Split a hostname into (raw labels, decoded labels).

    The raw labels are kept to build the returned suffix, the decoded
    ones are what the tries are walked with. Both lists have the same
    length.
    """
    raw = hostname.split(".")
    return raw, [decode_label(label) for label in raw]
