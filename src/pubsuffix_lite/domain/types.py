"""Shared type aliases and constants used across the domain."""
from __future__ import annotations

from typing import TypeAlias

Label: TypeAlias = str
Hostname: TypeAlias = str

WILDCARD = "*"
EXCEPTION_MARKER = "!"
PUNYCODE_PREFIX = "xn--"
