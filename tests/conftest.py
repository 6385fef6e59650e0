"""Shared fixtures: a small slice of the public suffix list."""

from __future__ import annotations

import pytest

from pubsuffix_lite.matching.rule_store import RuleStore
from pubsuffix_lite.matching.suffix_matcher import SuffixMatcher
from pubsuffix_lite.rules.parser import parse_rules

SAMPLE_LIST = """\
// Test slice of the public suffix list.

// ===BEGIN ICANN DOMAINS===

com
uk
co.uk
ac.uk
io

// jp: wildcard with an exception
jp
*.kawasaki.jp
!city.kawasaki.jp

// ck: wildcard only, no rule for the TLD itself
*.ck
!www.ck

cn
com.cn
公司.cn
中国

*.ar

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

github.io
blogspot.com

// ===END PRIVATE DOMAINS===
"""
# 13 ordinary ICANN rules, 2 exceptions, 2 private rules.


@pytest.fixture
def sample_rules():
    return parse_rules(SAMPLE_LIST.splitlines())


@pytest.fixture
def store(sample_rules):
    return RuleStore.build(sample_rules)


@pytest.fixture
def matcher(store):
    return SuffixMatcher(store)


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / "public_suffix_list.dat"
    path.write_text(SAMPLE_LIST, encoding="utf-8")
    return path
