"""Tests for RuleStore construction and has_tld."""

import logging

import pytest

from pubsuffix_lite.domain import Category, Rule
from pubsuffix_lite.matching.rule_store import RuleStore
from pubsuffix_lite.rules import parse_rule


class TestBuild:

    def test_counts(self, store):
        assert store.rule_count == 15
        assert store.exception_count == 2

    def test_exceptions_routed_apart(self):
        s = RuleStore.build([parse_rule("*.ck"), parse_rule("!www.ck")])
        assert s.rules.child("ck").wildcard is not None
        assert s.rules.child("ck").child("www") is None
        www = s.exceptions.child("ck").child("www")
        assert www.terminal == Category.ICANN

    def test_empty_ruleset(self):
        s = RuleStore.build([])
        assert s.rule_count == 0
        assert s.exception_count == 0
        assert s.node_count() == 2  # two bare roots

    def test_accepts_generator(self):
        s = RuleStore.build(parse_rule(p) for p in ["com", "net"])
        assert s.rule_count == 2

    def test_category_union_across_rules(self):
        s = RuleStore.build([
            Rule(parts=("shared",), exception=False, category=Category.ICANN),
            Rule(parts=("shared",), exception=False, category=Category.PRIVATE),
        ])
        assert s.rules.child("shared").terminal == Category.ICANN | Category.PRIVATE

    def test_rejects_non_rule(self):
        with pytest.raises(TypeError, match="Expected Rule"):
            RuleStore.build([("com",)])

    def test_logs_build(self, sample_rules, caplog):
        with caplog.at_level(logging.DEBUG, logger="pubsuffix_lite.matching.rule_store"):
            RuleStore.build(sample_rules)
        assert "15 rules, 2 exceptions" in caplog.text


class TestHasTld:

    def test_known_tld(self, store):
        assert store.has_tld("com")
        assert store.has_tld("uk")

    def test_unknown_tld(self, store):
        assert not store.has_tld("zzzznotld")

    def test_second_level_is_not_a_tld(self, store):
        assert not store.has_tld("co")
        assert not store.has_tld("co.uk")

    def test_wildcard_parent_is_a_tld(self, store):
        # "*.ck" puts "ck" directly under the root.
        assert store.has_tld("ck")

    def test_unicode_and_punycode(self, store):
        assert store.has_tld("中国")
        assert store.has_tld("xn--fiqs8s")

    def test_exception_only_label(self):
        s = RuleStore.build([parse_rule("!www.ck")])
        assert not s.has_tld("ck")
