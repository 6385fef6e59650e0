"""pubsuffix-lite CLI entry point.

Usage: pubsuffix-lite [command]
"""
import argparse
import logging
import sys

from pubsuffix_lite.domain.options import SuffixOptions
from pubsuffix_lite.matching.rule_store import RuleStore
from pubsuffix_lite.matching.suffix_matcher import SuffixMatcher
from pubsuffix_lite.rules.parser import RuleSyntaxError, load_rules

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EXIT_BAD_RULES = 2


def _add_rules_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--rules", required=True, metavar="FILE",
        help="Public suffix list file to match against.",
    )


def _add_lookup_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "lookup",
        help="Print the public suffix of each hostname.",
    )
    _add_rules_argument(p)
    p.add_argument(
        "--private", action="store_true",
        help="Also match PRIVATE rules (github.io, blogspot.com, ...).",
    )
    p.add_argument(
        "--no-icann", action="store_true",
        help="Do not match ICANN rules.",
    )
    p.add_argument("hostnames", nargs="+", metavar="HOST")


def _add_has_tld_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "has-tld",
        help="Check whether each label is a top-level rule.",
    )
    _add_rules_argument(p)
    p.add_argument("labels", nargs="+", metavar="LABEL")


def _build_matcher(path: str) -> SuffixMatcher | None:
    try:
        rules = load_rules(path)
    except OSError as e:
        print(f"pubsuffix-lite: cannot read rules: {e}", file=sys.stderr)
        return None
    except RuleSyntaxError as e:
        print(f"pubsuffix-lite: {path}: {e}", file=sys.stderr)
        return None
    return SuffixMatcher(RuleStore.build(rules))


def _run_lookup(matcher: SuffixMatcher, args: argparse.Namespace) -> None:
    options = SuffixOptions(
        allow_icann_domains=not args.no_icann,
        allow_private_domains=args.private,
    )
    for host in args.hostnames:
        match = matcher.lookup(host, options)
        if match is None:
            print(f"{host}\t-")
        else:
            kind = "private" if match.is_private else "icann"
            print(f"{host}\t{match.public_suffix}\t{kind}")


def _run_has_tld(matcher: SuffixMatcher, args: argparse.Namespace) -> None:
    for label in args.labels:
        print(f"{label}\t{'yes' if matcher.has_tld(label) else 'no'}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pubsuffix-lite",
        description="Public suffix lookups against a suffix list file.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug output to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_lookup_parser(subparsers)
    _add_has_tld_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    matcher = _build_matcher(args.rules)
    if matcher is None:
        sys.exit(EXIT_BAD_RULES)

    if args.command == "lookup":
        _run_lookup(matcher, args)
    elif args.command == "has-tld":
        _run_has_tld(matcher, args)
