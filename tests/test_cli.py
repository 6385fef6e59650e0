"""Tests for the pubsuffix-lite command line."""

import pytest

from pubsuffix_lite.cli import main


def run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out.splitlines()


class TestLookupCommand:

    def test_icann_lookups(self, capsys, rules_file):
        out = run(capsys, "lookup", "--rules", str(rules_file),
                  "www.example.co.uk", "city.kawasaki.jp", "foo.zzzznotld")
        assert out == [
            "www.example.co.uk\tco.uk\ticann",
            "city.kawasaki.jp\tkawasaki.jp\ticann",
            "foo.zzzznotld\t-",
        ]

    def test_private_flag(self, capsys, rules_file):
        out = run(capsys, "lookup", "--rules", str(rules_file), "foo.github.io")
        assert out == ["foo.github.io\tio\ticann"]
        out = run(capsys, "lookup", "--rules", str(rules_file), "--private",
                  "foo.github.io")
        assert out == ["foo.github.io\tgithub.io\tprivate"]

    def test_no_icann_flag(self, capsys, rules_file):
        out = run(capsys, "lookup", "--rules", str(rules_file), "--no-icann",
                  "example.com")
        assert out == ["example.com\t-"]

    def test_punycode_output(self, capsys, rules_file):
        out = run(capsys, "lookup", "--rules", str(rules_file), "example.xn--fiqs8s")
        assert out == ["example.xn--fiqs8s\txn--fiqs8s\ticann"]


class TestHasTldCommand:

    def test_has_tld(self, capsys, rules_file):
        out = run(capsys, "has-tld", "--rules", str(rules_file), "com", "zzzznotld")
        assert out == ["com\tyes", "zzzznotld\tno"]


class TestErrors:

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 0
        assert "pubsuffix-lite" in capsys.readouterr().out

    def test_missing_rules_file(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["lookup", "--rules", str(tmp_path / "missing.dat"), "example.com"])
        assert excinfo.value.code == 2
        assert "cannot read rules" in capsys.readouterr().err

    def test_bad_rules_file(self, capsys, tmp_path):
        path = tmp_path / "bad.dat"
        path.write_text("com\nfoo..bar\n", encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            main(["has-tld", "--rules", str(path), "com"])
        assert excinfo.value.code == 2
        assert "line 2" in capsys.readouterr().err

    def test_rules_required(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["lookup", "example.com"])
        assert excinfo.value.code == 2
