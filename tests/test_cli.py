"""Tests for the passforge command-line interface."""

import string

from passforge import SYMBOLS
from passforge.cli import main


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


class TestCheck:
    def test_reports_label_and_feedback(self, capsys):
        assert main(["check", "abc"]) == 0
        out = capsys.readouterr().out
        assert "Weak (15/100)" in out
        assert "! Use at least 8 characters (12+ recommended)" in out
        assert "! Include uppercase letters" in out

    def test_strong_password_has_no_feedback(self, capsys):
        assert main(["check", "Password1!"]) == 0
        out = capsys.readouterr().out
        assert "[########--] Strong (80/100)" in out
        assert "!" not in out.replace("Password1!", "")

    def test_reads_file(self, tmp_path, capsys):
        f = tmp_path / "pw.txt"
        f.write_text("first1\n\nSecond2!\n")
        assert main(["check", "-f", str(f)]) == 0
        out = capsys.readouterr().out
        assert "'first1'" in out
        assert "'Second2!'" in out

    def test_nothing_to_check(self, capsys):
        assert main(["check"]) == 1
        assert "Error" in capsys.readouterr().err


class TestGenerate:
    def test_count_and_length(self, capsys):
        assert main(["generate", "-n", "20", "-c", "3"]) == 0
        lines = _lines(capsys)
        assert len(lines) == 3
        for line in lines:
            pwd = line.split()[0]
            assert len(pwd) == 20

    def test_seed_is_reproducible(self, capsys):
        main(["generate", "--seed", "7"])
        first = capsys.readouterr().out
        main(["generate", "--seed", "7"])
        assert capsys.readouterr().out == first

    def test_option_flags(self, capsys):
        assert main([
            "generate", "-n", "30", "--no-letters", "--no-symbols",
            "--exclude-similar", "--seed", "1",
        ]) == 0
        pwd = _lines(capsys)[0].split()[0]
        assert set(pwd) <= set("23456789")

    def test_all_classes_disabled_falls_back(self, capsys):
        assert main([
            "generate", "--no-letters", "--no-numbers", "--no-symbols", "--seed", "3",
        ]) == 0
        pwd = _lines(capsys)[0].split()[0]
        assert set(pwd) <= set(string.ascii_lowercase)

    def test_negative_length(self, capsys):
        assert main(["generate", "-n", "-4"]) == 1
        assert "negative" in capsys.readouterr().err


class TestImprove:
    def test_improves(self, capsys):
        assert main(["improve", "hunter"]) == 0
        line = _lines(capsys)[0]
        better = line.split()[0]
        assert len(better) >= 12
        assert any(c in SYMBOLS for c in better)
        assert "Weak ->" in line

    def test_empty_password_rejected(self, capsys):
        assert main(["improve", ""]) == 1
        assert "Please enter a password" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
