"""
CLI tests: encode, decode, rot13, brute, auto, analyze.
"""

from typer.testing import CliRunner

from main import app

runner = CliRunner()


def test_cli_encode():
    result = runner.invoke(app, ["encode", "Hello, World!", "--shift", "3"])
    assert result.exit_code == 0
    assert "Khoor, Zruog!" in result.output


def test_cli_encode_rejects_out_of_range_shift():
    result = runner.invoke(app, ["encode", "Hello", "--shift", "30"])
    assert result.exit_code == 1
    assert "between 1 and 25" in result.output


def test_cli_decode():
    result = runner.invoke(app, ["decode", "Khoor, Zruog!", "-s", "3"])
    assert result.exit_code == 0
    assert "Hello, World!" in result.output


def test_cli_rot13():
    result = runner.invoke(app, ["rot13", "Attack at dawn"])
    assert result.exit_code == 0
    assert "Nggnpx ng qnja" in result.output


def test_cli_brute():
    result = runner.invoke(app, ["brute", "Khoor"])
    assert result.exit_code == 0
    assert "Hello" in result.output


def test_cli_auto(pangram, pangram_rot13):
    result = runner.invoke(app, ["auto", pangram_rot13, "--language", "english"])
    assert result.exit_code == 0
    assert pangram in result.output


def test_cli_auto_unsupported_language():
    result = runner.invoke(app, ["auto", "abc def", "--language", "klingon"])
    assert result.exit_code == 1
    assert "not supported" in result.output


def test_cli_auto_empty_text():
    result = runner.invoke(app, ["auto", "   "])
    assert result.exit_code == 1
    assert "Text is required" in result.output


def test_cli_analyze(pangram_rot13):
    result = runner.invoke(app, ["analyze", pangram_rot13])
    assert result.exit_code == 0
    assert "German" in result.output


def test_cli_languages():
    result = runner.invoke(app, ["languages"])
    assert result.exit_code == 0
    assert "spanish" in result.output


def test_cli_rot13_keeps_brackets():
    result = runner.invoke(app, ["rot13", "[red]alert"])
    assert result.exit_code == 0
    assert "[erq]nyreg" in result.output


def test_cli_decode_closing_tag_text():
    result = runner.invoke(app, ["decode", "[/k] hi", "-s", "3"])
    assert result.exit_code == 0
    assert "[/h] ef" in result.output


def test_cli_encode_keeps_brackets():
    result = runner.invoke(app, ["encode", "[bold]hi", "--shift", "1"])
    assert result.exit_code == 0
    assert "[cpme]ij" in result.output


def test_cli_brute_keeps_brackets():
    result = runner.invoke(app, ["brute", "[b]Khoor"])
    assert result.exit_code == 0
    assert "[y]Hello" in result.output


def test_cli_auto_keeps_brackets(pangram, pangram_rot13):
    result = runner.invoke(app, ["auto", f"{pangram_rot13} [/1]"])
    assert result.exit_code == 0
    assert f"{pangram} [/1]" in result.output


def test_cli_error_message_keeps_brackets():
    result = runner.invoke(app, ["auto", "abc def", "--language", "[/x]"])
    assert result.exit_code == 1
    assert "Language '[/x]' not supported" in result.output


def test_cli_auto_rejects_non_positive_top(pangram_rot13):
    result = runner.invoke(app, ["auto", pangram_rot13, "--top", "0"])
    assert result.exit_code != 0
