from __future__ import annotations

import pytest

from quicktools.cli import build_parser, main, read_text
from quicktools.errors import ConfigurationError, QuickToolsError

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["case", "hello"])
    assert args.variant == "title"
    assert args.text == "hello"


def test_parser_rejects_unknown_case() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["case", "-c", "shouty", "hello"])


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "usage: quicktools" in capsys.readouterr().out


def test_list(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Text:" in out
    assert "hash-generator" in out


def test_case_command(settings, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["case", "-c", "kebab", "Hello Big World"]) == 0
    assert capsys.readouterr().out == "hello-big-world\n"


def test_lorem_command_clamps_amount(settings, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["lorem", "-u", "words", "-n", "0"]) == 0
    assert capsys.readouterr().out == "lorem\n"


def test_stats_command_reads_file(settings, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("Hello world. Bye!", encoding="utf-8")
    assert main(["stats", "-i", str(source), "--wpm", "2"]) == 0
    out = capsys.readouterr().out
    assert "Words: 3" in out
    assert "Reading time: ~2 min" in out


def test_stats_command_uses_configured_reading_speed(
    settings, capsys: pytest.CaptureFixture[str]
) -> None:
    settings.QUICKTOOLS_WORDS_PER_MINUTE = 1
    assert main(["stats", "one two"]) == 0
    assert "Reading time: ~2 min" in capsys.readouterr().out


def test_hash_command(settings, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["hash", "-a", "SHA-256", ""]) == 0
    assert capsys.readouterr().out == f"SHA-256: {EMPTY_SHA256}\n"


def test_hash_command_uses_default_algorithms(
    settings, capsys: pytest.CaptureFixture[str]
) -> None:
    settings.QUICKTOOLS_DEFAULT_ALGORITHMS = "SHA-256"
    assert main(["hash", ""]) == 0
    assert capsys.readouterr().out == f"SHA-256: {EMPTY_SHA256}\n"


def test_hash_command_fails_on_unsupported_algorithm(
    settings, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main(["hash", "-a", "SHA-256", "-a", "MD5", ""]) == 1
    captured = capsys.readouterr()
    assert f"SHA-256: {EMPTY_SHA256}" in captured.out
    assert "Unsupported digest algorithm 'MD5'." in captured.err


def test_diff_command(settings, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    left = tmp_path / "left.txt"
    right = tmp_path / "right.txt"
    left.write_text("a\nb", encoding="utf-8")
    right.write_text("a\nc", encoding="utf-8")
    assert main(["diff", str(left), str(right)]) == 0
    assert "1 changed, 0 added, 0 removed" in capsys.readouterr().out


def test_missing_input_file(settings, tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["stats", "-i", str(tmp_path / "missing.txt")]) == 1
    assert "Input file not found" in capsys.readouterr().out


def test_codec_commands(settings, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["base64", "encode", "hello"]) == 0
    assert main(["url", "decode", "%zz"]) == 1
    captured = capsys.readouterr()
    assert captured.out.startswith("aGVsbG8=\n")
    assert "Invalid encoded string." in captured.err


def test_unknown_digest_backend(settings, capsys: pytest.CaptureFixture[str]) -> None:
    settings.QUICKTOOLS_DIGEST_BACKEND = "webcrypto"
    assert main(["hash", "abc"]) == 1
    assert "Unknown digest backend" in capsys.readouterr().out


def test_configuration_error_is_reported(monkeypatch, capsys: pytest.CaptureFixture[str]) -> None:
    def broken_settings():
        raise ConfigurationError("Configuration validation errors detected:\n- bad")

    monkeypatch.setattr("quicktools.cli.get_settings", broken_settings)
    assert main(["case", "text"]) == 1
    assert "Configuration validation errors detected" in capsys.readouterr().out


def test_debug_from_settings(settings, capsys: pytest.CaptureFixture[str]) -> None:
    settings.QUICKTOOLS_DEBUG = True
    assert main(["case", "-c", "upper", "hi"]) == 0
    assert "[quicktools][debug] tool.response:" in capsys.readouterr().err


def test_read_text_prefers_argument(tmp_path) -> None:
    source = tmp_path / "text.txt"
    source.write_text("from file", encoding="utf-8")
    assert read_text("inline", str(source)) == "inline"
    assert read_text(None, str(source)) == "from file"
    with pytest.raises(QuickToolsError):
        read_text(None, str(tmp_path / "nope.txt"))
