from __future__ import annotations

import pytest

from quicktools.diff import compare_texts
from quicktools.errors import UnknownToolError
from quicktools.runner import ToolRunner, render_diff


def test_case_tool() -> None:
    summary = ToolRunner(
        tool_id="text-case-converter",
        options={"variant": "snake"},
    ).run("Hello World")
    assert summary.output == "hello_world"
    assert summary.tool_name == "Text Case Converter"
    assert summary.total_errors == 0
    assert summary.elapsed_seconds >= 0


def test_lorem_tool_ignores_input_text() -> None:
    summary = ToolRunner(
        tool_id="lorem-ipsum",
        options={"unit": "words", "amount": 3},
    ).run("ignored")
    assert summary.output == "lorem ipsum dolor"


def test_word_counter_uses_reading_speed() -> None:
    summary = ToolRunner(tool_id="word-counter", words_per_minute=1).run("one two three")
    assert "Words: 3" in summary.output
    assert summary.output.endswith("Reading time: ~3 min")


def test_hash_tool_reports_unsupported_algorithm() -> None:
    summary = ToolRunner(
        tool_id="hash-generator",
        options={"algorithms": ["SHA-1", "MD5"]},
    ).run("abc")
    assert summary.output.splitlines() == [
        "SHA-1: a9993e364706816aba3e25717850c26c9cd0d89d",
        "MD5: Unsupported digest algorithm 'MD5'.",
    ]
    assert summary.error_messages == ["Unsupported digest algorithm 'MD5'."]


def test_codec_tools() -> None:
    encoded = ToolRunner(tool_id="base64-encoder").run("hello")
    assert encoded.output == "aGVsbG8="
    decoded = ToolRunner(tool_id="url-encoder", options={"mode": "decode"}).run("a%20b")
    assert decoded.output == "a b"


def test_codec_failure_is_reported() -> None:
    summary = ToolRunner(tool_id="base64-encoder", options={"mode": "decode"}).run("!!!")
    assert summary.output == ""
    assert summary.total_errors == 1
    assert summary.error_messages[0].startswith("Invalid Base64 string.")


def test_diff_tool() -> None:
    summary = ToolRunner(tool_id="text-diff").run("a\nb", "a\nc\nd")
    assert summary.output.splitlines() == [
        "     1  a",
        "~    2  b -> c",
        "+    3  d",
        "1 changed, 1 added, 0 removed",
    ]


def test_render_diff_marks_removed_lines() -> None:
    rendered = render_diff(compare_texts("a\nb", "a"))
    assert "-    2  b" in rendered.splitlines()


def test_unknown_tool() -> None:
    with pytest.raises(UnknownToolError):
        ToolRunner(tool_id="image-resizer").run("")


def test_debug_output_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    ToolRunner(tool_id="text-case-converter", options={"variant": "upper"}, debug=True).run("hi")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[quicktools][debug] tool.request:" in captured.err
    assert '"output": "HI"' in captured.err


def test_verbose_output(capsys: pytest.CaptureFixture[str]) -> None:
    ToolRunner(tool_id="lorem-ipsum", verbose=True).run()
    assert capsys.readouterr().out.startswith("Ran Lorem Ipsum Generator in ")
