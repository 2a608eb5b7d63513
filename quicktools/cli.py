"""Command line interface for QuickTools."""

from __future__ import annotations

import argparse
import pathlib
import sys
from typing import Any, Dict, Iterable, Optional

from .catalog import tools_by_category
from .configuration import get_settings
from .digest import build_backend
from .errors import ConfigurationError, QuickToolsError
from .filler import MAX_AMOUNT, MIN_AMOUNT
from .runner import ToolRunner, ToolRunSummary
from .structures import CaseVariant, DigestAlgorithm, FillerUnit

COMMAND_TOOLS = {
    "case": "text-case-converter",
    "lorem": "lorem-ipsum",
    "stats": "word-counter",
    "hash": "hash-generator",
    "diff": "text-diff",
    "base64": "base64-encoder",
    "url": "url-encoder",
}


def _add_text_source(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to process. Reads --input-file or stdin when omitted.",
    )
    parser.add_argument(
        "-i",
        "--input-file",
        help="Read the text to process from this file (UTF-8).",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quicktools",
        description="Small text tools: case conversion, lorem ipsum, word counts, hashes and more.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show timing information.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log complete tool requests and responses to stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser("list", help="List the available tools.")

    case_parser = subparsers.add_parser("case", help="Convert text case.")
    case_parser.add_argument(
        "-c",
        "--case",
        dest="variant",
        choices=[variant.value for variant in CaseVariant],
        default=CaseVariant.TITLE.value,
        help="Target case (default: title).",
    )
    _add_text_source(case_parser)

    lorem_parser = subparsers.add_parser("lorem", help="Generate lorem ipsum text.")
    lorem_parser.add_argument(
        "-u",
        "--unit",
        choices=[unit.value for unit in FillerUnit],
        default=FillerUnit.PARAGRAPHS.value,
        help="Unit of generated text (default: paragraphs).",
    )
    lorem_parser.add_argument(
        "-n",
        "--amount",
        default="3",
        help=f"How many units to generate, clamped to {MIN_AMOUNT}-{MAX_AMOUNT} (default: 3).",
    )

    stats_parser = subparsers.add_parser("stats", help="Count words, sentences and more.")
    stats_parser.add_argument(
        "--wpm",
        type=int,
        help="Reading speed in words per minute (default from settings).",
    )
    _add_text_source(stats_parser)

    hash_parser = subparsers.add_parser("hash", help="Generate SHA digests.")
    hash_parser.add_argument(
        "-a",
        "--algorithm",
        dest="algorithms",
        action="append",
        help=(
            "Digest algorithm; repeat for several. Supported: "
            + ", ".join(algorithm.value for algorithm in DigestAlgorithm)
            + "."
        ),
    )
    _add_text_source(hash_parser)

    diff_parser = subparsers.add_parser("diff", help="Compare two text files line by line.")
    diff_parser.add_argument("left_file", help="Original text file.")
    diff_parser.add_argument("right_file", help="Changed text file.")
    diff_parser.add_argument(
        "--keep-whitespace",
        action="store_true",
        help="Treat whitespace differences as changes.",
    )

    for command, label in (("base64", "Base64"), ("url", "URL component")):
        codec_parser = subparsers.add_parser(command, help=f"{label} encode or decode.")
        codec_parser.add_argument("mode", choices=["encode", "decode"])
        _add_text_source(codec_parser)

    return parser


def read_text(text: str | None, input_file: str | None) -> str:
    """Resolve the text to process from an argument, a file, or stdin."""

    if text is not None:
        return text
    if input_file:
        path = pathlib.Path(input_file).expanduser()
        if not path.is_file():
            raise QuickToolsError(f"Input file not found: {path}")
        return path.read_text(encoding="utf-8")
    if sys.stdin is not None and not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def build_options(args: argparse.Namespace, default_algorithms: list[str]) -> Dict[str, Any]:
    command = args.command
    if command == "case":
        return {"variant": args.variant}
    if command == "lorem":
        return {"unit": args.unit, "amount": args.amount}
    if command == "hash":
        return {"algorithms": args.algorithms or default_algorithms}
    if command == "diff":
        return {"ignore_whitespace": not args.keep_whitespace}
    if command in {"base64", "url"}:
        return {"mode": args.mode}
    return {}


def execute_tool(
    args: argparse.Namespace,
    *,
    debug: bool,
    words_per_minute: int,
    default_algorithms: list[str],
    digest_backend: str,
) -> tuple[int, ToolRunSummary | None, str | None]:
    """Run the selected tool and return the exit code, summary, and message."""

    try:
        if args.command == "diff":
            text = read_text(None, args.left_file)
            other_text = read_text(None, args.right_file)
        elif args.command == "lorem":
            text, other_text = "", ""
        else:
            text = read_text(args.text, args.input_file)
            other_text = ""

        if args.command == "stats" and args.wpm is not None:
            words_per_minute = args.wpm

        runner = ToolRunner(
            tool_id=COMMAND_TOOLS[args.command],
            options=build_options(args, default_algorithms),
            verbose=args.verbose,
            debug=debug,
            words_per_minute=words_per_minute,
            digest_backend=build_backend(digest_backend),
        )
        summary = runner.run(text, other_text)
    except UnicodeDecodeError as exc:
        return 1, None, f"Input is not valid UTF-8 text: {exc}"
    except QuickToolsError as exc:
        return 1, None, str(exc)
    except KeyboardInterrupt:
        return 2, None, "Interrupted by user."

    return (1 if summary.total_errors else 0), summary, None


def print_summary(summary: ToolRunSummary) -> None:
    """Print tool output followed by any in-band errors."""

    print(summary.output)
    if summary.total_errors:
        print("Notes:", file=sys.stderr)
        for message in summary.error_messages:
            print(f"  - {message}", file=sys.stderr)


def print_catalog() -> None:
    for category, tools in tools_by_category().items():
        print(f"{category.title()}:")
        for tool in tools:
            print(f"  {tool.tool_id:<22} {tool.description}")


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.command is None:
        parser.print_help()
        return 1
    if args.command == "list":
        print_catalog()
        return 0

    try:
        settings = get_settings()
    except ConfigurationError as exc:
        print(exc)
        return 1

    exit_code, summary, message = execute_tool(
        args,
        debug=bool(args.debug or settings.QUICKTOOLS_DEBUG),
        words_per_minute=settings.QUICKTOOLS_WORDS_PER_MINUTE,
        default_algorithms=settings.default_algorithms(),
        digest_backend=settings.QUICKTOOLS_DIGEST_BACKEND,
    )

    if message:
        print(message)
    if summary:
        print_summary(summary)
    return exit_code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
