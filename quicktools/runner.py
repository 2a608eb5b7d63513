"""High-level orchestration of a single tool invocation."""

from __future__ import annotations

import json
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .casing import convert_case
from .catalog import ToolSpec, get_tool
from .diff import ADDED, CHANGED, REMOVED, compare_texts
from .digest import DigestBackend, compute_digests_sync
from .errors import ErrorRecord, QuickToolsError
from .filler import generate_filler_text
from .structures import CodecResult, DiffReport
from .textcodecs import (
    decode_base64,
    decode_url_component,
    encode_base64,
    encode_url_component,
)
from .textstats import DEFAULT_WORDS_PER_MINUTE, compute_text_statistics, format_statistics

HandlerResult = Tuple[str, List[ErrorRecord]]

DIFF_MARKERS = {CHANGED: "~", ADDED: "+", REMOVED: "-"}


@dataclass
class ToolRunSummary:
    """Report returned after running a tool."""

    tool_id: str
    tool_name: str
    output: str
    elapsed_seconds: float
    error_messages: List[str] = field(default_factory=list)

    @property
    def total_errors(self) -> int:
        return len(self.error_messages)


class ToolRunner:
    """Resolves a catalog tool and invokes its engine operation."""

    def __init__(
        self,
        *,
        tool_id: str,
        options: Optional[Mapping[str, Any]] = None,
        verbose: bool = False,
        debug: bool = False,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
        digest_backend: Optional[DigestBackend] = None,
    ) -> None:
        self.tool_id = tool_id
        self.options: Dict[str, Any] = dict(options or {})
        self.verbose = verbose
        self.debug = debug
        self.words_per_minute = words_per_minute
        self.digest_backend = digest_backend

        self._handlers: Dict[str, Callable[[str, str], HandlerResult]] = {
            "text-case-converter": self._run_case,
            "lorem-ipsum": self._run_lorem,
            "word-counter": self._run_stats,
            "text-diff": self._run_diff,
            "hash-generator": self._run_hash,
            "base64-encoder": self._run_base64,
            "url-encoder": self._run_url,
        }

    def run(self, text: str = "", other_text: str = "") -> ToolRunSummary:
        start_time = time.time()

        tool = get_tool(self.tool_id)
        handler = self._resolve_handler(tool)
        self._log_debug(
            "tool.request",
            {
                "tool": tool.tool_id,
                "options": self.options,
                "characters": len(text),
                "other_characters": len(other_text),
            },
        )

        output, errors = handler(text, other_text)
        self._log_debug(
            "tool.response",
            {"output": output, "errors": [str(error) for error in errors]},
        )

        elapsed = time.time() - start_time
        if self.verbose:
            print(f"Ran {tool.name} in {elapsed:.4f} seconds.")

        return ToolRunSummary(
            tool_id=tool.tool_id,
            tool_name=tool.name,
            output=output,
            elapsed_seconds=elapsed,
            error_messages=[
                f"{error.message} ({error.details})" if error.details else error.message
                for error in errors
            ],
        )

    def _resolve_handler(self, tool: ToolSpec) -> Callable[[str, str], HandlerResult]:
        handler = self._handlers.get(tool.tool_id)
        if handler is None:
            raise QuickToolsError(f"No handler registered for tool '{tool.tool_id}'.")
        return handler

    def _run_case(self, text: str, other_text: str) -> HandlerResult:
        return convert_case(text, self.options.get("variant", "title")), []

    def _run_lorem(self, text: str, other_text: str) -> HandlerResult:
        output = generate_filler_text(
            self.options.get("unit", "paragraphs"),
            self.options.get("amount", 3),
        )
        return output, []

    def _run_stats(self, text: str, other_text: str) -> HandlerResult:
        stats = compute_text_statistics(text, words_per_minute=self.words_per_minute)
        return format_statistics(stats), []

    def _run_diff(self, text: str, other_text: str) -> HandlerResult:
        report = compare_texts(
            text,
            other_text,
            ignore_whitespace=self.options.get("ignore_whitespace", True),
        )
        return render_diff(report), []

    def _run_hash(self, text: str, other_text: str) -> HandlerResult:
        results = compute_digests_sync(
            text,
            self.options.get("algorithms"),
            backend=self.digest_backend,
        )
        lines: List[str] = []
        errors: List[ErrorRecord] = []
        for name, value in results.items():
            if isinstance(value, ErrorRecord):
                errors.append(value)
                lines.append(f"{name}: {value.message}")
            else:
                lines.append(f"{name}: {value}")
        return "\n".join(lines), errors

    def _run_base64(self, text: str, other_text: str) -> HandlerResult:
        if self.options.get("mode", "encode") == "decode":
            return _codec_output(decode_base64(text))
        return _codec_output(encode_base64(text))

    def _run_url(self, text: str, other_text: str) -> HandlerResult:
        if self.options.get("mode", "encode") == "decode":
            return _codec_output(decode_url_component(text))
        return _codec_output(encode_url_component(text))

    def _log_debug(self, label: str, payload: Any) -> None:
        """Emit structured debug information when enabled."""

        if not self.debug:
            return
        try:
            if isinstance(payload, (dict, list)):
                message = json.dumps(payload, ensure_ascii=False, indent=2, default=str)
            else:
                message = str(payload)
        except (TypeError, ValueError):
            message = repr(payload)
        print(f"[quicktools][debug] {label}:\n{message}", file=sys.stderr)


def _codec_output(result: CodecResult) -> HandlerResult:
    if result.error is not None:
        return "", [result.error]
    return result.value or "", []


def render_diff(report: DiffReport) -> str:
    """Render a diff report as marked, numbered lines plus a tally."""

    lines: List[str] = []
    for row in report.rows:
        marker = DIFF_MARKERS.get(row.state, " ")
        if row.state == CHANGED:
            body = f"{row.left} -> {row.right}"
        elif row.state == ADDED:
            body = row.right
        else:
            body = row.left
        lines.append(f"{marker} {row.line:>4}  {body}".rstrip())
    lines.append(
        f"{report.changed} changed, {report.added} added, {report.removed} removed"
    )
    return "\n".join(lines)
