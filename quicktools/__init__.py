"""Deterministic text tools: casing, filler text, statistics and digests."""

from .casing import convert_case
from .catalog import TOOLS, ToolSpec, get_tool
from .diff import compare_texts
from .digest import compute_digests, compute_digests_sync
from .errors import ErrorCategory, ErrorRecord, QuickToolsError
from .filler import generate_filler_text
from .runner import ToolRunner, ToolRunSummary
from .segmenter import split_paragraphs, split_sentences, split_words
from .structures import (
    CaseVariant,
    CodecResult,
    DiffReport,
    DiffRow,
    DigestAlgorithm,
    FillerUnit,
    TextStatistics,
)
from .textcodecs import (
    decode_base64,
    decode_url_component,
    encode_base64,
    encode_url_component,
)
from .textstats import compute_text_statistics, format_statistics

__version__ = "0.1.0"

__all__ = [
    "CaseVariant",
    "CodecResult",
    "DiffReport",
    "DiffRow",
    "DigestAlgorithm",
    "ErrorCategory",
    "ErrorRecord",
    "FillerUnit",
    "QuickToolsError",
    "TOOLS",
    "TextStatistics",
    "ToolRunSummary",
    "ToolRunner",
    "ToolSpec",
    "compare_texts",
    "compute_digests",
    "compute_digests_sync",
    "compute_text_statistics",
    "convert_case",
    "decode_base64",
    "decode_url_component",
    "encode_base64",
    "encode_url_component",
    "format_statistics",
    "generate_filler_text",
    "get_tool",
    "split_paragraphs",
    "split_sentences",
    "split_words",
]
