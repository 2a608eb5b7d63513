"""Static catalog of the tools exposed by QuickTools."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .errors import UnknownToolError


@dataclass(frozen=True)
class ToolSpec:
    """Describes one tool and where it sits in the catalog."""

    tool_id: str
    name: str
    category: str
    description: str
    related: Tuple[str, ...] = ()


TOOLS: Tuple[ToolSpec, ...] = (
    ToolSpec(
        tool_id="text-case-converter",
        name="Text Case Converter",
        category="text",
        description="Convert text between upper, lower, title, sentence, camel, pascal, snake and kebab case.",
        related=("word-counter", "lorem-ipsum"),
    ),
    ToolSpec(
        tool_id="lorem-ipsum",
        name="Lorem Ipsum Generator",
        category="text",
        description="Generate placeholder text in words, sentences or paragraphs.",
        related=("word-counter", "text-case-converter"),
    ),
    ToolSpec(
        tool_id="word-counter",
        name="Word Counter",
        category="text",
        description="Count words, characters, sentences and paragraphs with a reading time estimate.",
        related=("text-case-converter", "lorem-ipsum", "text-diff"),
    ),
    ToolSpec(
        tool_id="text-diff",
        name="Text Diff Checker",
        category="text",
        description="Compare two texts line by line.",
        related=("word-counter",),
    ),
    ToolSpec(
        tool_id="hash-generator",
        name="Hash Generator",
        category="utilities",
        description="Generate SHA-1, SHA-256, SHA-384 and SHA-512 digests.",
        related=("base64-encoder", "url-encoder"),
    ),
    ToolSpec(
        tool_id="base64-encoder",
        name="Base64 Encoder/Decoder",
        category="utilities",
        description="Encode and decode Base64 strings.",
        related=("url-encoder", "hash-generator", "text-case-converter", "word-counter"),
    ),
    ToolSpec(
        tool_id="url-encoder",
        name="URL Encoder/Decoder",
        category="utilities",
        description="Encode special characters for URLs or decode them back to text.",
        related=("base64-encoder", "hash-generator", "word-counter"),
    ),
)

_TOOLS_BY_ID: Dict[str, ToolSpec] = {tool.tool_id: tool for tool in TOOLS}


def get_tool(tool_id: str) -> ToolSpec:
    try:
        return _TOOLS_BY_ID[tool_id]
    except KeyError as exc:
        raise UnknownToolError(
            f"Unknown tool '{tool_id}'. Run 'quicktools list' to see available tools."
        ) from exc


def tools_by_category() -> Dict[str, List[ToolSpec]]:
    """Group tools by category, preserving catalog order."""

    grouped: Dict[str, List[ToolSpec]] = {}
    for tool in TOOLS:
        grouped.setdefault(tool.category, []).append(tool)
    return grouped
