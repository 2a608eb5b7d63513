"""Line-by-line positional text comparison."""

from __future__ import annotations

from typing import List

from .segmenter import collapse_whitespace
from .structures import DiffReport, DiffRow

SAME = "same"
CHANGED = "changed"
ADDED = "added"
REMOVED = "removed"


def normalise_lines(text: str, ignore_whitespace: bool) -> List[str]:
    lines = text.split("\n")
    if ignore_whitespace:
        return [collapse_whitespace(line) for line in lines]
    return lines


def compare_texts(left: str, right: str, *, ignore_whitespace: bool = True) -> DiffReport:
    """Compare two texts line by line at matching positions.

    No alignment is attempted: an inserted line shifts every later line
    into the ``changed`` state.
    """

    left_lines = normalise_lines(left, ignore_whitespace)
    right_lines = normalise_lines(right, ignore_whitespace)
    report = DiffReport()

    for index in range(max(len(left_lines), len(right_lines))):
        has_left = index < len(left_lines)
        has_right = index < len(right_lines)
        left_line = left_lines[index] if has_left else ""
        right_line = right_lines[index] if has_right else ""

        if has_left and not has_right:
            state = REMOVED
            report.removed += 1
        elif has_right and not has_left:
            state = ADDED
            report.added += 1
        elif left_line != right_line:
            state = CHANGED
            report.changed += 1
        else:
            state = SAME

        report.rows.append(
            DiffRow(line=index + 1, left=left_line, right=right_line, state=state)
        )
    return report
