"""
Text processing utilities for line-oriented template edits.

All helpers are pure string -> string transforms. Line matching works on the
raw text (no Markdown awareness); callers decide when in the pipeline to run them.
"""

import re
from typing import List


def delete_lines_matching(content: str, pattern: str) -> str:
    """
    Delete every line that contains a match for pattern.

    The whole line goes, including its trailing newline. A match on the last
    line (no trailing newline) deletes to end of string.

    Args:
        content: Text to edit
        pattern: Regex (already escaped by the caller if it is a literal)

    Returns:
        Content without the matching lines

    Example:
        >>> delete_lines_matching("a\\n- [x]\\nb", re.escape("[x]"))
        'a\\nb'
        >>> delete_lines_matching("a\\n- [x]", re.escape("[x]"))
        'a\\n'
    """
    # `.` never crosses a newline, so the leftmost match starts at the line start
    return re.sub(rf".*(?:{pattern}).*\n?", "", content)


def delete_lines_containing(content: str, token: str) -> str:
    """Delete every line containing the literal token (see delete_lines_matching)."""
    return delete_lines_matching(content, re.escape(token))


def collapse_newline_runs(content: str, max_newlines: int = 2) -> str:
    """
    Collapse runs of more than max_newlines consecutive newlines.

    With the default of 2, three or more newlines (two or more blank lines)
    become exactly one blank line.

    Example:
        >>> collapse_newline_runs("a\\n\\n\\n\\nb")
        'a\\n\\nb'
    """
    return re.sub(r"\n{%d,}" % (max_newlines + 1), "\n" * max_newlines, content)


def _is_blank(line: str) -> bool:
    return not line.strip()


def remove_blank_lines_after(content: str, heading: str) -> str:
    """
    Remove the blank lines directly following each line equal to heading.

    Lines are compared after stripping surrounding whitespace.

    Example:
        >>> remove_blank_lines_after("【賞品】\\n\\n・A", "【賞品】")
        '【賞品】\\n・A'
    """
    lines = content.split("\n")
    result: List[str] = []
    skipping = False

    for line in lines:
        if skipping and _is_blank(line):
            continue
        skipping = line.strip() == heading
        result.append(line)

    return "\n".join(result)


def set_blank_lines_before(content: str, heading: str, count: int = 1) -> str:
    """
    Normalize the number of blank lines above each line equal to heading.

    All consecutive blank lines above the heading are removed, then exactly
    count blank lines are inserted. A heading on the first line is left alone.

    Example:
        >>> set_blank_lines_before("本文\\n\\n\\n【お問い合わせ】", "【お問い合わせ】")
        '本文\\n\\n【お問い合わせ】'
        >>> set_blank_lines_before("本文\\n【お問い合わせ】", "【お問い合わせ】")
        '本文\\n\\n【お問い合わせ】'
    """
    result: List[str] = []

    for line in content.split("\n"):
        if line.strip() == heading:
            while result and _is_blank(result[-1]):
                result.pop()
            if result:
                result.extend([""] * count)
        result.append(line)

    return "\n".join(result)
