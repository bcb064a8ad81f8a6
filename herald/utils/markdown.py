"""
Markdown Utilities

Converts Markdown-flavoured template output into plaintext that pastes cleanly
into word processors and campaign forms. Only a fixed set of markers is
stripped; the text is never parsed into a tree.
"""

import re

from herald.utils.text_processing import collapse_newline_runs

# Order matters: list markers are stripped before rules so "- item" never
# reaches the rule pattern, and fences go before inline spans.
HEADING_MARKER = r"^#{1,6}\s+"
LIST_MARKER = r"^[-*]\s+"
BOLD = r"\*\*(.+?)\*\*"
HORIZONTAL_RULE = r"^---+$"
CODE_FENCE = r"```[\s\S]*?```"
INLINE_CODE = r"`([^`]+)`"


def strip_markdown(text: str) -> str:
    """
    Remove Markdown syntax markers, keeping the visible text.

    Steps, in order:
    1. Heading markers (``#`` to ``######`` plus following space)
    2. List markers (``-`` or ``*`` plus following space)
    3. Bold markers around text
    4. Horizontal-rule lines (the line content is emptied)
    5. Fenced code blocks, including their content
    6. Inline code markers (inner text kept)
    7. Runs of 3+ newlines collapsed to 2
    The result is trimmed.

    Hashtags such as ``#キャンペーン`` survive because a heading marker must be
    followed by whitespace.

    Args:
        text: Markdown-flavoured text

    Returns:
        Plaintext

    Example:
        >>> strip_markdown("## Title\\n- item **bold**\\n\\n\\n\\nend")
        'Title\\nitem bold\\n\\nend'
    """
    if not text:
        return ""

    cleaned = re.sub(HEADING_MARKER, "", text, flags=re.MULTILINE)
    cleaned = re.sub(LIST_MARKER, "", cleaned, flags=re.MULTILINE)
    cleaned = re.sub(BOLD, r"\1", cleaned)
    cleaned = re.sub(HORIZONTAL_RULE, "", cleaned, flags=re.MULTILINE)
    cleaned = re.sub(CODE_FENCE, "", cleaned)
    cleaned = re.sub(INLINE_CODE, r"\1", cleaned)
    cleaned = collapse_newline_runs(cleaned, max_newlines=2)

    return cleaned.strip()
