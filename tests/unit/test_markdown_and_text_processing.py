"""Unit tests for Markdown stripping and line-oriented text helpers."""

import re

import pytest

from herald.utils.markdown import strip_markdown
from herald.utils.text_processing import (
    collapse_newline_runs,
    delete_lines_containing,
    delete_lines_matching,
    remove_blank_lines_after,
    set_blank_lines_before,
)


# ============================================================================
# strip_markdown
# ============================================================================


@pytest.mark.unit
def test_strip_markdown_basic():
    """Headings, list markers and bold are removed; blank runs collapsed."""
    assert strip_markdown("## Title\n- item **bold**\n\n\n\nend") == "Title\nitem bold\n\nend"


@pytest.mark.unit
def test_strip_markdown_empty():
    assert strip_markdown("") == ""


@pytest.mark.unit
def test_strip_markdown_all_heading_levels():
    """Heading markers from # to ###### are stripped."""
    text = "# h1\n###### h6"
    assert strip_markdown(text) == "h1\nh6"


@pytest.mark.unit
def test_strip_markdown_keeps_hashtags():
    """Hashtags have no space after # and are not headings."""
    assert strip_markdown("#夏プレ をつけて投稿") == "#夏プレ をつけて投稿"


@pytest.mark.unit
def test_strip_markdown_star_list_marker():
    assert strip_markdown("* first\n* second") == "first\nsecond"


@pytest.mark.unit
def test_strip_markdown_horizontal_rule():
    """Rule lines are emptied, not removed."""
    assert strip_markdown("a\n---\nb") == "a\n\nb"


@pytest.mark.unit
def test_strip_markdown_code():
    """Fenced blocks are dropped with their content; inline code keeps its text."""
    assert strip_markdown("before\n```\ncode\n```\nafter") == "before\n\nafter"
    assert strip_markdown("use `cmd` now") == "use cmd now"


@pytest.mark.unit
def test_strip_markdown_trims():
    assert strip_markdown("\n\n  text  \n\n") == "text"


# ============================================================================
# Line helpers
# ============================================================================


@pytest.mark.unit
def test_delete_lines_containing_removes_whole_line():
    """The line and its newline go; neighbours are untouched."""
    content = "keep\n- [賞品名2]\nalso keep\n"
    assert delete_lines_containing(content, "[賞品名2]") == "keep\nalso keep\n"


@pytest.mark.unit
def test_delete_lines_containing_last_line():
    """A match on the final line without trailing newline."""
    assert delete_lines_containing("keep\n- [賞品名2]", "[賞品名2]") == "keep\n"


@pytest.mark.unit
def test_delete_lines_containing_every_occurrence():
    content = "・[x]\n本文\n※[x]\n"
    assert delete_lines_containing(content, "[x]") == "本文\n"


@pytest.mark.unit
def test_delete_lines_containing_is_literal():
    """Regex metacharacters in the token are matched literally."""
    assert delete_lines_containing("a.b\naxb\n", "a.b") == "axb\n"


@pytest.mark.unit
def test_delete_lines_matching_alternation():
    """Alternation patterns delete every line holding either token."""
    pattern = "|".join(re.escape(t) for t in ("[start]", "[end]"))
    content = "head\nfrom [start]\nto [end]\ntail"
    assert delete_lines_matching(content, pattern) == "head\ntail"


@pytest.mark.unit
def test_collapse_newline_runs():
    assert collapse_newline_runs("a\n\n\n\nb") == "a\n\nb"
    assert collapse_newline_runs("a\n\nb") == "a\n\nb"
    assert collapse_newline_runs("a\n\n\nb", max_newlines=1) == "a\nb"


@pytest.mark.unit
def test_remove_blank_lines_after():
    """Only blank lines directly after the heading are removed."""
    content = "【賞品】\n\n\n・A\n\n・B"
    assert remove_blank_lines_after(content, "【賞品】") == "【賞品】\n・A\n\n・B"


@pytest.mark.unit
def test_remove_blank_lines_after_missing_heading():
    content = "本文\n\n本文"
    assert remove_blank_lines_after(content, "【賞品】") == content


@pytest.mark.unit
def test_set_blank_lines_before():
    """Any number of blank lines above the heading becomes exactly one."""
    assert set_blank_lines_before("本文\n【お問い合わせ】", "【お問い合わせ】") == "本文\n\n【お問い合わせ】"
    assert set_blank_lines_before("本文\n\n\n\n【お問い合わせ】\nx", "【お問い合わせ】") == "本文\n\n【お問い合わせ】\nx"


@pytest.mark.unit
def test_set_blank_lines_before_first_line():
    """A heading on the first line gets no blank line above it."""
    assert set_blank_lines_before("【お問い合わせ】\nx", "【お問い合わせ】") == "【お問い合わせ】\nx"
