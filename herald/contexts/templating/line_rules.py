"""
Conditional Line Processing

Decides, per optional field, whether a template line keeps its token (and gets
the value inlined) or disappears entirely. Everything here runs on the
human-readable token form, before normalization and generic resolution, so a
deleted line never leaves a resolved value behind.

Two building blocks:
- resolve_or_delete(): one token, one value, inline or delete the line
- EditRule: named, ordered rewrite rules with a family predicate and a record
  predicate, applied by apply_edit_rules()
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Mapping, Optional

from herald.contexts.templating.families import CampaignMode, Platform, TemplateFamily
from herald.contexts.templating.logger import _log_debug
from herald.contexts.templating.placeholder_patterns import (
    OPTIONAL_STEP_SLOTS,
    PRIZE_SLOTS,
    DispatchTiming,
    NotificationPatterns,
    SentinelValues,
    SlotTokens,
)
from herald.utils.text_processing import delete_lines_containing, delete_lines_matching

CampaignRecord = Mapping[str, str]


def field_value(record: CampaignRecord, key: str) -> str:
    """Return the trimmed value for key; absent and None read as empty."""
    value = record.get(key)
    return "" if value is None else str(value).strip()


def is_active(value: Optional[str]) -> bool:
    """
    A field is active when its trimmed value is non-empty and not a sentinel.

    Examples:
        >>> is_active("ギフト券")
        True
        >>> is_active("  ")
        False
        >>> is_active("（不要なら空白）")
        False
    """
    value = (value or "").strip()
    return bool(value) and value not in SentinelValues.all()


def resolve_or_delete(
    content: str,
    token: str,
    replacement: str,
    active: bool,
) -> str:
    """
    Inline replacement for token, or delete every line holding token.

    Args:
        content: Template text (human-readable tokens)
        token: Literal token, e.g. "[賞品名3]"
        replacement: Text substituted when active
        active: Outcome of the activity check for this field

    Returns:
        Edited content
    """
    if active:
        return content.replace(token, replacement)
    return delete_lines_containing(content, token)


# ============================================================================
# Repeatable slots
# ============================================================================


def count_active_prizes(record: CampaignRecord) -> int:
    """Number of active prize slots (1..5)."""
    return sum(1 for n in PRIZE_SLOTS if is_active(field_value(record, f"prize_{n}")))


def _prize_text(record: CampaignRecord, n: int, include_quantity: bool) -> str:
    name = field_value(record, f"prize_{n}")
    quantity = field_value(record, f"prize_{n}_quantity")
    if include_quantity and quantity:
        return f"{name}{SlotTokens.QUANTITY_SEPARATOR}{quantity}"
    return name


def prepare_prize_list(record: CampaignRecord) -> str:
    """
    Join active prize names with "、".

    Example:
        >>> prepare_prize_list({"prize_1": "A", "prize_2": "（不要なら空白）", "prize_3": "C"})
        'A、C'
    """
    return SlotTokens.PRIZE_LIST_SEPARATOR.join(
        field_value(record, f"prize_{n}")
        for n in PRIZE_SLOTS
        if is_active(field_value(record, f"prize_{n}"))
    )


def process_prize_list_display(content: str, record: CampaignRecord) -> str:
    """
    Replace the inline "[賞品名1] ... [賞品名5]" run with the joined prize list.

    With no active prize the whole line goes, bold markers included.
    """
    prize_list = prepare_prize_list(record)
    return resolve_or_delete(content, SlotTokens.PRIZE_LIST_RUN, prize_list, bool(prize_list))


def process_prize_lines(
    content: str,
    record: CampaignRecord,
    include_quantity: bool = False,
) -> str:
    """
    Resolve or delete each "[賞品名N]" line.

    With include_quantity, active slots render as "name　quantity" (full-width
    space) when a quantity is present.
    """
    for n in PRIZE_SLOTS:
        active = is_active(field_value(record, f"prize_{n}"))
        if not active:
            _log_debug(f"prize slot {n} inactive, dropping its lines")
        content = resolve_or_delete(
            content,
            SlotTokens.prize(n),
            _prize_text(record, n, include_quantity),
            active,
        )
    return content


def process_prize_pair_lines(content: str, record: CampaignRecord) -> str:
    """Resolve or delete each "[賞品名N][賞品名N数量]" pair (intake form layout)."""
    for n in PRIZE_SLOTS:
        content = resolve_or_delete(
            content,
            SlotTokens.prize_pair(n),
            _prize_text(record, n, include_quantity=True),
            is_active(field_value(record, f"prize_{n}")),
        )
    return content


def process_step_lines(content: str, record: CampaignRecord) -> str:
    """Resolve STEP3..STEP5 as "STEPn：text" or drop their lines. STEP1/2 are fixed."""
    for n in OPTIONAL_STEP_SLOTS:
        value = field_value(record, f"step_{n}")
        content = resolve_or_delete(
            content,
            SlotTokens.step(n),
            f"{SlotTokens.step_label(n)}{value}",
            is_active(value),
        )
    return content


# ============================================================================
# Edit rules
# ============================================================================


class EditAction(Enum):
    SUBSTITUTE = "substitute"
    DELETE_LINE = "delete_line"


def any_family(family: TemplateFamily) -> bool:
    return True


def any_record(record: CampaignRecord) -> bool:
    return True


@dataclass(frozen=True)
class EditRule:
    """
    One named rewrite over template text.

    Attributes:
        name: Identifier used in logs and tests
        action: SUBSTITUTE replaces each match; DELETE_LINE drops each matching line
        pattern: Regex (use re.escape for literal sentences)
        replacement: Literal replacement text for SUBSTITUTE
        applies_to: Predicate over the template family
        when: Predicate over the campaign record
    """

    name: str
    action: EditAction
    pattern: str
    replacement: str = ""
    applies_to: Callable[[TemplateFamily], bool] = any_family
    when: Callable[[CampaignRecord], bool] = any_record

    def apply(self, content: str) -> str:
        if self.action is EditAction.DELETE_LINE:
            return delete_lines_matching(content, self.pattern)
        return re.sub(self.pattern, lambda _: self.replacement, content)


def apply_edit_rules(
    content: str,
    rules: Iterable[EditRule],
    family: TemplateFamily,
    record: CampaignRecord,
) -> str:
    """Apply rules in declared order, skipping those whose predicates fail."""
    for rule in rules:
        if not (rule.applies_to(family) and rule.when(record)):
            continue
        _log_debug(f"edit rule '{rule.name}' applied")
        content = rule.apply(content)
    return content


def _either_token(*tokens: str) -> str:
    return "|".join(re.escape(token) for token in tokens)


# Family overrides for the guidelines, in application order
GUIDELINE_OVERRIDES = (
    EditRule(
        name="rate_boost_blank",
        action=EditAction.DELETE_LINE,
        pattern=re.escape(SlotTokens.RATE_BOOST),
        applies_to=lambda family: family.platform in (Platform.X, Platform.IG_X),
        when=lambda record: not is_active(field_value(record, "rate_boost_text")),
    ),
    EditRule(
        name="contact_window_without_start",
        action=EditAction.DELETE_LINE,
        pattern=_either_token(SlotTokens.CONTACT_START, SlotTokens.CONTACT_END),
        when=lambda record: not field_value(record, "contact_start_date"),
    ),
    EditRule(
        name="contact_window_without_end",
        action=EditAction.DELETE_LINE,
        pattern=re.escape(SlotTokens.CONTACT_END),
        when=lambda record: not field_value(record, "contact_end_date"),
    ),
    EditRule(
        name="immediate_dispatch_timing",
        action=EditAction.SUBSTITUTE,
        pattern=re.escape(DispatchTiming.SCHEDULED),
        replacement=DispatchTiming.IMMEDIATE,
        applies_to=lambda family: family.mode is CampaignMode.INSTANT,
    ),
)

# Form overrides: the footnote line only survives when a note was given
FORM_OVERRIDES = (
    EditRule(
        name="form_note_blank",
        action=EditAction.DELETE_LINE,
        pattern=re.escape(SlotTokens.FORM_NOTE),
        when=lambda record: not is_active(field_value(record, "form_note")),
    ),
)

# Notification overrides: the message-request hint only makes sense on Instagram
NOTIFICATION_OVERRIDES = (
    EditRule(
        name="message_request_hint_off_instagram",
        action=EditAction.DELETE_LINE,
        pattern=re.escape(NotificationPatterns.MESSAGE_REQUEST_HINT),
        applies_to=lambda family: family.platform is not Platform.IG,
    ),
)
