"""
Placeholder Resolution

Two passes over normalized templates:
1. Composite fields: date/time and year/month/旬 tokens assembled from several
   record keys ([start_date] from start_date + start_time_hour + start_time_minute)
2. Generic pass: every remaining [key] replaced by the record value

The generic pass skips every key consumed by pass 1, so a date part is never
substituted on its own.
"""

import re
from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, Mapping

from herald.contexts.templating.placeholder_patterns import KNOWN_KEYS
from herald.utils.date_formatting import format_date_time, format_period

CampaignRecord = Mapping[str, str]


@dataclass(frozen=True)
class DateTimeField:
    """A [token] rendered from a date plus optional hour/minute record keys."""

    token_key: str
    date_key: str
    hour_key: str
    minute_key: str
    default_hour: str = "00"
    default_minute: str = "00"

    @property
    def keys(self) -> FrozenSet[str]:
        return frozenset({self.token_key, self.date_key, self.hour_key, self.minute_key})


@dataclass(frozen=True)
class PeriodField:
    """A [token] rendered from year, month and 旬 record keys."""

    token_key: str
    year_key: str
    month_key: str
    period_key: str

    @property
    def keys(self) -> FrozenSet[str]:
        return frozenset({self.token_key, self.year_key, self.month_key, self.period_key})


START_DATE = DateTimeField("start_date", "start_date", "start_time_hour", "start_time_minute")
END_DATE = DateTimeField(
    "end_date", "end_date", "end_time_hour", "end_time_minute", default_hour="23", default_minute="59"
)
FORM_DEADLINE = DateTimeField(
    "form_deadline",
    "form_deadline_date",
    "form_deadline_hour",
    "form_deadline_minute",
    default_hour="23",
    default_minute="59",
)
CONTACT_START = DateTimeField(
    "contact_start", "contact_start_date", "contact_start_hour", "contact_start_minute"
)
CONTACT_END = DateTimeField(
    "contact_end", "contact_end_date", "contact_end_hour", "contact_end_minute"
)

DATE_TIME_FIELDS = (START_DATE, END_DATE, FORM_DEADLINE, CONTACT_START, CONTACT_END)

DM_SEND_DATE = PeriodField("dm_send_date", "dm_send_year", "dm_send_month", "dm_send_period")
SHIPPING_DATE = PeriodField("shipping_date", "shipping_year", "shipping_month", "shipping_period")

PERIOD_FIELDS = (DM_SEND_DATE, SHIPPING_DATE)

# Keys owned by the composite pass; the generic pass never touches them
COMPOSITE_KEYS: FrozenSet[str] = frozenset().union(
    *(field.keys for field in DATE_TIME_FIELDS + PERIOD_FIELDS)
)


def _value(record: CampaignRecord, key: str) -> str:
    value = record.get(key)
    return "" if value is None else str(value)


def _replace_token(content: str, key: str, replacement: str) -> str:
    return content.replace(f"[{key}]", replacement)


def render_date_time_field(
    field: DateTimeField, record: CampaignRecord, force_time: bool = False
) -> str:
    """Render one date/time field, or "" when its date is blank."""
    date_str = _value(record, field.date_key).strip()
    if not date_str:
        return ""

    return format_date_time(
        date_str,
        _value(record, field.hour_key),
        _value(record, field.minute_key),
        force_time=force_time,
        default_hour=field.default_hour,
        default_minute=field.default_minute,
    )


def render_period_field(field: PeriodField, record: CampaignRecord) -> str:
    """Render one year/month/旬 field, or "" unless all three parts are present."""
    parts = [_value(record, key).strip() for key in (field.year_key, field.month_key, field.period_key)]
    if not all(parts):
        return ""
    return format_period(*parts)


def resolve_composite_fields(
    content: str,
    record: CampaignRecord,
    force_time: AbstractSet[str] = frozenset(),
) -> str:
    """
    Substitute date/time and period tokens.

    Args:
        content: Normalized template text
        record: Campaign record
        force_time: token keys (e.g. {"end_date"}) that always show a time,
            falling back to the field's default hour/minute

    Returns:
        Content with every composite token replaced (blank fields become "")
    """
    for field in DATE_TIME_FIELDS:
        if f"[{field.token_key}]" in content:
            rendered = render_date_time_field(field, record, field.token_key in force_time)
            content = _replace_token(content, field.token_key, rendered)

    for field in PERIOD_FIELDS:
        if f"[{field.token_key}]" in content:
            content = _replace_token(content, field.token_key, render_period_field(field, record))

    return content


def resolve_generic_placeholders(content: str, record: CampaignRecord) -> str:
    """
    Replace every [key] with the record value in a single pass.

    Keys come from the record plus the known internal keys, minus composite
    keys. A known key missing from the record resolves to "". One regex pass
    means replacement text is never rescanned, so resolving twice is a no-op.

    Example:
        >>> resolve_generic_placeholders("[campaign_name] / [x_id] / [other]", {"campaign_name": "夏"})
        '夏 /  / [other]'
    """
    keys = (set(record) | set(KNOWN_KEYS)) - COMPOSITE_KEYS
    keys = sorted((key for key in keys if key), key=len, reverse=True)
    if not keys:
        return content

    pattern = r"\[(" + "|".join(re.escape(key) for key in keys) + r")\]"
    return re.sub(pattern, lambda match: _value(record, match.group(1)), content)


def resolve_placeholders(
    content: str,
    record: CampaignRecord,
    force_time: AbstractSet[str] = frozenset(),
) -> str:
    """Composite pass, then generic pass (see module docstring)."""
    content = resolve_composite_fields(content, record, force_time)
    return resolve_generic_placeholders(content, record)
