"""
Default values for HERALD campaign records.

These are the values the input form starts with. Prize and step fields start
as the "not applicable" sentinel, so untouched slots render as absent.
"""

from typing import Dict, Mapping

from herald.contexts.templating.placeholder_patterns import (
    OPTIONAL_STEP_SLOTS,
    PRIZE_SLOTS,
    SentinelValues,
)

DEFAULT_PERIOD = "上旬"

DEFAULT_SCHEDULE = {
    "start_time_hour": "",
    "start_time_minute": "",
    "end_time_hour": "23",
    "end_time_minute": "59",
    "form_deadline_hour": "23",
    "form_deadline_minute": "59",
    "dm_send_period": DEFAULT_PERIOD,
    "shipping_period": DEFAULT_PERIOD,
}

DEFAULT_STEPS = {
    "step_2": "対象の投稿をリポスト",
    **{f"step_{n}": SentinelValues.FULL_WIDTH for n in OPTIONAL_STEP_SLOTS},
}


def get_default_record() -> Dict[str, str]:
    """
    Get a campaign record holding every form default.

    Returns a fresh dict each call; callers may mutate it.
    """
    record = {
        "campaign_name": "",
        "company_name": "",
        "total_winners": "",
        **DEFAULT_SCHEDULE,
        **DEFAULT_STEPS,
    }
    for n in PRIZE_SLOTS:
        record[f"prize_{n}"] = "" if n == 1 else SentinelValues.FULL_WIDTH
        record[f"prize_{n}_quantity"] = ""
    return record


def merge_with_defaults(record: Mapping[str, object]) -> Dict[str, str]:
    """
    Overlay a partial record on the defaults, coercing values to strings.

    None becomes "". Keys absent from record keep their default.
    """
    merged = get_default_record()
    for key, value in record.items():
        merged[str(key)] = "" if value is None else str(value)
    return merged
