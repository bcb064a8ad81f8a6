"""Unit tests for token normalization and placeholder resolution."""

import pytest

from herald.contexts.templating.normalizer import normalize_placeholders
from herald.contexts.templating.placeholder_patterns import KNOWN_KEYS, PLACEHOLDER_MAPPING
from herald.contexts.templating.resolver import (
    COMPOSITE_KEYS,
    DM_SEND_DATE,
    END_DATE,
    render_period_field,
    resolve_composite_fields,
    resolve_generic_placeholders,
    resolve_placeholders,
)


# ============================================================================
# Normalization
# ============================================================================


@pytest.mark.unit
def test_normalize_known_tokens():
    template = "[キャンペーン名]を[会社名]が開催 [賞品名1][賞品名1数量]"
    assert normalize_placeholders(template) == "[campaign_name]を[company_name]が開催 [prize_1][prize_1_quantity]"


@pytest.mark.unit
def test_normalize_unknown_token_passes_through():
    assert normalize_placeholders("[未知の項目] [キャンペーン名]") == "[未知の項目] [campaign_name]"


@pytest.mark.unit
def test_normalize_every_occurrence():
    assert normalize_placeholders("[合計人数]/[合計人数]") == "[total_winners]/[total_winners]"


@pytest.mark.unit
def test_normalize_every_mapping_entry():
    """Every human-readable token maps to its internal token."""
    for human, internal in PLACEHOLDER_MAPPING.items():
        assert normalize_placeholders(f"x{human}x") == f"x{internal}x"


@pytest.mark.unit
def test_normalize_custom_mapping():
    assert normalize_placeholders("[A]", {"[A]": "[a]"}) == "[a]"


@pytest.mark.unit
def test_mapping_targets_are_internal_keys():
    """Internal tokens are bracketed ASCII keys and unique."""
    internals = list(PLACEHOLDER_MAPPING.values())
    assert len(internals) == len(set(internals))
    for token in internals:
        assert token.startswith("[") and token.endswith("]")
        assert token[1:-1].isascii()
    assert "prize_1" in KNOWN_KEYS


# ============================================================================
# Composite fields
# ============================================================================


@pytest.mark.unit
def test_date_fields_with_forced_times():
    """Forced start/end show 00:00 and 23:59 when no time is entered."""
    record = {"start_date": "2025-01-10", "end_date": "2025-01-31"}
    result = resolve_composite_fields("[start_date]〜[end_date]", record, {"start_date", "end_date"})
    assert result == "2025年1月10日（金）00:00〜2025年1月31日（金）23:59"


@pytest.mark.unit
def test_date_fields_without_forced_times():
    record = {"start_date": "2025-01-10", "end_date": "2025-01-31"}
    assert resolve_composite_fields("[start_date]〜[end_date]", record) == "2025年1月10日（金）〜2025年1月31日（金）"


@pytest.mark.unit
def test_date_field_with_entered_time():
    record = {"end_date": "2025-01-31", "end_time_hour": "18", "end_time_minute": "0"}
    assert resolve_composite_fields("[end_date]", record, {"end_date"}) == "2025年1月31日（金）18:00"


@pytest.mark.unit
def test_form_deadline_defaults_to_end_of_day():
    record = {"form_deadline_date": "2025-02-14"}
    assert resolve_composite_fields("[form_deadline]", record, {"form_deadline"}) == "2025年2月14日（金）23:59"


@pytest.mark.unit
def test_absent_date_resolves_to_empty():
    assert resolve_composite_fields("期間：[start_date]", {}) == "期間："


@pytest.mark.unit
def test_period_field():
    record = {"dm_send_year": "25", "dm_send_month": "2", "dm_send_period": "中旬"}
    assert resolve_composite_fields("[dm_send_date]頃", record) == "2025年2月中旬頃"


@pytest.mark.unit
def test_period_field_needs_all_parts():
    record = {"dm_send_year": "25", "dm_send_month": "2", "dm_send_period": ""}
    assert render_period_field(DM_SEND_DATE, record) == ""


@pytest.mark.unit
def test_composite_keys_cover_parts():
    assert END_DATE.keys <= COMPOSITE_KEYS
    assert {"shipping_year", "shipping_month", "shipping_period", "shipping_date"} <= COMPOSITE_KEYS


# ============================================================================
# Generic resolution
# ============================================================================


@pytest.mark.unit
def test_generic_resolution():
    record = {"campaign_name": "夏", "company_name": "株式会社サンプル"}
    assert resolve_generic_placeholders("[campaign_name] by [company_name]", record) == "夏 by 株式会社サンプル"


@pytest.mark.unit
def test_known_key_missing_from_record_resolves_to_empty():
    assert resolve_generic_placeholders("ID:[x_id]", {}) == "ID:"


@pytest.mark.unit
def test_unknown_token_left_alone():
    assert resolve_generic_placeholders("[not_a_key]", {"campaign_name": "夏"}) == "[not_a_key]"


@pytest.mark.unit
def test_record_only_keys_are_resolved():
    """Keys outside the token table still resolve when the record has them."""
    assert resolve_generic_placeholders("[custom_note]", {"custom_note": "備考"}) == "備考"


@pytest.mark.unit
def test_generic_pass_skips_date_parts():
    """Date components are never substituted on their own."""
    record = {"start_time_hour": "10", "start_date": "2025-01-10"}
    assert resolve_generic_placeholders("[start_time_hour] [start_date]", record) == "[start_time_hour] [start_date]"


@pytest.mark.unit
def test_longer_key_wins_over_prefix():
    """prize_1_quantity is not read as prize_1 followed by text."""
    record = {"prize_1": "A", "prize_1_quantity": "2個"}
    assert resolve_generic_placeholders("[prize_1][prize_1_quantity]", record) == "A2個"


@pytest.mark.unit
def test_replacement_text_is_not_rescanned():
    """A value that looks like a token stays literal."""
    record = {"campaign_name": "[company_name]", "company_name": "株式会社サンプル"}
    assert resolve_generic_placeholders("[campaign_name]", record) == "[company_name]"


@pytest.mark.unit
def test_values_with_backslashes_are_literal():
    record = {"form_note": r"C:\path\1"}
    assert resolve_generic_placeholders("[form_note]", record) == r"C:\path\1"


@pytest.mark.unit
def test_resolution_is_idempotent():
    record = {
        "campaign_name": "夏のキャンペーン",
        "start_date": "2025-01-10",
        "end_date": "2025-01-31",
        "shipping_year": "25",
        "shipping_month": "3",
        "shipping_period": "下旬",
    }
    template = "[campaign_name]: [start_date]〜[end_date] / 発送 [shipping_date] / [x_id]"
    once = resolve_placeholders(template, record, {"start_date", "end_date"})
    twice = resolve_placeholders(once, record, {"start_date", "end_date"})

    assert once == "夏のキャンペーン: 2025年1月10日（金）00:00〜2025年1月31日（金）23:59 / 発送 2025年3月下旬 / "
    assert twice == once


@pytest.mark.unit
def test_no_known_tokens_survive():
    """After normalization and resolution, no mapped token remains."""
    template = " ".join(PLACEHOLDER_MAPPING)
    result = resolve_placeholders(normalize_placeholders(template), {})
    for internal in PLACEHOLDER_MAPPING.values():
        assert internal not in result
