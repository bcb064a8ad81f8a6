"""
Campaign Document Generators

One pure function per document kind. Each runs a fixed pipeline over its template:

    conditional line processing -> normalize tokens -> resolve -> strip Markdown
    (-> family heading cleanup, guidelines only)

The order is load-bearing: conditional processing must see the Japanese tokens
before normalization, and the resolver must never see a line that conditional
processing was going to delete.

This module exports:
- Generators: generate_guidelines, generate_notification, generate_form,
  generate_enclosed_letter
- Orchestration: generate_campaign_documents (catalog lookup + all four)
"""

import time
from dataclasses import dataclass
from typing import Dict, Mapping

from herald.contexts.templating.catalog import DocumentKind, TemplateCatalog
from herald.contexts.templating.families import (
    DEFAULT_FAMILY,
    ContactMethod,
    Platform,
    TemplateFamily,
    get_strategy,
    platform_family,
)
from herald.contexts.templating.line_rules import (
    FORM_OVERRIDES,
    GUIDELINE_OVERRIDES,
    NOTIFICATION_OVERRIDES,
    apply_edit_rules,
    count_active_prizes,
    process_prize_lines,
    process_prize_list_display,
    process_prize_pair_lines,
    process_step_lines,
)
from herald.contexts.templating.logger import (
    _log_debug,
    log_generation_result,
    log_generation_start,
)
from herald.contexts.templating.normalizer import normalize_placeholders
from herald.contexts.templating.placeholder_patterns import FormPatterns
from herald.contexts.templating.resolver import (
    END_DATE,
    FORM_DEADLINE,
    START_DATE,
    resolve_placeholders,
)
from herald.utils.markdown import strip_markdown

CampaignRecord = Mapping[str, str]

# Date fields that always show a time in each document
GUIDELINES_FORCED_TIMES = frozenset({START_DATE.token_key, END_DATE.token_key})
DEADLINE_FORCED_TIMES = frozenset({FORM_DEADLINE.token_key})


def _finish(content: str, record: CampaignRecord, force_time=frozenset()) -> str:
    """Shared tail: normalize -> resolve -> strip."""
    content = normalize_placeholders(content)
    content = resolve_placeholders(content, record, force_time)
    return strip_markdown(content)


def generate_guidelines(
    template: str,
    record: CampaignRecord,
    family: TemplateFamily = DEFAULT_FAMILY,
    contact_method: ContactMethod = ContactMethod.DIRECT_MESSAGE,
) -> str:
    """
    Generate the campaign terms (応募規約).

    Args:
        template: Guidelines template for family
        record: Campaign record
        family: Template family (selects overrides and strategy)
        contact_method: DM (default) or email enquiries

    Returns:
        Plaintext guidelines
    """
    strategy = get_strategy(family)
    active_prizes = count_active_prizes(record)
    _log_debug(f"guidelines[{family.key}]: {active_prizes} active prizes")

    content = process_prize_list_display(template, record)
    content = process_prize_lines(content, record)
    content = strategy.apply_prize_framing(content, active_prizes)
    content = process_step_lines(content, record)
    content = apply_edit_rules(content, GUIDELINE_OVERRIDES, family, record)
    content = strategy.apply_contact_method(content, contact_method)

    content = _finish(content, record, GUIDELINES_FORCED_TIMES)
    return strategy.apply_heading_cleanup(content).strip()


def generate_notification(
    template: str,
    record: CampaignRecord,
    platform: Platform = Platform.X,
) -> str:
    """Generate the winner notification message (当選DM)."""
    content = process_prize_lines(template, record, include_quantity=True)
    content = apply_edit_rules(content, NOTIFICATION_OVERRIDES, platform_family(platform), record)
    return _finish(content, record, DEADLINE_FORCED_TIMES)


def generate_form(
    template: str,
    record: CampaignRecord,
    platform: Platform = Platform.X,
) -> str:
    """
    Generate the winner intake form (当選者フォーム).

    The form template is shared across platforms: its account-name label is
    rewritten for the campaign's platform, and prizes are written as
    "[賞品名N][賞品名N数量]" pairs.
    """
    label = FormPatterns.ACCOUNT_NAME_TEMPLATE.format(platform_name=platform.display_name)
    content = template.replace(FormPatterns.ACCOUNT_NAME_LABEL, label)
    content = apply_edit_rules(content, FORM_OVERRIDES, platform_family(platform), record)
    content = process_prize_pair_lines(content, record)
    return _finish(content, record, DEADLINE_FORCED_TIMES)


def generate_enclosed_letter(template: str, record: CampaignRecord) -> str:
    """
    Generate the letter enclosed with shipped prizes (同梱レター).

    Account phrasing comes from the per-platform letter template in the catalog.
    """
    content = process_prize_lines(template, record, include_quantity=True)
    return _finish(content, record)


# ============================================================================
# Orchestration
# ============================================================================


@dataclass
class CampaignDocuments:
    """Result from generate_campaign_documents()."""

    family: TemplateFamily
    platform: Platform
    guidelines: str = ""
    notification: str = ""
    form: str = ""
    enclosed_letter: str = ""
    time_s: float = 0.0

    def as_dict(self) -> Dict[str, str]:
        """Document texts keyed by DocumentKind value."""
        return {kind.value: getattr(self, kind.value) for kind in DocumentKind}


def generate_campaign_documents(
    record: CampaignRecord,
    family_key: str = None,
    contact_method: ContactMethod = ContactMethod.DIRECT_MESSAGE,
    catalog: TemplateCatalog = None,
) -> CampaignDocuments:
    """
    Generate all four documents for one campaign record.

    Unknown or empty family keys fall back to the catalog's default family.

    Args:
        record: Campaign record
        family_key: Template family key, e.g. "IG/事後抽選"
        contact_method: DM (default) or email enquiries in the guidelines
        catalog: Template catalog (defaults to the packaged templates)

    Returns:
        CampaignDocuments with the four plaintext documents and timing
    """
    if catalog is None:
        catalog = TemplateCatalog()

    start = time.time()
    family = catalog.resolve_family(family_key)
    platform = family.platform
    log_generation_start(family.key, platform.value, count_active_prizes(record))

    result = CampaignDocuments(
        family=family,
        platform=platform,
        guidelines=generate_guidelines(
            catalog.get_template(family, DocumentKind.GUIDELINES), record, family, contact_method
        ),
        notification=generate_notification(
            catalog.get_template(family, DocumentKind.NOTIFICATION), record, platform
        ),
        form=generate_form(catalog.get_template(family, DocumentKind.FORM), record, platform),
        enclosed_letter=generate_enclosed_letter(
            catalog.get_template(family, DocumentKind.ENCLOSED_LETTER), record
        ),
    )
    result.time_s = time.time() - start

    log_generation_result(result, result.time_s)
    return result
