"""
Templating Context

Responsibilities:
- Normalizes human-readable template tokens to internal keys
- Decides which optional lines survive (prizes, steps, notes, contact window)
- Formats Japanese dates and resolves tokens from the campaign record
- Strips Markdown so output pastes as plaintext
- Applies family-specific structural edits

Owns: Template catalog, token tables, the four document generators
Never: Validates or stores campaign records
"""

from herald.contexts.templating.catalog import DocumentKind, TemplateCatalog
from herald.contexts.templating.defaults import get_default_record, merge_with_defaults
from herald.contexts.templating.exceptions import TemplateCatalogError
from herald.contexts.templating.families import (
    DEFAULT_FAMILY,
    CampaignMode,
    ContactMethod,
    Platform,
    TemplateFamily,
)
from herald.contexts.templating.generator import (
    CampaignDocuments,
    generate_campaign_documents,
    generate_enclosed_letter,
    generate_form,
    generate_guidelines,
    generate_notification,
)
from herald.contexts.templating.normalizer import normalize_placeholders
from herald.contexts.templating.resolver import resolve_placeholders

__all__ = [
    # Document generators
    "generate_guidelines",
    "generate_notification",
    "generate_form",
    "generate_enclosed_letter",
    # Orchestration
    "generate_campaign_documents",
    "CampaignDocuments",
    # Pipeline stages
    "normalize_placeholders",
    "resolve_placeholders",
    # Families and catalog
    "TemplateFamily",
    "Platform",
    "CampaignMode",
    "ContactMethod",
    "DEFAULT_FAMILY",
    "TemplateCatalog",
    "DocumentKind",
    "TemplateCatalogError",
    # Records
    "get_default_record",
    "merge_with_defaults",
]
