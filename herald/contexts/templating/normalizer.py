"""
Placeholder Normalization

Rewrites human-readable template tokens ([賞品名1]) to internal keys ([prize_1]).
Runs after conditional line processing, which matches the Japanese spelling,
and before the resolver, which only knows internal keys.
"""

import re
from typing import Dict

from herald.contexts.templating.placeholder_patterns import PLACEHOLDER_MAPPING


def normalize_placeholders(template: str, mapping: Dict[str, str] = None) -> str:
    """
    Replace every known human-readable token with its internal token.

    Tokens outside the mapping pass through unchanged. Tokens are bracket
    delimited and never overlap, so replacement order does not matter.

    Args:
        template: Template text with Japanese tokens
        mapping: Token mapping (defaults to PLACEHOLDER_MAPPING)

    Returns:
        Template text with internal tokens

    Example:
        >>> normalize_placeholders("[キャンペーン名]を開催 [未知]")
        '[campaign_name]を開催 [未知]'
    """
    if mapping is None:
        mapping = PLACEHOLDER_MAPPING

    normalized = template
    for human, internal in mapping.items():
        normalized = re.sub(re.escape(human), lambda _, token=internal: token, normalized)
    return normalized
