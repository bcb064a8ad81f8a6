"""
Template Families and Family Strategies

A template family is one template variant for a platform and campaign mode
("X/事後抽選", "IG/事後抽選", ...). Families differ in a handful of structural
edits; each family gets a FamilyStrategy subclass declaring which edits apply.
The base class is a no-op for every edit, so an unknown family renders its
templates without any family-specific rewriting.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from herald.contexts.templating.placeholder_patterns import (
    ContactSentences,
    GuidelineHeadings,
    PrizeFraming,
)
from herald.utils.text_processing import remove_blank_lines_after, set_blank_lines_before


class Platform(Enum):
    """Social network a campaign runs on."""

    X = "X"
    IG = "IG"
    TIKTOK = "TikTok"
    IG_X = "IG_X"

    @property
    def display_name(self) -> str:
        """Name used in reader-facing text. Dual-network campaigns collect X accounts."""
        return {
            Platform.X: "X",
            Platform.IG: "Instagram",
            Platform.TIKTOK: "TikTok",
            Platform.IG_X: "X",
        }[self]


class CampaignMode(Enum):
    """How winners are picked."""

    DRAW = "事後抽選"
    INSTANT = "即時"


class ContactMethod(Enum):
    """Channel winners use to reach the organizer."""

    DIRECT_MESSAGE = "dm"
    EMAIL = "email"


@dataclass(frozen=True)
class TemplateFamily:
    """A named template variant, e.g. TemplateFamily("X/即時", Platform.X, CampaignMode.INSTANT)."""

    key: str
    platform: Platform
    mode: CampaignMode = CampaignMode.DRAW


X_DRAW = TemplateFamily("X/事後抽選", Platform.X, CampaignMode.DRAW)
X_INSTANT = TemplateFamily("X/即時", Platform.X, CampaignMode.INSTANT)
IG_DRAW = TemplateFamily("IG/事後抽選", Platform.IG, CampaignMode.DRAW)
TIKTOK_DRAW = TemplateFamily("TikTok/事後抽選", Platform.TIKTOK, CampaignMode.DRAW)
IG_X_DRAW = TemplateFamily("IG・X/事後抽選", Platform.IG_X, CampaignMode.DRAW)

DEFAULT_FAMILY = X_DRAW


# ============================================================================
# Strategies
# ============================================================================


class FamilyStrategy:
    """
    Family-specific structural edits. Every edit is a no-op by default.

    Subclasses switch edits on through class attributes:
        pluralize_prizes: rewrite prize framing by active prize count
        dm_contact_sentences: sentences replaced by the email sentence in email mode
        compact_headings: headings whose following blank lines are removed
        spaced_heading: heading preceded by exactly one blank line
    """

    pluralize_prizes: bool = False
    dm_contact_sentences: Tuple[str, ...] = ()
    compact_headings: Tuple[str, ...] = ()
    spaced_heading: Optional[str] = None

    def apply_prize_framing(self, content: str, active_prizes: int) -> str:
        """
        Switch "を合計[合計人数]名様にプレゼント" between single and set phrasing.

        Runs after the prize slots are resolved but takes the count computed
        beforehand. Zero active prizes leaves the text untouched.
        """
        if not self.pluralize_prizes:
            return content

        if active_prizes > 1:
            return re.sub(PrizeFraming.SINGLE_ONLY, lambda _: PrizeFraming.PLURAL, content)
        if active_prizes == 1:
            return content.replace(PrizeFraming.PLURAL, PrizeFraming.SINGLE)
        return content

    def apply_contact_method(self, content: str, method: ContactMethod) -> str:
        """Replace this family's DM contact sentences with the email sentence."""
        if method is not ContactMethod.EMAIL:
            return content

        for sentence in self.dm_contact_sentences:
            content = content.replace(sentence, ContactSentences.EMAIL)
        return content

    def apply_heading_cleanup(self, content: str) -> str:
        """Tighten spacing around headings once the text is plain."""
        for heading in self.compact_headings:
            content = remove_blank_lines_after(content, heading)
        if self.spaced_heading:
            content = set_blank_lines_before(content, self.spaced_heading, count=1)
        return content


class XDrawStrategy(FamilyStrategy):
    pluralize_prizes = True
    dm_contact_sentences = (ContactSentences.X_DM,)


class XInstantStrategy(FamilyStrategy):
    pluralize_prizes = True
    dm_contact_sentences = (ContactSentences.X_INSTANT_DM, ContactSentences.X_DM)


class InstagramDrawStrategy(FamilyStrategy):
    pluralize_prizes = True
    dm_contact_sentences = (ContactSentences.IG_DM,)
    compact_headings = (
        GuidelineHeadings.OVERVIEW,
        GuidelineHeadings.HOW_TO_APPLY,
        GuidelineHeadings.PRIZES,
    )
    spaced_heading = GuidelineHeadings.CONTACT


class TikTokDrawStrategy(FamilyStrategy):
    dm_contact_sentences = (ContactSentences.TIKTOK_DM,)


class DualNetworkDrawStrategy(InstagramDrawStrategy):
    # The combined sentence goes first; it contains neither single-network sentence
    dm_contact_sentences = (
        ContactSentences.IG_X_DM,
        ContactSentences.IG_DM,
        ContactSentences.X_DM,
    )


STRATEGIES: Dict[str, FamilyStrategy] = {
    X_DRAW.key: XDrawStrategy(),
    X_INSTANT.key: XInstantStrategy(),
    IG_DRAW.key: InstagramDrawStrategy(),
    TIKTOK_DRAW.key: TikTokDrawStrategy(),
    IG_X_DRAW.key: DualNetworkDrawStrategy(),
}


def get_strategy(family: TemplateFamily) -> FamilyStrategy:
    """Return the strategy registered for family, or the no-op base strategy."""
    return STRATEGIES.get(family.key, FamilyStrategy())


def platform_family(platform: Platform) -> TemplateFamily:
    """Bare family for rules that only look at the platform (notification, form, letter)."""
    return TemplateFamily(key=platform.value, platform=platform)
