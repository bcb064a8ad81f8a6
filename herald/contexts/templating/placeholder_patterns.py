"""
Placeholder Pattern Constants

Centralized token strings and literal sentences used by the document generators.
Organized into frozen dataclasses by category for immutability and clear grouping.

Templates are authored with human-readable Japanese tokens ([賞品名1]); the
normalizer rewrites them to internal ASCII keys ([prize_1]) before resolution.
Structural edits that run before normalization therefore match the Japanese form.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

PRIZE_SLOTS = (1, 2, 3, 4, 5)
OPTIONAL_STEP_SLOTS = (3, 4, 5)


# Human-readable token -> internal token. Closed mapping; anything else passes through.
PLACEHOLDER_MAPPING: Dict[str, str] = {
    "[キャンペーン名]": "[campaign_name]",
    "[会社名]": "[company_name]",
    **{f"[賞品名{n}]": f"[prize_{n}]" for n in PRIZE_SLOTS},
    **{f"[賞品名{n}数量]": f"[prize_{n}_quantity]" for n in PRIZE_SLOTS},
    "[応募期間開始]": "[start_date]",
    "[応募期間終了]": "[end_date]",
    "[フォームURL]": "[form_url]",
    "[フォーム入力締切日]": "[form_deadline]",
    "[賞品発送日]": "[shipping_date]",
    "[DM送付日]": "[dm_send_date]",
    "[合計人数]": "[total_winners]",
    "[プライバシーポリシーURL]": "[privacy_policy_url]",
    "[Xアカウント名]": "[x_name]",
    "[XアカウントID]": "[x_id]",
    "[XアカウントURL]": "[x_url]",
    "[IGアカウント名]": "[ig_name]",
    "[IGアカウントID]": "[ig_id]",
    "[IGアカウントURL]": "[ig_url]",
    "[TikTokアカウント名]": "[tiktok_name]",
    "[TikTokアカウントID]": "[tiktok_id]",
    "[TikTokアカウントURL]": "[tiktok_url]",
    "[お問い合わせメールアドレス]": "[contact_email]",
    "[フォーム備考]": "[form_note]",
    "[応募方法_STEP2]": "[step_2]",
    "[応募方法_STEP3]": "[step_3]",
    "[応募方法_STEP4]": "[step_4]",
    "[応募方法_STEP5]": "[step_5]",
    "[当選確率アップ]": "[rate_boost_text]",
    "[問い合わせ受付開始]": "[contact_start]",
    "[問い合わせ受付終了]": "[contact_end]",
}

# Internal keys (without brackets) the resolver always knows about, even when
# the record does not carry them
KNOWN_KEYS: Tuple[str, ...] = tuple(token[1:-1] for token in PLACEHOLDER_MAPPING.values())


@dataclass(frozen=True)
class SentinelValues:
    """
    Form default values meaning "not applicable".

    Prize and step fields are pre-filled with one of these; a slot holding a
    sentinel is treated exactly like an empty slot.
    """
    FULL_WIDTH: str = "（不要なら空白）"
    HALF_WIDTH: str = "(不要なら空白)"

    @classmethod
    def all(cls) -> List[str]:
        """Return both sentinel spellings."""
        return [cls.FULL_WIDTH, cls.HALF_WIDTH]


@dataclass(frozen=True)
class SlotTokens:
    """
    Human-readable tokens for repeatable and optional fields.

    Matched before normalization, so these are the Japanese spellings.
    """
    PRIZE_LIST_RUN: str = "[賞品名1] [賞品名2] [賞品名3] [賞品名4] [賞品名5]"
    PRIZE_LIST_SEPARATOR: str = "、"
    RATE_BOOST: str = "[当選確率アップ]"
    FORM_NOTE: str = "[フォーム備考]"
    CONTACT_START: str = "[問い合わせ受付開始]"
    CONTACT_END: str = "[問い合わせ受付終了]"
    QUANTITY_SEPARATOR: str = "　"  # full-width space between prize name and quantity

    @staticmethod
    def prize(n: int) -> str:
        return f"[賞品名{n}]"

    @staticmethod
    def prize_quantity(n: int) -> str:
        return f"[賞品名{n}数量]"

    @staticmethod
    def prize_pair(n: int) -> str:
        """Name and quantity written back to back, as in the intake form."""
        return f"[賞品名{n}][賞品名{n}数量]"

    @staticmethod
    def step(n: int) -> str:
        return f"[応募方法_STEP{n}]"

    @staticmethod
    def step_label(n: int) -> str:
        return f"STEP{n}："


@dataclass(frozen=True)
class PrizeFraming:
    """
    Prize-count phrasing in the guidelines.

    Several prizes are given away as a set, so the plural form adds のセット.
    The total-winners token stays in Japanese form: framing runs before
    normalization.
    """
    SINGLE: str = "を合計[合計人数]名様にプレゼント"
    PLURAL: str = "のセットを合計[合計人数]名様にプレゼント"
    # SINGLE not already preceded by のセット
    SINGLE_ONLY: str = r"(?<!のセット)を合計\[合計人数\]名様にプレゼント"


@dataclass(frozen=True)
class ContactSentences:
    """
    Contact-method sentences in the guidelines.

    Each DM sentence is swapped verbatim for EMAIL when a campaign takes
    enquiries by email. Punctuation is part of the match.
    """
    X_DM: str = "お問い合わせは、X公式アカウント（[XアカウントID]）へのダイレクトメッセージにてお願いいたします。"
    X_INSTANT_DM: str = (
        "当選に関するお問い合わせは、X公式アカウント（[XアカウントID]）へのダイレクトメッセージにてお願いいたします。"
    )
    IG_DM: str = "お問い合わせは、Instagram公式アカウント（[IGアカウントID]）へのダイレクトメッセージにてお願いいたします。"
    TIKTOK_DM: str = "お問い合わせは、TikTok公式アカウント（[TikTokアカウントID]）へのダイレクトメッセージにてお願いいたします。"
    IG_X_DM: str = (
        "お問い合わせは、Instagram公式アカウント（[IGアカウントID]）またはX公式アカウント（[XアカウントID]）"
        "へのダイレクトメッセージにてお願いいたします。"
    )
    EMAIL: str = "お問い合わせは、[お問い合わせメールアドレス]までメールにてお願いいたします。"


@dataclass(frozen=True)
class DispatchTiming:
    """Winner-notification timing sentence; instant-win campaigns announce on the spot."""
    SCHEDULED: str = "当選者の方には、[DM送付日]頃にダイレクトメッセージにてご連絡いたします。"
    IMMEDIATE: str = "抽選結果は、ご応募後すぐに自動返信のリプライにてお知らせいたします。"


@dataclass(frozen=True)
class NotificationPatterns:
    """Notification-message sentences that depend on the platform."""
    # Instagram files DMs from non-followers under message requests
    MESSAGE_REQUEST_HINT: str = "※今後のご連絡は「メッセージリクエスト」に届く場合がございますので、あわせてご確認ください。"


@dataclass(frozen=True)
class FormPatterns:
    """Intake-form label rewritten per platform."""
    ACCOUNT_NAME_LABEL: str = "Instagramのアカウント名"
    ACCOUNT_NAME_TEMPLATE: str = "{platform_name}のアカウント名"


@dataclass(frozen=True)
class GuidelineHeadings:
    """Section headings of the guidelines templates."""
    OVERVIEW: str = "【キャンペーン概要】"
    PERIOD: str = "【応募期間】"
    HOW_TO_APPLY: str = "【応募方法】"
    PRIZES: str = "【賞品】"
    ANNOUNCEMENT: str = "【当選発表】"
    NOTES: str = "【注意事項】"
    CONTACT: str = "【お問い合わせ】"
