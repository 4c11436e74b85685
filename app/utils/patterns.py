"""
Indicator Lexicons and Structural Patterns for Scam Detection

This file contains:
1. INDICATOR LEXICONS - Groups of trigger phrases, each group with one weight
2. STRUCTURAL PATTERNS - Signals that are not single words (links, caps, etc.)

Everything here is read-only. The scorer never changes these at runtime,
so many requests can use them at the same time without any locking.

HOW MATCHING WORKS:
Matching is plain substring search on the lowercased message.
"Your OTP is 1234" contains "otp" → the financial lexicon fires.
Note that "now" also matches inside "know" - this is accepted behaviour.
"""

import re
from dataclasses import dataclass
from typing import Callable, Tuple


# ============================================================
# INDICATOR LEXICONS
# ============================================================

@dataclass(frozen=True)
class IndicatorLexicon:
    """
    A named category of scam signal.

    Every phrase found in the message adds `weight` to the score once,
    no matter how many times the phrase repeats.
    """
    name: str
    weight: int
    phrases: Tuple[str, ...]


URGENCY = IndicatorLexicon(
    name="urgency",
    weight=15,
    phrases=("urgent", "immediately", "now", "hurry"),
)

THREAT = IndicatorLexicon(
    name="threat",
    weight=20,
    phrases=("blocked", "suspended", "terminated", "deactivated"),
)

# Any match here makes the message a phishing scam (highest priority)
FINANCIAL = IndicatorLexicon(
    name="financial",
    weight=20,
    phrases=("bank", "account", "otp", "kyc", "upi", "loan"),
)

PERSONAL_INFO = IndicatorLexicon(
    name="personal-info",
    weight=25,
    phrases=("password", "pin", "cvv", "verify"),
)

INVESTMENT_SCAM = IndicatorLexicon(
    name="investment-scam",
    weight=25,
    phrases=(
        "multibagger",
        "guaranteed",
        "double",
        "profit",
        "returns",
        "stock tip",
        "investment",
        "crypto",
        "high returns",
        "limited seats",
        "pump",
        "go up",
        "target price",
    ),
)

SOCIAL_MANIPULATION = IndicatorLexicon(
    name="social-manipulation",
    weight=20,
    phrases=(
        "join free",
        "whatsapp group",
        "telegram group",
        "no advance payment",
    ),
)

INDICATOR_LEXICONS: Tuple[IndicatorLexicon, ...] = (
    URGENCY,
    THREAT,
    FINANCIAL,
    PERSONAL_INFO,
    INVESTMENT_SCAM,
    SOCIAL_MANIPULATION,
)

# Not a lexicon of its own - only used to label lottery scams
LOTTERY_KEYWORD = "lottery"


# ============================================================
# STRUCTURAL PATTERNS
# ============================================================

# URL/Link Pattern
# Matches: http://... or https://... followed by anything up to whitespace
URL_PATTERN = r'https?://\S+'

# WhatsApp group invites look like chat.whatsapp.com/AbCdEf
WHATSAPP_INVITE_DOMAIN = "chat.whatsapp.com"

# Unrealistic returns
# Matches: "50%", "200 +", "10 to 20"
# Breaking it down:
#   \d\s*[%+]           = a number followed by % or + (its last digit is enough,
#                         so long digit runs are scanned in linear time)
#   \b\d+\s*to\s*\d     = "N to M" ranges ("5 to 10x")
RETURNS_PATTERN = r'\d\s*[%+]|\b\d+\s*to\s*\d'

# Shouting only counts on messages longer than this
MIN_CAPS_LENGTH = 15


@dataclass(frozen=True)
class StructuralPattern:
    """
    A non-lexical scam signal.

    `check` receives (original_text, lowercased_text) and returns True
    when the signal is present.
    """
    label: str
    weight: int
    check: Callable[[str, str], bool]


def _has_link(original: str, lowered: str) -> bool:
    return re.search(URL_PATTERN, lowered) is not None


def _has_whatsapp_invite(original: str, lowered: str) -> bool:
    return WHATSAPP_INVITE_DOMAIN in lowered


def _has_returns_pattern(original: str, lowered: str) -> bool:
    return re.search(RETURNS_PATTERN, lowered) is not None


def _is_all_caps(original: str, lowered: str) -> bool:
    # "123 !!!" == "123 !!!".upper(), so digits and symbols count as caps too
    return original == original.upper() and len(original) > MIN_CAPS_LENGTH


STRUCTURAL_PATTERNS: Tuple[StructuralPattern, ...] = (
    StructuralPattern("Suspicious Link", 25, _has_link),
    StructuralPattern("WhatsApp Invite Link", 30, _has_whatsapp_invite),
    StructuralPattern("Unrealistic Returns Pattern", 20, _has_returns_pattern),
    StructuralPattern("Excessive Capitalization", 10, _is_all_caps),
)
