"""
Heuristic Scam Scoring Module

This module gives every message a rule-based scam score from 0 to 100.
It never calls the network and always gives the same answer for the same text.

HOW IT SCORES:
1. Lexicons - each phrase found adds its lexicon's weight (once per phrase)
2. Structural patterns - links, WhatsApp invites, "50%" style returns, SHOUTING
3. Total is capped at 100

HOW IT PICKS THE SCAM TYPE (fixed priority, not by score):
- any financial phrase      → Phishing Scam
- any investment phrase     → Investment Scam
- the word "lottery"        → Lottery Scam
- otherwise                 → General Scam

Example:
    "Your account will be blocked, verify your OTP immediately"
    - urgency:       immediately        +15
    - threat:        blocked            +20
    - financial:     account, otp       +40
    - personal-info: verify             +25
    - Total: 100 → Phishing Scam
"""

import logging
from typing import Iterable, Optional, Tuple

from app.models.schemas import AnalysisResult, ScamType
from app.utils.patterns import (
    FINANCIAL,
    INDICATOR_LEXICONS,
    INVESTMENT_SCAM,
    LOTTERY_KEYWORD,
    STRUCTURAL_PATTERNS,
    IndicatorLexicon,
    StructuralPattern,
)
from app.utils.scoring import MAX_SCORE, MEDIUM_RISK_THRESHOLD

logger = logging.getLogger(__name__)


class HeuristicScorer:
    """
    Rule-based scam scorer.

    Usage:
        scorer = HeuristicScorer()
        result = scorer.analyze("WIN FREE CRYPTO NOW!!!")
        print(result.raw_score, result.scam_type, result.matched_indicators)
    """

    def __init__(
        self,
        lexicons: Optional[Iterable[IndicatorLexicon]] = None,
        structural_patterns: Optional[Iterable[StructuralPattern]] = None
    ):
        """Initialize the scorer (defaults to the built-in lexicons)."""
        self.lexicons = tuple(lexicons) if lexicons is not None else INDICATOR_LEXICONS
        self.structural_patterns = (
            tuple(structural_patterns)
            if structural_patterns is not None
            else STRUCTURAL_PATTERNS
        )

    def analyze(self, text: str) -> AnalysisResult:
        """
        Score a message.

        Args:
            text: The message to analyze (empty strings are fine)

        Returns:
            AnalysisResult with raw_score, matched_indicators and scam_type

        Example:
            >>> scorer.analyze("Hello, how are you today?")
            AnalysisResult(raw_score=0, matched_indicators=(), scam_type=<ScamType.GENERAL: 'General Scam'>)
        """
        lowered = text.lower()
        score = 0
        # dict keeps insertion order and drops duplicates
        matched = {}
        matched_lexicons = set()

        # Step 1: Lexicon phrases
        for lexicon in self.lexicons:
            for phrase in lexicon.phrases:
                if phrase in lowered:
                    score += lexicon.weight
                    matched[phrase] = None
                    matched_lexicons.add(lexicon.name)

        # Step 2: Structural patterns (independent, additive)
        for pattern in self.structural_patterns:
            if pattern.check(text, lowered):
                score += pattern.weight
                matched[pattern.label] = None

        # Step 3: Cap (weights are never negative, so no floor needed)
        score = min(score, MAX_SCORE)

        scam_type = self._classify(lowered, matched_lexicons)

        logger.debug(f"Heuristic score: {score}, indicators: {list(matched)}")

        return AnalysisResult(
            raw_score=score,
            matched_indicators=tuple(matched),
            scam_type=scam_type,
        )

    def _classify(self, lowered: str, matched_lexicons: set) -> ScamType:
        """
        Pick the scam type by fixed priority.

        Only whether a lexicon matched at all matters here, not how
        much it added to the score.
        """
        if FINANCIAL.name in matched_lexicons:
            return ScamType.PHISHING
        if INVESTMENT_SCAM.name in matched_lexicons:
            return ScamType.INVESTMENT
        if LOTTERY_KEYWORD in lowered:
            return ScamType.LOTTERY
        return ScamType.GENERAL

    def quick_check(self, text: str) -> Tuple[bool, int]:
        """
        Rule-only check, without the sentiment call.

        Returns:
            (might_be_scam, score): True when the rule score alone
            would already be Medium risk or higher
        """
        result = self.analyze(text)
        return result.raw_score > MEDIUM_RISK_THRESHOLD, result.raw_score


# Create singleton instance
heuristic_scorer = HeuristicScorer()
