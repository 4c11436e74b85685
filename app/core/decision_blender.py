"""
Decision Blender

Turns the heuristic score into a final verdict.

SCORING:
- Rule score: 0-100 (from the heuristic scorer)
- Sentiment score: 0-100 (negative-sentiment confidence, 0 if unavailable)
- Final: round(rule * 0.7 + sentiment * 0.3), capped at 100

RISK TIERS (the decision always follows the tier):
- final > 75  → High Risk   → DO NOT RESPOND
- final > 45  → Medium Risk → VERIFY BEFORE RESPONDING
- otherwise   → Low Risk    → LIKELY SAFE

Example:
    Rule score 100, sentiment unavailable (0)
    - Final: round(100 * 0.7 + 0 * 0.3) = 70
    - Result: Medium Risk, VERIFY BEFORE RESPONDING
"""

import logging

from app.core.sentiment_client import SentimentClient, sentiment_client
from app.models.schemas import AnalysisResult, Decision, RiskTier, Verdict
from app.utils.scoring import (
    HIGH_RISK_THRESHOLD,
    MAX_SCORE,
    MEDIUM_RISK_THRESHOLD,
    round_half_up,
)

logger = logging.getLogger(__name__)

RULE_WEIGHT = 0.7
AUX_WEIGHT = 0.3

# What we tell the user for each tier
TIER_DECISIONS = {
    RiskTier.HIGH: (
        Decision.DO_NOT_RESPOND,
        "This message strongly matches scam behavior patterns. Do not reply, "
        "do not click links, and never share personal or financial details."
    ),
    RiskTier.MEDIUM: (
        Decision.VERIFY,
        "This message contains suspicious elements. Verify the sender "
        "independently before taking any action."
    ),
    RiskTier.LOW: (
        Decision.LIKELY_SAFE,
        "No major scam indicators detected. Still remain cautious while "
        "engaging online."
    ),
}


def risk_tier_for(score: int) -> RiskTier:
    """Boundaries belong to the lower tier: 75 is Medium, 45 is Low."""
    if score > HIGH_RISK_THRESHOLD:
        return RiskTier.HIGH
    if score > MEDIUM_RISK_THRESHOLD:
        return RiskTier.MEDIUM
    return RiskTier.LOW


class DecisionBlender:
    """
    Combines the heuristic result with the sentiment signal.

    Usage:
        blender = DecisionBlender(sentiment_client)
        verdict = await blender.blend(analysis, message)
    """

    def __init__(self, sentiment: SentimentClient):
        self.sentiment = sentiment

    async def blend(self, analysis: AnalysisResult, text: str) -> Verdict:
        """
        Fetch the sentiment score (best effort) and build the verdict.

        Args:
            analysis: Result of HeuristicScorer.analyze(text)
            text: The raw message, sent to the sentiment service

        Returns:
            A fully populated Verdict
        """
        aux_score = await self.sentiment.negative_score(text)
        verdict = self.combine(analysis, aux_score)

        logger.info(
            f"Verdict: score={verdict.final_score} "
            f"(rule={verdict.rule_score}, ai={verdict.aux_score}), "
            f"risk={verdict.risk_tier.value}, type={verdict.scam_type.value}"
        )
        return verdict

    def combine(self, analysis: AnalysisResult, aux_score: int) -> Verdict:
        """Pure part of the blend - no network access."""
        final_score = min(
            round_half_up(analysis.raw_score * RULE_WEIGHT + aux_score * AUX_WEIGHT),
            MAX_SCORE
        )
        tier = risk_tier_for(final_score)
        decision, advice = TIER_DECISIONS[tier]

        return Verdict(
            final_score=final_score,
            rule_score=analysis.raw_score,
            aux_score=aux_score,
            risk_tier=tier,
            scam_type=analysis.scam_type,
            matched_indicators=analysis.matched_indicators,
            decision=decision,
            action_advice=advice,
        )


# Create singleton instance
decision_blender = DecisionBlender(sentiment_client)
