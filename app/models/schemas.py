"""
Pydantic Schemas for ScamShield API

This file defines the "shape" of data flowing through our API.
Think of these as CONTRACTS that specify:
- What data we EXPECT to receive
- What data we PROMISE to send back

There are two kinds of schema here:
- API schemas (camelCase) - what the web client sends and reads
- Internal results (snake_case) - what the scoring engine passes around
"""

from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


# ============================================================
# ENUMS - Fixed sets of labels
# ============================================================

class ScamType(str, Enum):
    """Scam category, chosen by fixed priority (not by score)."""
    PHISHING = "Phishing Scam"
    INVESTMENT = "Investment Scam"
    LOTTERY = "Lottery Scam"
    GENERAL = "General Scam"


class RiskTier(str, Enum):
    LOW = "Low Risk"
    MEDIUM = "Medium Risk"
    HIGH = "High Risk"


class Decision(str, Enum):
    LIKELY_SAFE = "LIKELY SAFE"
    VERIFY = "VERIFY BEFORE RESPONDING"
    DO_NOT_RESPOND = "DO NOT RESPOND"


# ============================================================
# INTERNAL RESULTS - Produced by the scoring engine
# ============================================================

class AnalysisResult(BaseModel):
    """
    Output of the heuristic scorer for one message.

    Example:
    {
        "raw_score": 100,
        "matched_indicators": ["immediately", "blocked", "account", "otp", "verify"],
        "scam_type": "Phishing Scam"
    }
    """
    model_config = ConfigDict(frozen=True)

    raw_score: int = Field(..., ge=0, le=100)
    matched_indicators: Tuple[str, ...] = ()
    scam_type: ScamType = ScamType.GENERAL


class Verdict(BaseModel):
    """
    Final decision for one message.

    Built from an AnalysisResult plus the auxiliary sentiment score.
    Lives only as long as the request that produced it.
    """
    model_config = ConfigDict(frozen=True)

    final_score: int = Field(..., ge=0, le=100)
    rule_score: int = Field(..., ge=0, le=100)
    aux_score: int = Field(..., ge=0, le=100)
    risk_tier: RiskTier
    scam_type: ScamType
    matched_indicators: Tuple[str, ...] = ()
    decision: Decision
    action_advice: str

    @property
    def confidence(self) -> str:
        """Human readable confidence, e.g. "82%"."""
        return f"{self.final_score}%"


# ============================================================
# REQUEST SCHEMAS - What the web client sends
# ============================================================

class AnalyzeRequest(BaseModel):
    """
    Body of POST /analyze.

    Example:
    {
        "message": "Your account will be blocked, verify your OTP immediately"
    }

    `message` is optional here on purpose: the endpoint answers a
    missing or empty message with 400, not with a validation error.
    """
    message: Optional[str] = Field(
        default=None,
        description="The text message to analyze"
    )


# ============================================================
# RESPONSE SCHEMAS - What we send back
# ============================================================

class AnalyzeResponse(BaseModel):
    """
    Verdict in the format the web client reads.

    Example:
    {
        "score": 70,
        "ruleScore": 100,
        "aiScore": 0,
        "riskLevel": "Medium Risk",
        "scamType": "Phishing Scam",
        "flaggedWords": ["immediately", "blocked", "account", "otp", "verify"],
        "decision": "VERIFY BEFORE RESPONDING",
        "actionAdvice": "This message contains suspicious elements. ...",
        "responseConfidence": "70%"
    }
    """
    score: int = Field(..., description="Final blended score (0-100)")
    ruleScore: int = Field(..., description="Heuristic score (0-100)")
    aiScore: int = Field(..., description="Negative sentiment score (0-100)")
    riskLevel: RiskTier
    scamType: ScamType
    flaggedWords: List[str] = Field(
        default_factory=list,
        description="Matched phrases and structural signals"
    )
    decision: Decision
    actionAdvice: str
    responseConfidence: str

    @classmethod
    def from_verdict(cls, verdict: Verdict) -> "AnalyzeResponse":
        return cls(
            score=verdict.final_score,
            ruleScore=verdict.rule_score,
            aiScore=verdict.aux_score,
            riskLevel=verdict.risk_tier,
            scamType=verdict.scam_type,
            flaggedWords=list(verdict.matched_indicators),
            decision=verdict.decision,
            actionAdvice=verdict.action_advice,
            responseConfidence=verdict.confidence,
        )
