"""
Hugging Face Sentiment Client

This file wraps the Hugging Face Inference API so the rest of the code
only has to ask one question: "how negative does this message sound?"

WHY SENTIMENT?
Scam messages are often threatening or fear-driven ("your account will
be blocked"). A sentiment model catches that tone even when none of our
keywords match. It is only a helper signal (30% of the final score).

FAIL-OPEN:
This call is best effort. No token, a timeout, a network error or a
strange response all give a score of 0 and the rule engine carries on
alone. Nothing here ever raises to the caller, and there are no retries.

RESPONSE SHAPES WE ACCEPT:
    [{"label": "NEGATIVE", "score": 0.98}]
    [[{"label": "NEGATIVE", "score": 0.98}, {"label": "POSITIVE", "score": 0.02}]]
"""

import logging
import httpx
from typing import Any, Optional

from app.config import settings
from app.utils.scoring import round_half_up

logger = logging.getLogger(__name__)

NEGATIVE_LABEL = "NEGATIVE"


class SentimentUnavailable(Exception):
    """The sentiment service gave no usable answer."""


class SentimentClient:
    """
    Client for the negative-sentiment signal.

    Usage:
        client = SentimentClient(api_token="hf_...")
        score = await client.negative_score("Your account is blocked!")
        # 0-100, or 0 if the service is unavailable
    """

    def __init__(
        self,
        api_token: Optional[str],
        model_url: str = settings.SENTIMENT_MODEL_URL,
        timeout: float = settings.SENTIMENT_TIMEOUT_SECONDS
    ):
        self.api_token = api_token
        self.model_url = model_url
        self.timeout = timeout

        if api_token:
            logger.info(f"Sentiment client initialized with model: {model_url}")
        else:
            logger.info("No HF_TOKEN configured - sentiment check disabled")

    @property
    def enabled(self) -> bool:
        return bool(self.api_token)

    async def negative_score(self, message: str) -> int:
        """
        Get the negative-sentiment confidence for a message.

        Args:
            message: The raw message text

        Returns:
            round(confidence * 100) if the model says NEGATIVE, else 0

        Example:
            >>> await client.negative_score("You will be arrested today!")
            97
        """
        if not self.enabled:
            return 0

        try:
            data = await self._classify(message)
            return self._negative_confidence(data)

        except httpx.TimeoutException:
            logger.warning("Sentiment request timed out - using rule engine only")
        except httpx.HTTPError as e:
            logger.warning(f"Sentiment request failed ({e}) - using rule engine only")
        except (SentimentUnavailable, ValueError) as e:
            logger.warning(f"Unusable sentiment response ({e}) - using rule engine only")
        except Exception as e:
            logger.error(f"Unexpected sentiment error: {e} - using rule engine only")

        return 0

    async def _classify(self, message: str) -> Any:
        """Send one request to the inference API and return the decoded JSON."""
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                self.model_url,
                json={"inputs": message},
                headers={"Authorization": f"Bearer {self.api_token}"}
            )
            response.raise_for_status()
            return response.json()

    def _negative_confidence(self, data: Any) -> int:
        """
        Turn the API response into a 0-100 score.

        Raises SentimentUnavailable when the response does not look
        like a classification result.
        """
        if not isinstance(data, list) or not data:
            raise SentimentUnavailable("expected a non-empty list")

        prediction = data[0]

        # Text classification usually comes back nested: [[{...}, {...}]]
        if isinstance(prediction, list):
            prediction = self._top_prediction(prediction)

        if not isinstance(prediction, dict) or "label" not in prediction:
            raise SentimentUnavailable("prediction has no label")

        if prediction["label"] != NEGATIVE_LABEL:
            return 0

        confidence = prediction.get("score")
        if not self._is_confidence(confidence):
            raise SentimentUnavailable(f"bad confidence: {confidence!r}")

        return round_half_up(confidence * 100)

    def _top_prediction(self, predictions: list) -> Optional[dict]:
        """Pick the highest-scoring entry from a nested response."""
        scored = [
            p for p in predictions
            if isinstance(p, dict) and self._is_confidence(p.get("score"))
        ]
        if not scored:
            return None
        return max(scored, key=lambda p: p["score"])

    @staticmethod
    def _is_confidence(value: Any) -> bool:
        return (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and 0.0 <= value <= 1.0
        )


# Create a singleton instance
sentiment_client = SentimentClient(api_token=settings.HF_TOKEN)
