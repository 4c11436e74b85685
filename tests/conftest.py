"""
Pytest Configuration and Fixtures

This file contains shared fixtures used across all tests.
"""

import pytest
import httpx
from unittest.mock import AsyncMock, MagicMock, patch

from app.core.decision_blender import DecisionBlender
from app.core.scam_detector import HeuristicScorer
from app.core.sentiment_client import SentimentClient

TEST_MODEL_URL = "https://inference.example.com/models/sentiment"


@pytest.fixture
def scorer():
    """Create a HeuristicScorer with the built-in lexicons."""
    return HeuristicScorer()


@pytest.fixture
def fake_sentiment():
    """A sentiment client stand-in that returns a fixed score (0 by default)."""
    mock = MagicMock(spec=SentimentClient)
    mock.negative_score = AsyncMock(return_value=0)
    mock.enabled = True
    return mock


@pytest.fixture
def blender(fake_sentiment):
    """DecisionBlender wired to the fake sentiment client."""
    return DecisionBlender(fake_sentiment)


@pytest.fixture
def sentiment_client():
    """A real SentimentClient with a token, pointing at a fake URL."""
    return SentimentClient(
        api_token="hf_test_token",
        model_url=TEST_MODEL_URL,
        timeout=8.0
    )


@pytest.fixture
def mock_http():
    """
    Patch httpx.AsyncClient used by the sentiment client.

    Yields (client_class_mock, http_client_mock). Configure
    http_client_mock.post to return a response or raise.
    """
    http_client = AsyncMock()
    with patch("app.core.sentiment_client.httpx.AsyncClient") as client_cls:
        client_cls.return_value.__aenter__.return_value = http_client
        client_cls.return_value.__aexit__.return_value = False
        yield client_cls, http_client


@pytest.fixture
def make_response():
    """Factory for httpx.Response objects as the inference API would send them."""
    def _make(status_code=200, **kwargs) -> httpx.Response:
        return httpx.Response(
            status_code,
            request=httpx.Request("POST", TEST_MODEL_URL),
            **kwargs
        )
    return _make


@pytest.fixture
def sample_scam_messages():
    """Collection of scam messages for testing."""
    return [
        "Your account will be blocked, verify your OTP immediately",
        "GUARANTEED returns! Join our WhatsApp group for stock tips, 50% profit in 2 days",
        "WIN FREE CRYPTO NOW!!!",
        "KYC update pending. Click https://fake-bank.example.com/kyc urgently",
        "Multibagger stock tip! Target price will go up 5 to 10 times. Join free: https://chat.whatsapp.com/AbC123",
        "Share your card PIN and CVV to stop your loan account being suspended",
    ]


@pytest.fixture
def sample_legitimate_messages():
    """Collection of non-scam messages for testing."""
    return [
        "Hello, how are you today?",
        "Can you help me with my order?",
        "What time does your store close?",
        "Thank you for your help yesterday.",
        "I'm looking for information about your services.",
    ]
