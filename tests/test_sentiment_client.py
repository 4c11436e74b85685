"""
Tests for app/core/sentiment_client.py

Tests the Hugging Face sentiment wrapper and its fail-open behaviour.
All HTTP traffic is mocked.
"""

import httpx
import pytest
from app.core.sentiment_client import SentimentClient


class TestNegativeScore:
    """Successful responses."""

    @pytest.mark.asyncio
    async def test_flat_negative(self, sentiment_client, mock_http, make_response):
        _, http_client = mock_http
        http_client.post.return_value = make_response(
            json=[{"label": "NEGATIVE", "score": 0.9731}]
        )

        assert await sentiment_client.negative_score("You will be arrested") == 97

    @pytest.mark.asyncio
    async def test_nested_negative(self, sentiment_client, mock_http, make_response):
        """Test the nested shape the inference API returns."""
        _, http_client = mock_http
        http_client.post.return_value = make_response(json=[[
            {"label": "POSITIVE", "score": 0.1},
            {"label": "NEGATIVE", "score": 0.9},
        ]])

        assert await sentiment_client.negative_score("Account blocked") == 90

    @pytest.mark.asyncio
    async def test_positive_is_zero(self, sentiment_client, mock_http, make_response):
        _, http_client = mock_http
        http_client.post.return_value = make_response(json=[[
            {"label": "POSITIVE", "score": 0.99},
            {"label": "NEGATIVE", "score": 0.01},
        ]])

        assert await sentiment_client.negative_score("Have a great day") == 0

    @pytest.mark.asyncio
    async def test_request_format(self, sentiment_client, mock_http, make_response):
        """Test the request body, auth header and timeout."""
        client_cls, http_client = mock_http
        http_client.post.return_value = make_response(
            json=[{"label": "POSITIVE", "score": 0.5}]
        )

        await sentiment_client.negative_score("hello")

        client_cls.assert_called_once_with(timeout=8.0)
        args, kwargs = http_client.post.call_args
        assert args[0] == sentiment_client.model_url
        assert kwargs["json"] == {"inputs": "hello"}
        assert kwargs["headers"]["Authorization"] == "Bearer hf_test_token"


class TestFailOpen:
    """Every failure gives 0 and never raises."""

    @pytest.mark.asyncio
    async def test_missing_token(self, mock_http):
        """Test no request is made without a credential."""
        client_cls, _ = mock_http
        client = SentimentClient(api_token=None)

        assert client.enabled is False
        assert await client.negative_score("Account blocked") == 0
        client_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_token(self, mock_http):
        client_cls, _ = mock_http
        assert await SentimentClient(api_token="").negative_score("x") == 0
        client_cls.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        httpx.ReadTimeout("timed out"),
        httpx.ConnectTimeout("connect timed out"),
        httpx.ConnectError("connection refused"),
    ])
    async def test_network_errors(self, sentiment_client, mock_http, error):
        _, http_client = mock_http
        http_client.post.side_effect = error

        assert await sentiment_client.negative_score("Account blocked") == 0

    @pytest.mark.asyncio
    async def test_http_error_status(self, sentiment_client, mock_http, make_response):
        """Test a 503 (model loading) is treated as unavailable."""
        _, http_client = mock_http
        http_client.post.return_value = make_response(
            503, json={"error": "Model is currently loading"}
        )

        assert await sentiment_client.negative_score("Account blocked") == 0

    @pytest.mark.asyncio
    async def test_unauthorized(self, sentiment_client, mock_http, make_response):
        _, http_client = mock_http
        http_client.post.return_value = make_response(401, json={"error": "Invalid token"})

        assert await sentiment_client.negative_score("Account blocked") == 0

    @pytest.mark.asyncio
    async def test_non_json_body(self, sentiment_client, mock_http, make_response):
        _, http_client = mock_http
        http_client.post.return_value = make_response(text="<html>oops</html>")

        assert await sentiment_client.negative_score("Account blocked") == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [
        {"label": "NEGATIVE", "score": 0.9},     # not a list
        [],                                        # empty
        [{"score": 0.9}],                          # no label
        [[]],                                      # empty nested list
        [["NEGATIVE"]],                            # nested junk
        [{"label": "NEGATIVE"}],                   # no score
        [{"label": "NEGATIVE", "score": "0.9"}],   # score not a number
        [{"label": "NEGATIVE", "score": 1.7}],     # score out of range
        [{"label": "NEGATIVE", "score": True}],    # bool is not a score
        ["NEGATIVE"],                              # prediction not an object
    ])
    async def test_malformed_payloads(self, sentiment_client, mock_http, make_response, payload):
        _, http_client = mock_http
        http_client.post.return_value = make_response(json=payload)

        assert await sentiment_client.negative_score("Account blocked") == 0

    @pytest.mark.asyncio
    async def test_unexpected_error(self, sentiment_client, mock_http):
        _, http_client = mock_http
        http_client.post.side_effect = RuntimeError("boom")

        assert await sentiment_client.negative_score("Account blocked") == 0
