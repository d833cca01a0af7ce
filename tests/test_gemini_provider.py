from unittest.mock import MagicMock, Mock, patch

import httpx
import pytest

from helpdesk.services.llm import GeminiProvider, LLMError


def _mock_client(mock_client_class, status_code=200, payload=None, text=""):
    mock_client = MagicMock()
    mock_client_class.return_value.__enter__.return_value = mock_client
    mock_response = Mock()
    mock_response.status_code = status_code
    mock_response.json.return_value = payload or {}
    mock_response.text = text
    mock_client.post.return_value = mock_response
    return mock_client


class TestGeminiProvider:
    @patch("helpdesk.services.llm.gemini_provider.httpx.Client")
    def test_sends_segments_as_parts(self, mock_client_class):
        mock_client = _mock_client(
            mock_client_class,
            payload={"candidates": [{"content": {"parts": [{"text": "Hello "}, {"text": "there"}]}}]},
        )
        provider = GeminiProvider(api_key="test-key")

        response = provider.generate(["prompt", "history", "message"])

        assert response.content == "Hello there"
        url = mock_client.post.call_args[0][0]
        assert url.endswith("/gemini-2.0-flash:generateContent")
        json_data = mock_client.post.call_args[1]["json"]
        assert [p["text"] for p in json_data["contents"][0]["parts"]] == ["prompt", "history", "message"]
        assert mock_client.post.call_args[1]["headers"]["x-goog-api-key"] == "test-key"

    @patch("helpdesk.services.llm.gemini_provider.httpx.Client")
    def test_model_override(self, mock_client_class):
        mock_client = _mock_client(mock_client_class, payload={"candidates": []})

        response = GeminiProvider(api_key="k").generate(["x"], model="gemini-1.5-pro")

        assert "/gemini-1.5-pro:generateContent" in mock_client.post.call_args[0][0]
        assert response.content == ""

    @patch("helpdesk.services.llm.gemini_provider.httpx.Client")
    def test_raises_on_api_error(self, mock_client_class):
        _mock_client(mock_client_class, status_code=500, text="boom")

        with pytest.raises(LLMError):
            GeminiProvider(api_key="k").generate(["x"])

    @patch("helpdesk.services.llm.gemini_provider.httpx.Client")
    def test_raises_on_transport_error(self, mock_client_class):
        mock_client_class.return_value.__enter__.side_effect = httpx.ConnectError("down")

        with pytest.raises(LLMError):
            GeminiProvider(api_key="k").generate(["x"])
