from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from docverify.generation.exceptions import GenerationError, GenerationNetworkError
from docverify.generation.models import GenerationParams
from docverify.generation.openai_client_adapter import OpenAIClientAdapter


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _adapter(mock_client: MagicMock, system_prompt: str = "") -> OpenAIClientAdapter:
    with patch(
        "docverify.generation.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        return OpenAIClientAdapter(
            api_key="k",
            model="m",
            timeout_seconds=30,
            base_url=None,
            system_prompt=system_prompt,
        )


class TestOpenAIClientAdapter:
    def test_returns_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("CONTENT: ok")
        result = _adapter(mock_client).generate("prompt", GenerationParams())
        assert result.text == "CONTENT: ok"

    def test_passes_sampling_parameters(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("ok")
        params = GenerationParams(max_tokens=400, temperature=0.7, top_p=0.8)

        _adapter(mock_client).generate("question", params)

        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "m"
        assert kwargs["max_tokens"] == 400
        assert kwargs["temperature"] == 0.7
        assert kwargs["top_p"] == 0.8
        assert kwargs["messages"] == [{"role": "user", "content": "question"}]

    def test_prepends_system_prompt(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("ok")
        _adapter(mock_client, system_prompt="You are an analyst").generate("q", GenerationParams())
        messages = mock_client.chat.completions.create.call_args.kwargs["messages"]
        assert messages[0] == {"role": "system", "content": "You are an analyst"}

    def test_raises_error_for_empty_content(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("   ")
        with pytest.raises(GenerationError, match="empty response"):
            _adapter(mock_client).generate("prompt", GenerationParams())

    def test_raises_error_for_no_choices(self) -> None:
        mock_client = MagicMock()
        response = MagicMock()
        response.choices = []
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(GenerationError, match="no choices"):
            _adapter(mock_client).generate("prompt", GenerationParams())

    def test_raises_network_error_on_connection_failure(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=MagicMock()
        )
        with pytest.raises(GenerationNetworkError, match="network error"):
            _adapter(mock_client).generate("prompt", GenerationParams())

    def test_raises_network_error_on_timeout(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(GenerationNetworkError, match="network error"):
            _adapter(mock_client).generate("prompt", GenerationParams())

    def test_raises_network_error_on_api_error(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIError(
            message="server error",
            request=MagicMock(),
            body=None,
        )
        with pytest.raises(GenerationNetworkError, match="API error"):
            _adapter(mock_client).generate("prompt", GenerationParams())
