import httpx
import openai

from docverify.generation.client_base import BaseGenerationClient
from docverify.generation.exceptions import GenerationError, GenerationNetworkError
from docverify.generation.models import GenerationParams, GenerationResult


class OpenAIClientAdapter(BaseGenerationClient):
    """Text-generation client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
        system_prompt: str = "",
    ) -> None:
        self._model = model
        self._system_prompt = system_prompt
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate(self, prompt: str, params: GenerationParams) -> GenerationResult:
        messages = []
        if self._system_prompt:
            messages.append({"role": "system", "content": self._system_prompt})
        messages.append({"role": "user", "content": prompt})
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                max_tokens=params.max_tokens,
                temperature=params.temperature,
                top_p=params.top_p,
                messages=messages,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise GenerationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise GenerationError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None or not content.strip():
            raise GenerationError("AI returned empty response")
        return GenerationResult(text=content)
