from docverify.generation.client_base import BaseGenerationClient
from docverify.generation.models import GenerationParams, GenerationResult
from docverify.ratelimit import RateLimiter


class RateLimitedGenerationClient(BaseGenerationClient):
    """Delays calls to the wrapped client so they respect a minimum interval."""

    def __init__(self, client: BaseGenerationClient, limiter: RateLimiter) -> None:
        self._client = client
        self._limiter = limiter

    def generate(self, prompt: str, params: GenerationParams) -> GenerationResult:
        self._limiter.wait()
        return self._client.generate(prompt, params)
