from typing import ClassVar

from docverify.config.settings import Settings
from docverify.generation.client_base import BaseGenerationClient
from docverify.generation.example_client_adapter import ExampleClientAdapter
from docverify.generation.models import GenerationParams
from docverify.generation.openai_client_adapter import OpenAIClientAdapter
from docverify.generation.rate_limited_client import RateLimitedGenerationClient
from docverify.ratelimit import RateLimiter


class GenerationClientFactory:
    """Creates the configured text-generation client, or None when disabled."""

    DISABLED_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"", "none"})

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
        "huggingface": "https://router.huggingface.co/v1",
    }

    @classmethod
    def is_enabled(cls, settings: Settings) -> bool:
        return settings.generation_provider.strip().lower() not in cls.DISABLED_PROVIDERS

    @classmethod
    def create(cls, settings: Settings) -> BaseGenerationClient | None:
        """Create a configured client from application settings."""
        provider = settings.generation_provider.strip().lower()
        if provider in cls.DISABLED_PROVIDERS:
            return None
        client: BaseGenerationClient
        if provider == "example":
            client = ExampleClientAdapter()
        else:
            client = OpenAIClientAdapter(
                api_key=settings.generation_api_key,
                model=settings.generation_model_name,
                timeout_seconds=settings.generation_timeout_seconds,
                base_url=cls._resolve_base_url(provider, settings),
            )
        if settings.generation_rate_limit_delay_seconds > 0:
            client = RateLimitedGenerationClient(
                client, RateLimiter(settings.generation_rate_limit_delay_seconds)
            )
        return client

    @classmethod
    def params(cls, settings: Settings) -> GenerationParams:
        return GenerationParams(
            max_tokens=settings.generation_max_tokens,
            temperature=settings.generation_temperature,
            top_p=settings.generation_top_p,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.generation_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "generation_base_url is required for generation_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "none",
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown generation provider '{provider}'. Choose from: {supported}"
        )
