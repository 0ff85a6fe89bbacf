from docverify.config.settings import Settings
from docverify.ratelimit import RateLimiter
from docverify.verification.engine import VerificationEngine
from docverify.verification.example_registry_client import ExampleRegistryClient
from docverify.verification.http_registry_client import HttpRegistryClient
from docverify.verification.rate_limited_client import RateLimitedRegistryClient
from docverify.verification.registry_base import BaseRegistryClient


class RegistryClientFactory:
    """Creates the configured registry client."""

    PROVIDERS: tuple[str, ...] = ("example", "http")

    @classmethod
    def create(cls, settings: Settings) -> BaseRegistryClient:
        provider = settings.registry_provider.lower()
        client: BaseRegistryClient
        if provider == "example":
            client = ExampleRegistryClient()
        elif provider == "http":
            client = HttpRegistryClient(
                base_url=settings.registry_base_url,
                timeout_seconds=settings.registry_timeout_seconds,
            )
        else:
            raise ValueError(
                f"Unknown registry provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        if settings.registry_rate_limit_delay_seconds > 0:
            client = RateLimitedRegistryClient(
                client, RateLimiter(settings.registry_rate_limit_delay_seconds)
            )
        return client


def build_verification_engine(settings: Settings) -> VerificationEngine:
    """Build a VerificationEngine wired to the configured registry."""
    return VerificationEngine(
        registry=RegistryClientFactory.create(settings),
        government_survey_numbers=settings.government_survey_numbers,
    )
