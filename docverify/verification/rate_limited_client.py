from docverify.fields.models import DocumentRecord
from docverify.ratelimit import RateLimiter
from docverify.verification.models import VerificationDetails
from docverify.verification.registry_base import BaseRegistryClient


class RateLimitedRegistryClient(BaseRegistryClient):
    """Delays registry calls so they respect a minimum interval."""

    def __init__(self, client: BaseRegistryClient, limiter: RateLimiter) -> None:
        self._client = client
        self._limiter = limiter

    def verify(self, record: DocumentRecord) -> VerificationDetails:
        self._limiter.wait()
        return self._client.verify(record)
