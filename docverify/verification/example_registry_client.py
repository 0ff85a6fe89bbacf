"""Example registry client.

Use this module as a reference when implementing new registry adapters.
Implement BaseRegistryClient and register the provider in RegistryClientFactory.
"""

from typing import ClassVar

from docverify.fields.models import DocumentRecord
from docverify.verification.models import VerificationDetails
from docverify.verification.registry_base import BaseRegistryClient


class ExampleRegistryClient(BaseRegistryClient):
    """Registry stand-in that reports every check as passing. No network calls."""

    DEFAULT_DETAILS: ClassVar[VerificationDetails] = VerificationDetails(
        registration_status="Registered",
        portal_match=True,
        ownership_verified=True,
        boundaries_confirmed=True,
        tax_status="Current",
    )

    def __init__(self, details: VerificationDetails | None = None) -> None:
        self._details = details or self.DEFAULT_DETAILS

    def verify(self, record: DocumentRecord) -> VerificationDetails:
        _ = record
        return self._details
