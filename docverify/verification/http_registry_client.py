from typing import Any

import httpx

from docverify.fields.models import DocumentRecord
from docverify.history.serializer import record_to_dict
from docverify.verification.exceptions import (
    RegistryUnavailableError,
    RegistryVerificationError,
)
from docverify.verification.models import VerificationDetails
from docverify.verification.registry_base import BaseRegistryClient


class HttpRegistryClient(BaseRegistryClient):
    """Registry client that POSTs the record to ``{base_url}/verify`` over HTTP."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    def verify(self, record: DocumentRecord) -> VerificationDetails:
        payload = record_to_dict(record)
        payload.pop("rawText", None)
        try:
            response = self._client.post("/verify", json=payload)
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise RegistryUnavailableError(f"Registry network error: {exc}") from exc
        except httpx.HTTPError as exc:
            raise RegistryUnavailableError(f"Registry transport error: {exc}") from exc

        if response.status_code >= 500:
            raise RegistryUnavailableError(
                f"Registry unavailable: HTTP {response.status_code}"
            )
        if response.status_code >= 400:
            raise RegistryVerificationError(
                f"Registry rejected verification: HTTP {response.status_code}"
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise RegistryVerificationError(f"Invalid registry response: {exc}") from exc
        return _build_details(data)

    def close(self) -> None:
        self._client.close()


def _build_details(data: Any) -> VerificationDetails:
    if not isinstance(data, dict):
        raise RegistryVerificationError("Registry response must be an object")
    for name in ("portalMatch", "ownershipVerified", "boundariesConfirmed"):
        if not isinstance(data.get(name), bool):
            raise RegistryVerificationError(f"Registry response '{name}' must be a boolean")
    registration_status = data.get("registrationStatus")
    if registration_status is not None and not isinstance(registration_status, str):
        raise RegistryVerificationError("Registry response 'registrationStatus' must be a string")
    tax_status = data.get("taxStatus")
    if not isinstance(tax_status, str):
        raise RegistryVerificationError("Registry response 'taxStatus' must be a string")
    return VerificationDetails(
        registration_status=registration_status or "",
        portal_match=data["portalMatch"],
        ownership_verified=data["ownershipVerified"],
        boundaries_confirmed=data["boundariesConfirmed"],
        tax_status=tax_status,
    )
