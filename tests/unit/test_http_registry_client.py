import json

import httpx
import pytest

from docverify.exceptions import ServiceUnavailableError
from docverify.fields.models import DocumentRecord
from docverify.verification.exceptions import (
    RegistryUnavailableError,
    RegistryVerificationError,
)
from docverify.verification.http_registry_client import HttpRegistryClient

PASSING = {
    "registrationStatus": "Registered",
    "portalMatch": True,
    "ownershipVerified": True,
    "boundariesConfirmed": True,
    "taxStatus": "Current",
}


def _client(handler) -> HttpRegistryClient:  # type: ignore[no-untyped-def]
    return HttpRegistryClient(
        base_url="https://registry.test",
        timeout_seconds=5,
        transport=httpx.MockTransport(handler),
    )


class TestHttpRegistryClient:
    def test_posts_record_without_raw_text(self, land_record: DocumentRecord) -> None:
        seen: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=PASSING)

        details = _client(handler).verify(land_record)

        assert seen["url"] == "https://registry.test/verify"
        assert seen["body"]["surveyNumber"] == "SF No. 312/4"
        assert "rawText" not in seen["body"]
        assert details.registration_status == "Registered"
        assert details.portal_match is True

    def test_null_registration_status_becomes_empty(self, land_record: DocumentRecord) -> None:
        payload = dict(PASSING, registrationStatus=None)
        details = _client(lambda request: httpx.Response(200, json=payload)).verify(land_record)
        assert details.registration_status == ""

    def test_server_error_is_service_unavailable(self, land_record: DocumentRecord) -> None:
        client = _client(lambda request: httpx.Response(503))
        with pytest.raises(RegistryUnavailableError, match="HTTP 503") as exc_info:
            client.verify(land_record)
        assert isinstance(exc_info.value, ServiceUnavailableError)

    def test_connection_error_is_service_unavailable(self, land_record: DocumentRecord) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(RegistryUnavailableError, match="network error"):
            _client(handler).verify(land_record)

    def test_client_error_is_verification_failure(self, land_record: DocumentRecord) -> None:
        client = _client(lambda request: httpx.Response(404))
        with pytest.raises(RegistryVerificationError, match="HTTP 404"):
            client.verify(land_record)

    def test_invalid_json_is_verification_failure(self, land_record: DocumentRecord) -> None:
        client = _client(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(RegistryVerificationError, match="Invalid registry response"):
            client.verify(land_record)

    def test_wrong_field_type_is_verification_failure(self, land_record: DocumentRecord) -> None:
        payload = dict(PASSING, portalMatch="yes")
        client = _client(lambda request: httpx.Response(200, json=payload))
        with pytest.raises(RegistryVerificationError, match="portalMatch"):
            client.verify(land_record)
