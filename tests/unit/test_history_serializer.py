import pytest

from docverify.fields.models import DocumentRecord
from docverify.history.exceptions import HistorySerializationError
from docverify.history.serializer import (
    KIND_CONTRACT,
    KIND_VERIFICATION,
    from_payload,
    record_to_dict,
    to_payload,
    verification_to_dict,
)
from docverify.report.models import ContractAnalysis
from docverify.sections.models import Alert, AlertLevel, SectionAnalysis
from docverify.verification.models import VerificationResult


def _contract() -> ContractAnalysis:
    return ContractAnalysis(
        id="c-1",
        name="lease.pdf",
        extracted_text="The tenant shall pay rent monthly.",
        summary="Lease summary.",
        key_points=["Rent is monthly"],
        sections=[
            SectionAnalysis(
                title="Payment Terms",
                key="payment",
                content="Rent is due monthly.",
                alerts=[Alert("Late fee is high", AlertLevel.WARNING, "payment")],
                confidence=85,
                has_content=True,
            )
        ],
    )


class TestToPayload:
    def test_verification_uses_camel_case_keys(
        self, verification_result: VerificationResult
    ) -> None:
        kind, payload = to_payload(verification_result)
        assert kind == KIND_VERIFICATION
        assert payload["documentName"] == "patta.pdf"
        assert payload["isLegal"] is True
        assert payload["verificationDetails"]["taxStatus"] == "Current"

    def test_contract_alert_level_is_string(self) -> None:
        kind, payload = to_payload(_contract())
        assert kind == KIND_CONTRACT
        assert payload["keyPoints"] == ["Rent is monthly"]
        assert payload["sections"][0]["alerts"][0]["level"] == "warning"
        assert payload["sections"][0]["hasContent"] is True

    def test_unsupported_entry_type(self) -> None:
        with pytest.raises(HistorySerializationError, match="Unsupported history entry type"):
            to_payload("not an entry")  # type: ignore[arg-type]

    def test_record_includes_raw_text(self, land_record: DocumentRecord) -> None:
        data = record_to_dict(land_record)
        assert data["surveyNumber"] == "SF No. 312/4"
        assert data["rawText"] == land_record.raw_text


class TestFromPayload:
    def test_verification_round_trip(self, verification_result: VerificationResult) -> None:
        kind, payload = to_payload(verification_result)
        assert from_payload(kind, payload) == verification_result

    def test_contract_round_trip(self) -> None:
        contract = _contract()
        kind, payload = to_payload(contract)
        assert from_payload(kind, payload) == contract

    def test_unknown_kind(self) -> None:
        with pytest.raises(HistorySerializationError, match="Unknown history kind"):
            from_payload("invoice", {})

    def test_payload_must_be_object(self) -> None:
        with pytest.raises(HistorySerializationError, match="must be an object"):
            from_payload(KIND_VERIFICATION, ["not", "a", "dict"])

    def test_missing_field(self, verification_result: VerificationResult) -> None:
        payload = verification_to_dict(verification_result)
        del payload["owner"]
        with pytest.raises(HistorySerializationError, match="'owner' must be a string"):
            from_payload(KIND_VERIFICATION, payload)

    def test_boolean_confidence_is_rejected(
        self, verification_result: VerificationResult
    ) -> None:
        payload = verification_to_dict(verification_result)
        payload["confidence"] = True
        with pytest.raises(HistorySerializationError, match="'confidence' must be an integer"):
            from_payload(KIND_VERIFICATION, payload)

    def test_discrepancies_must_be_strings(
        self, verification_result: VerificationResult
    ) -> None:
        payload = verification_to_dict(verification_result)
        payload["discrepancies"] = [1, 2]
        with pytest.raises(HistorySerializationError, match="list of strings"):
            from_payload(KIND_VERIFICATION, payload)

    def test_invalid_alert_level(self) -> None:
        _, payload = to_payload(_contract())
        payload["sections"][0]["alerts"][0]["level"] = "fatal"
        with pytest.raises(HistorySerializationError, match="invalid alert level 'fatal'"):
            from_payload(KIND_CONTRACT, payload)

    def test_sections_must_be_list(self) -> None:
        _, payload = to_payload(_contract())
        payload["sections"] = None
        with pytest.raises(HistorySerializationError, match="'sections' must be a list"):
            from_payload(KIND_CONTRACT, payload)
