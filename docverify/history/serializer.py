"""Maps domain records to and from their persisted camelCase form.

Field names here are the serialized contract read by history views and
downloads; they must not change.
"""

from typing import Any

from docverify.fields.models import DocumentRecord
from docverify.history.exceptions import HistorySerializationError
from docverify.report.models import ContractAnalysis
from docverify.sections.models import Alert, AlertLevel, SectionAnalysis
from docverify.verification.models import VerificationDetails, VerificationResult

KIND_VERIFICATION = "verification"
KIND_CONTRACT = "contract"

HistoryEntry = VerificationResult | ContractAnalysis


def record_to_dict(record: DocumentRecord) -> dict[str, Any]:
    return {
        "documentType": record.document_type,
        "owner": record.owner,
        "surveyNumber": record.survey_number,
        "area": record.area,
        "district": record.district,
        "taluk": record.taluk,
        "village": record.village,
        "classification": record.classification,
        "ownershipType": record.ownership_type,
        "rawText": record.raw_text,
    }


def details_to_dict(details: VerificationDetails) -> dict[str, Any]:
    return {
        "registrationStatus": details.registration_status,
        "portalMatch": details.portal_match,
        "ownershipVerified": details.ownership_verified,
        "boundariesConfirmed": details.boundaries_confirmed,
        "taxStatus": details.tax_status,
    }


def verification_to_dict(result: VerificationResult) -> dict[str, Any]:
    return {
        "id": result.id,
        "documentName": result.document_name,
        "uploadDate": result.upload_date,
        "status": result.status,
        "isLegal": result.is_legal,
        "ownershipType": result.ownership_type,
        "documentType": result.document_type,
        "surveyNumber": result.survey_number,
        "district": result.district,
        "taluk": result.taluk,
        "village": result.village,
        "area": result.area,
        "owner": result.owner,
        "classification": result.classification,
        "discrepancies": list(result.discrepancies),
        "confidence": result.confidence,
        "verificationDetails": details_to_dict(result.verification_details),
    }


def section_to_dict(section: SectionAnalysis) -> dict[str, Any]:
    return {
        "title": section.title,
        "key": section.key,
        "content": section.content,
        "alerts": [
            {"message": alert.message, "level": alert.level.value, "category": alert.category}
            for alert in section.alerts
        ],
        "confidence": section.confidence,
        "hasContent": section.has_content,
    }


def contract_to_dict(analysis: ContractAnalysis) -> dict[str, Any]:
    return {
        "id": analysis.id,
        "name": analysis.name,
        "extractedText": analysis.extracted_text,
        "summary": analysis.summary,
        "keyPoints": list(analysis.key_points),
        "sections": [section_to_dict(section) for section in analysis.sections],
    }


def to_payload(entry: HistoryEntry) -> tuple[str, dict[str, Any]]:
    """Return the history kind and serialized payload for an entry."""
    if isinstance(entry, VerificationResult):
        return KIND_VERIFICATION, verification_to_dict(entry)
    if isinstance(entry, ContractAnalysis):
        return KIND_CONTRACT, contract_to_dict(entry)
    raise HistorySerializationError(f"Unsupported history entry type: {type(entry).__name__}")


def from_payload(kind: str, payload: Any) -> HistoryEntry:
    """Rebuild a history entry from its kind and serialized payload.

    Raises:
        HistorySerializationError: on unknown kind or malformed payload.
    """
    if kind == KIND_VERIFICATION:
        return verification_from_dict(payload)
    if kind == KIND_CONTRACT:
        return contract_from_dict(payload)
    raise HistorySerializationError(f"Unknown history kind: {kind!r}")


def verification_from_dict(data: Any) -> VerificationResult:
    data = _require_object(data, "verification result")
    return VerificationResult(
        id=_str(data, "id"),
        document_name=_str(data, "documentName"),
        upload_date=_str(data, "uploadDate"),
        status=_str(data, "status"),
        is_legal=_bool(data, "isLegal"),
        ownership_type=_str(data, "ownershipType"),
        document_type=_str(data, "documentType"),
        survey_number=_str(data, "surveyNumber"),
        district=_str(data, "district"),
        taluk=_str(data, "taluk"),
        village=_str(data, "village"),
        area=_str(data, "area"),
        owner=_str(data, "owner"),
        classification=_str(data, "classification"),
        discrepancies=_str_list(data, "discrepancies"),
        confidence=_int(data, "confidence"),
        verification_details=_build_details(data.get("verificationDetails")),
    )


def contract_from_dict(data: Any) -> ContractAnalysis:
    data = _require_object(data, "contract analysis")
    raw_sections = data.get("sections")
    if not isinstance(raw_sections, list):
        raise HistorySerializationError("'sections' must be a list")
    return ContractAnalysis(
        id=_str(data, "id"),
        name=_str(data, "name"),
        extracted_text=_str(data, "extractedText"),
        summary=_str(data, "summary"),
        key_points=_str_list(data, "keyPoints"),
        sections=[_build_section(item, i) for i, item in enumerate(raw_sections)],
    )


def _build_details(raw: Any) -> VerificationDetails:
    data = _require_object(raw, "verificationDetails")
    return VerificationDetails(
        registration_status=_str(data, "registrationStatus"),
        portal_match=_bool(data, "portalMatch"),
        ownership_verified=_bool(data, "ownershipVerified"),
        boundaries_confirmed=_bool(data, "boundariesConfirmed"),
        tax_status=_str(data, "taxStatus"),
    )


def _build_section(raw: Any, index: int) -> SectionAnalysis:
    data = _require_object(raw, f"section at index {index}")
    raw_alerts = data.get("alerts")
    if not isinstance(raw_alerts, list):
        raise HistorySerializationError(f"Section at index {index}: 'alerts' must be a list")
    return SectionAnalysis(
        title=_str(data, "title"),
        key=_str(data, "key"),
        content=_str(data, "content"),
        alerts=[_build_alert(item, index) for item in raw_alerts],
        confidence=_int(data, "confidence"),
        has_content=_bool(data, "hasContent"),
    )


def _build_alert(raw: Any, section_index: int) -> Alert:
    data = _require_object(raw, f"alert in section {section_index}")
    level = _str(data, "level")
    try:
        alert_level = AlertLevel(level)
    except ValueError as exc:
        raise HistorySerializationError(
            f"Section at index {section_index}: invalid alert level {level!r}"
        ) from exc
    return Alert(message=_str(data, "message"), level=alert_level, category=_str(data, "category"))


def _require_object(raw: Any, name: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise HistorySerializationError(f"'{name}' must be an object")
    return raw


def _str(data: dict[str, Any], name: str) -> str:
    value = data.get(name)
    if not isinstance(value, str):
        raise HistorySerializationError(f"'{name}' must be a string")
    return value


def _bool(data: dict[str, Any], name: str) -> bool:
    value = data.get(name)
    if not isinstance(value, bool):
        raise HistorySerializationError(f"'{name}' must be a boolean")
    return value


def _int(data: dict[str, Any], name: str) -> int:
    value = data.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise HistorySerializationError(f"'{name}' must be an integer")
    return value


def _str_list(data: dict[str, Any], name: str) -> list[str]:
    value = data.get(name)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise HistorySerializationError(f"'{name}' must be a list of strings")
    return list(value)
