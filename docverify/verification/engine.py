"""Registry cross-verification, discrepancy detection and confidence scoring."""

import uuid
from collections.abc import Callable, Iterable
from datetime import date

from docverify.fields.models import UNKNOWN, DocumentRecord
from docverify.logging.logger import Log
from docverify.verification.models import (
    FAILED_DETAILS,
    STATUS_ISSUES_FOUND,
    STATUS_PROCESSING_FAILED,
    STATUS_VERIFIED,
    TAX_STATUS_CURRENT,
    PenaltySchedule,
    VerificationDetails,
    VerificationResult,
)
from docverify.verification.registry_base import BaseRegistryClient

DEFAULT_DOCUMENT_NAME = "Land Document"
DEFAULT_GOVERNMENT_SURVEY_NUMBERS: tuple[str, ...] = ("SF No. 999/1", "SF No. 888/2")

PORTAL_MISMATCH = "Document details do not match portal records"
OWNERSHIP_UNVERIFIED = "Ownership information could not be verified"
TAX_NOT_CURRENT = "Tax payments are not current"
TECHNICAL_FAILURE = "Unable to verify document due to technical issues"


def find_discrepancies(details: VerificationDetails) -> list[str]:
    discrepancies: list[str] = []
    if not details.portal_match:
        discrepancies.append(PORTAL_MISMATCH)
    if not details.ownership_verified:
        discrepancies.append(OWNERSHIP_UNVERIFIED)
    if details.tax_status != TAX_STATUS_CURRENT:
        discrepancies.append(TAX_NOT_CURRENT)
    return discrepancies


def calculate_confidence(
    details: VerificationDetails,
    discrepancies: list[str],
    penalties: PenaltySchedule = PenaltySchedule(),
) -> int:
    """Start at 100, subtract per failed check and per discrepancy, clamp to [0, 100]."""
    score = 100
    if not details.registration_status.strip():
        score -= penalties.missing_registration
    if not details.portal_match:
        score -= penalties.portal_mismatch
    if not details.ownership_verified:
        score -= penalties.ownership_unverified
    if not details.boundaries_confirmed:
        score -= penalties.boundaries_unconfirmed
    if details.tax_status != TAX_STATUS_CURRENT:
        score -= penalties.tax_not_current
    score -= len(discrepancies) * penalties.per_discrepancy
    return max(0, min(100, score))


class VerificationEngine:
    """Verifies a DocumentRecord against the registry.

    ``verify`` never raises: registry failures produce a terminal
    "Processing Failed" result instead.
    """

    def __init__(
        self,
        registry: BaseRegistryClient,
        *,
        government_survey_numbers: Iterable[str] = DEFAULT_GOVERNMENT_SURVEY_NUMBERS,
        penalties: PenaltySchedule | None = None,
        id_factory: Callable[[], str] | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._registry = registry
        self._government_survey_numbers = frozenset(government_survey_numbers)
        self._penalties = penalties or PenaltySchedule()
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._today = today

    def classify_ownership(self, record: DocumentRecord) -> str:
        if record.survey_number in self._government_survey_numbers:
            return "Government"
        return "Private"

    def verify(
        self, record: DocumentRecord, document_name: str = DEFAULT_DOCUMENT_NAME
    ) -> VerificationResult:
        Log.info(f"Verifying {document_name} with registry", survey=record.survey_number)
        try:
            details = self._registry.verify(record)
        except Exception as exc:  # noqa: BLE001
            Log.error(f"Error verifying {document_name} with registry: {exc}")
            return self.failure_result(record, document_name)

        discrepancies = find_discrepancies(details)
        confidence = calculate_confidence(details, discrepancies, self._penalties)
        is_legal = not discrepancies
        result = self._build_result(
            record,
            document_name,
            status=STATUS_VERIFIED if is_legal else STATUS_ISSUES_FOUND,
            ownership_type=self.classify_ownership(record),
            discrepancies=discrepancies,
            confidence=confidence,
            details=details,
        )
        Log.info(
            f"Verification of {document_name} completed: {result.status}",
            confidence=confidence,
            discrepancies=len(discrepancies),
        )
        return result

    def failure_result(
        self,
        record: DocumentRecord,
        document_name: str,
        discrepancy: str = TECHNICAL_FAILURE,
    ) -> VerificationResult:
        """Terminal result for a document that could not be verified."""
        return self._build_result(
            record,
            document_name,
            status=STATUS_PROCESSING_FAILED,
            ownership_type=UNKNOWN,
            discrepancies=[discrepancy],
            confidence=0,
            details=FAILED_DETAILS,
        )

    def _build_result(
        self,
        record: DocumentRecord,
        document_name: str,
        *,
        status: str,
        ownership_type: str,
        discrepancies: list[str],
        confidence: int,
        details: VerificationDetails,
    ) -> VerificationResult:
        return VerificationResult(
            id=self._id_factory(),
            document_name=document_name,
            upload_date=self._today().isoformat(),
            status=status,
            is_legal=not discrepancies,
            ownership_type=ownership_type,
            document_type=record.document_type,
            survey_number=record.survey_number,
            district=record.district,
            taluk=record.taluk,
            village=record.village,
            area=record.area,
            owner=record.owner,
            classification=record.classification,
            discrepancies=discrepancies,
            confidence=confidence,
            verification_details=details,
        )
