from dataclasses import dataclass, field

STATUS_VERIFIED = "Verified"
STATUS_ISSUES_FOUND = "Issues Found"
STATUS_PROCESSING_FAILED = "Processing Failed"
TAX_STATUS_CURRENT = "Current"


@dataclass(frozen=True)
class VerificationDetails:
    """Per-check outcome reported by the registry."""

    registration_status: str
    portal_match: bool
    ownership_verified: bool
    boundaries_confirmed: bool
    tax_status: str


FAILED_DETAILS = VerificationDetails(
    registration_status="Failed",
    portal_match=False,
    ownership_verified=False,
    boundaries_confirmed=False,
    tax_status="Unknown",
)


@dataclass(frozen=True)
class VerificationResult:
    """The persisted outcome of verifying one document.

    ``is_legal`` holds exactly when ``discrepancies`` is empty.
    """

    id: str
    document_name: str
    upload_date: str
    status: str
    is_legal: bool
    ownership_type: str
    document_type: str
    survey_number: str
    district: str
    taluk: str
    village: str
    area: str
    owner: str
    classification: str
    discrepancies: list[str] = field(default_factory=list)
    confidence: int = 0
    verification_details: VerificationDetails = FAILED_DETAILS


@dataclass(frozen=True)
class PenaltySchedule:
    """Confidence points deducted per failed check and per discrepancy."""

    missing_registration: int = 20
    portal_mismatch: int = 25
    ownership_unverified: int = 20
    boundaries_unconfirmed: int = 15
    tax_not_current: int = 10
    per_discrepancy: int = 5
