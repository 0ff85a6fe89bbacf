from dataclasses import dataclass, field

from docverify.sections.models import SectionAnalysis
from docverify.verification.models import VerificationResult


@dataclass(frozen=True)
class ContractAnalysis:
    """The persisted outcome of analyzing one contract."""

    id: str
    name: str
    extracted_text: str
    summary: str
    key_points: list[str] = field(default_factory=list)
    sections: list[SectionAnalysis] = field(default_factory=list)


@dataclass(frozen=True)
class AssembledReport:
    """A persisted verification result and its rendered PDF."""

    result: VerificationResult
    document: bytes
