import uuid
from collections.abc import Callable
from datetime import date

from docverify.chat.summarizer import Summarizer
from docverify.fields.models import UNKNOWN, DocumentRecord
from docverify.history.base import BaseHistoryRepository
from docverify.logging.logger import Log
from docverify.report.models import AssembledReport, ContractAnalysis
from docverify.report.renderer import ReportRenderer
from docverify.sections.models import SectionAnalysis
from docverify.verification.models import (
    FAILED_DETAILS,
    STATUS_PROCESSING_FAILED,
    VerificationResult,
)

EXTRACTION_FAILED = "Failed to extract document information"


class ReportAssembler:
    """Persists pipeline outcomes to history and renders verification reports."""

    def __init__(
        self,
        history: BaseHistoryRepository,
        renderer: ReportRenderer | None = None,
        summarizer: Summarizer | None = None,
        *,
        id_factory: Callable[[], str] | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._history = history
        self._renderer = renderer or ReportRenderer()
        self._summarizer = summarizer or Summarizer()
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._today = today

    def assemble(
        self,
        record: DocumentRecord,
        verification: VerificationResult | None = None,
        sections: list[SectionAnalysis] | None = None,
        *,
        name: str = "",
    ) -> AssembledReport | ContractAnalysis:
        """Persist a contract analysis when sections are given, else a verification."""
        if sections is not None:
            return self.assemble_contract(name, record, sections)
        if verification is None:
            raise ValueError("A verification result is required when no sections are given")
        return self.assemble_verification(verification)

    def assemble_verification(self, result: VerificationResult) -> AssembledReport:
        self._history.append(result)
        Log.info(f"Stored verification {result.id}", status=result.status)
        return AssembledReport(result=result, document=self._renderer.render(result))

    def assemble_contract(
        self,
        name: str,
        record: DocumentRecord,
        sections: list[SectionAnalysis],
        text: str | None = None,
    ) -> ContractAnalysis:
        extracted = text if text is not None else record.raw_text
        analysis = ContractAnalysis(
            id=self._id_factory(),
            name=name,
            extracted_text=extracted,
            summary=self._summarizer.summarize(extracted),
            key_points=self._summarizer.key_points(extracted),
            sections=list(sections),
        )
        self._history.append(analysis)
        Log.info(f"Stored contract analysis {analysis.id}", sections=len(analysis.sections))
        return analysis

    def failed_verification(
        self, document_name: str, message: str = EXTRACTION_FAILED
    ) -> VerificationResult:
        """Persist the record of a document that failed before verification."""
        result = VerificationResult(
            id=self._id_factory(),
            document_name=document_name,
            upload_date=self._today().isoformat(),
            status=STATUS_PROCESSING_FAILED,
            is_legal=False,
            ownership_type=UNKNOWN,
            document_type=UNKNOWN,
            survey_number=UNKNOWN,
            district=UNKNOWN,
            taluk=UNKNOWN,
            village=UNKNOWN,
            area=UNKNOWN,
            owner=UNKNOWN,
            classification=UNKNOWN,
            discrepancies=[message],
            confidence=0,
            verification_details=FAILED_DETAILS,
        )
        self._history.append(result)
        Log.warning(f"Stored failed verification for {document_name}", id=result.id)
        return result
