from datetime import date
from unittest.mock import MagicMock

import pytest

from docverify.chat.summarizer import Summarizer
from docverify.fields.models import UNKNOWN, DocumentRecord
from docverify.history.base import BaseHistoryRepository
from docverify.history.memory import InMemoryHistoryRepository
from docverify.report.assembler import EXTRACTION_FAILED, ReportAssembler
from docverify.report.models import AssembledReport, ContractAnalysis
from docverify.report.renderer import ReportRenderer
from docverify.sections.models import SectionAnalysis
from docverify.verification.models import FAILED_DETAILS, VerificationResult


def _assembler(history: BaseHistoryRepository) -> tuple[ReportAssembler, MagicMock, MagicMock]:
    renderer = MagicMock(spec=ReportRenderer)
    renderer.render.return_value = b"%PDF-fake"
    summarizer = MagicMock(spec=Summarizer)
    summarizer.summarize.return_value = "summary"
    summarizer.key_points.return_value = ["one", "two", "three"]
    assembler = ReportAssembler(
        history,
        renderer,
        summarizer,
        id_factory=lambda: "fixed-id",
        today=lambda: date(2026, 10, 18),
    )
    return assembler, renderer, summarizer


class TestAssembleVerification:
    def test_stores_and_renders(self, verification_result: VerificationResult) -> None:
        history = InMemoryHistoryRepository()
        assembler, renderer, _ = _assembler(history)

        report = assembler.assemble_verification(verification_result)

        assert report == AssembledReport(result=verification_result, document=b"%PDF-fake")
        renderer.render.assert_called_once_with(verification_result)
        assert history.get(verification_result.id) == verification_result

    def test_assemble_dispatches_to_verification(
        self, land_record: DocumentRecord, verification_result: VerificationResult
    ) -> None:
        assembler, _, _ = _assembler(InMemoryHistoryRepository())
        report = assembler.assemble(land_record, verification=verification_result)
        assert isinstance(report, AssembledReport)

    def test_assemble_requires_verification_or_sections(
        self, land_record: DocumentRecord
    ) -> None:
        assembler, _, _ = _assembler(InMemoryHistoryRepository())
        with pytest.raises(ValueError, match="verification result is required"):
            assembler.assemble(land_record)

    def test_history_failure_propagates(self, verification_result: VerificationResult) -> None:
        history = MagicMock(spec=BaseHistoryRepository)
        history.append.side_effect = RuntimeError("db down")
        assembler, renderer, _ = _assembler(history)

        with pytest.raises(RuntimeError, match="db down"):
            assembler.assemble_verification(verification_result)
        renderer.render.assert_not_called()


class TestAssembleContract:
    def test_uses_record_text_and_summarizer(self, land_record: DocumentRecord) -> None:
        history = InMemoryHistoryRepository()
        assembler, _, summarizer = _assembler(history)
        sections = [SectionAnalysis(title="Payment Terms", key="payment", content="c")]

        analysis = assembler.assemble(land_record, sections=sections, name="lease.pdf")

        assert isinstance(analysis, ContractAnalysis)
        assert analysis.id == "fixed-id"
        assert analysis.name == "lease.pdf"
        assert analysis.extracted_text == land_record.raw_text
        assert analysis.summary == "summary"
        assert analysis.key_points == ["one", "two", "three"]
        assert analysis.sections == sections
        summarizer.summarize.assert_called_once_with(land_record.raw_text)
        assert history.get("fixed-id") == analysis

    def test_explicit_text_wins_over_record(self, land_record: DocumentRecord) -> None:
        assembler, _, _ = _assembler(InMemoryHistoryRepository())
        analysis = assembler.assemble_contract("x", land_record, [], text="full text")
        assert analysis.extracted_text == "full text"


class TestFailedVerification:
    def test_stores_processing_failed_record(self) -> None:
        history = InMemoryHistoryRepository()
        assembler, renderer, _ = _assembler(history)

        result = assembler.failed_verification("scan.pdf")

        assert result.id == "fixed-id"
        assert result.document_name == "scan.pdf"
        assert result.upload_date == "2026-10-18"
        assert result.status == "Processing Failed"
        assert result.is_legal is False
        assert result.confidence == 0
        assert result.owner == UNKNOWN
        assert result.discrepancies == [EXTRACTION_FAILED]
        assert result.verification_details == FAILED_DETAILS
        assert history.list_recent() == [result]
        renderer.render.assert_not_called()
