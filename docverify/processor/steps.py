from docverify.extraction.service import TextExtractionService
from docverify.fields.extractor import FieldExtractor
from docverify.logging.logger import Log
from docverify.processor.pipeline import PipelineContext, PipelineStep
from docverify.report.assembler import ReportAssembler
from docverify.sections.base import BaseSectionAnalyzer
from docverify.verification.engine import VerificationEngine


class ExtractTextStep(PipelineStep):
    def __init__(self, service: TextExtractionService) -> None:
        self._service = service

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted = self._service.extract(context.file)
        return context


class ParseFieldsStep(PipelineStep):
    def __init__(self, field_extractor: FieldExtractor) -> None:
        self._field_extractor = field_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is None:
            raise ValueError("PipelineContext.extracted must be set before parsing fields")
        context.record = self._field_extractor.parse(
            context.extracted.text, filename=context.file.filename
        )
        Log.info(
            f"Parsed fields from {context.file.filename}",
            document_type=context.record.document_type,
        )
        return context


class VerifyRecordStep(PipelineStep):
    def __init__(self, engine: VerificationEngine) -> None:
        self._engine = engine

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.record is None:
            raise ValueError("PipelineContext.record must be set before verification")
        context.verification = self._engine.verify(
            context.record, document_name=context.file.filename
        )
        return context


class AnalyzeSectionsStep(PipelineStep):
    def __init__(self, analyzer: BaseSectionAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is None or context.record is None:
            raise ValueError(
                "PipelineContext.extracted and record must be set before section analysis"
            )
        context.sections = self._analyzer.analyze(
            context.extracted.text, context.record.document_type
        )
        return context


class AssembleVerificationStep(PipelineStep):
    def __init__(self, assembler: ReportAssembler) -> None:
        self._assembler = assembler

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.verification is None:
            raise ValueError("PipelineContext.verification must be set before assembly")
        context.report = self._assembler.assemble_verification(context.verification)
        return context


class AssembleContractStep(PipelineStep):
    def __init__(self, assembler: ReportAssembler) -> None:
        self._assembler = assembler

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is None or context.record is None:
            raise ValueError("PipelineContext.extracted and record must be set before assembly")
        context.contract = self._assembler.assemble_contract(
            context.file.filename,
            context.record,
            context.sections,
            text=context.extracted.text,
        )
        return context


class RecordFailureStep(PipelineStep):
    """Persists a Processing Failed verification for a document that broke the pipeline."""

    def __init__(self, assembler: ReportAssembler) -> None:
        self._assembler = assembler

    def run(self, context: PipelineContext) -> PipelineContext:
        context.verification = self._assembler.failed_verification(context.file.filename)
        Log.error(
            f"Verification of {context.file.filename} failed: {context.error_message}",
            id=context.verification.id,
        )
        return context


class LogFailureStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        Log.error(f"Analysis of {context.file.filename} failed: {context.error_message}")
        return context
