from collections.abc import Sequence

from docverify.chat.summarizer import Summarizer
from docverify.config.settings import Settings
from docverify.extraction.factory import TextExtractorFactory
from docverify.extraction.models import RawFile
from docverify.fields.extractor import FieldExtractor
from docverify.generation.client_base import BaseGenerationClient
from docverify.generation.factory import GenerationClientFactory
from docverify.history.base import BaseHistoryRepository
from docverify.logging.logger import Log
from docverify.processor.pipeline import PipelineContext, PipelineStep
from docverify.processor.steps import (
    AnalyzeSectionsStep,
    AssembleContractStep,
    AssembleVerificationStep,
    ExtractTextStep,
    LogFailureStep,
    ParseFieldsStep,
    RecordFailureStep,
    VerifyRecordStep,
)
from docverify.report.assembler import ReportAssembler
from docverify.sections.factory import SectionAnalyzerFactory
from docverify.verification.factory import build_verification_engine


class Processor:
    """Runs one document through an ordered list of pipeline steps.

    ``process`` never raises: the first failing step stops the run, its
    message is recorded on the context and the failure step is applied.
    """

    def __init__(self, steps: Sequence[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = tuple(steps)
        self._failed_step = failed_step

    def process(self, file: RawFile) -> PipelineContext:
        Log.info(f"Processing {file.filename}", size=file.size)
        context = PipelineContext(file=file)
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:  # noqa: BLE001
                context.error_message = str(exc) or type(exc).__name__
                Log.error(f"Step {type(step).__name__} failed for {file.filename}: {exc}")
                return self._fail(context)
        Log.info(f"Finished processing {file.filename}")
        return context

    def _fail(self, context: PipelineContext) -> PipelineContext:
        try:
            return self._failed_step.run(context)
        except Exception as exc:  # noqa: BLE001
            Log.exception(f"Failure handling for {context.file.filename} failed: {exc}")
            return context


def build_verification_processor(
    settings: Settings,
    history: BaseHistoryRepository,
) -> Processor:
    """Land verification: extract -> parse fields -> verify -> assemble."""
    assembler = ReportAssembler(history)
    return Processor(
        steps=[
            ExtractTextStep(
                TextExtractorFactory.create_service(
                    settings, max_bytes=settings.land_max_upload_bytes
                )
            ),
            ParseFieldsStep(FieldExtractor()),
            VerifyRecordStep(build_verification_engine(settings)),
            AssembleVerificationStep(assembler),
        ],
        failed_step=RecordFailureStep(assembler),
    )


def build_contract_processor(
    settings: Settings,
    history: BaseHistoryRepository,
    client: BaseGenerationClient | None = None,
) -> Processor:
    """Contract analysis: extract -> parse fields -> analyze sections -> assemble."""
    if client is None:
        client = GenerationClientFactory.create(settings)
    assembler = ReportAssembler(history, summarizer=Summarizer(client))
    return Processor(
        steps=[
            ExtractTextStep(TextExtractorFactory.create_service(settings)),
            ParseFieldsStep(FieldExtractor()),
            AnalyzeSectionsStep(SectionAnalyzerFactory.create(settings, client)),
            AssembleContractStep(assembler),
        ],
        failed_step=LogFailureStep(),
    )
