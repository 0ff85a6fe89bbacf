from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from docverify.extraction.models import ExtractedText, RawFile
from docverify.fields.models import DocumentRecord
from docverify.report.models import AssembledReport, ContractAnalysis
from docverify.sections.models import SectionAnalysis
from docverify.verification.models import VerificationResult


@dataclass(slots=True)
class PipelineContext:
    file: RawFile
    extracted: ExtractedText | None = None
    record: DocumentRecord | None = None
    sections: list[SectionAnalysis] = field(default_factory=list)
    verification: VerificationResult | None = None
    contract: ContractAnalysis | None = None
    report: AssembledReport | None = None
    error_message: str = ""

    @property
    def failed(self) -> bool:
        return bool(self.error_message)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
