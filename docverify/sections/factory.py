from docverify.config.settings import Settings
from docverify.generation.client_base import BaseGenerationClient
from docverify.generation.factory import GenerationClientFactory
from docverify.logging.logger import Log
from docverify.sections.base import BaseSectionAnalyzer
from docverify.sections.service_backed import ServiceBackedSectionAnalyzer
from docverify.sections.synthesis import DeterministicSynthesisSectionAnalyzer


class SectionAnalyzerFactory:
    """Creates the section analysis strategy selected by settings."""

    POLICIES: tuple[str, ...] = ("synthesis", "service")

    @classmethod
    def create(
        cls,
        settings: Settings,
        client: BaseGenerationClient | None = None,
    ) -> BaseSectionAnalyzer:
        policy = settings.section_analysis_policy.lower()
        if policy not in cls.POLICIES:
            raise ValueError(
                f"Unknown section analysis policy '{policy}'. Choose from: {list(cls.POLICIES)}"
            )
        if policy == "service":
            if client is not None:
                return ServiceBackedSectionAnalyzer(
                    client=client,
                    params=GenerationClientFactory.params(settings),
                    text_limit=settings.section_text_limit,
                )
            Log.warning(
                "Section analysis policy 'service' requested but no generation provider "
                "is configured, using synthesis"
            )
        return DeterministicSynthesisSectionAnalyzer(
            success_ratio=settings.synthesis_success_ratio,
            success_confidences=settings.synthesis_success_confidences,
            issue_confidences=settings.synthesis_issue_confidences,
            seed=settings.synthesis_seed,
        )
