from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import replace

from docverify.logging.logger import Log
from docverify.sections.catalog import SECTION_CATALOG
from docverify.sections.models import (
    Alert,
    AlertLevel,
    SectionAnalysis,
    SectionSpec,
    no_issues_alert,
)


class BaseSectionAnalyzer(ABC):
    """Analyzes every clause category of the catalog, in catalog order.

    Subclasses implement ``_analyze_section``. A failure in one section is
    converted into a degraded entry and never affects its siblings.
    """

    def __init__(self, catalog: Sequence[SectionSpec] = SECTION_CATALOG) -> None:
        self._catalog = tuple(catalog)

    def analyze(self, text: str, document_type: str = "default") -> list[SectionAnalysis]:
        results: list[SectionAnalysis] = []
        for spec in self._catalog:
            try:
                analysis = self._analyze_section(spec, text, document_type)
            except Exception as exc:  # noqa: BLE001
                Log.error(f"Error analyzing section {spec.title}: {exc}", section=spec.key)
                analysis = degraded_section(spec, exc)
            if not analysis.alerts:
                analysis = replace(analysis, alerts=[no_issues_alert(spec)])
            results.append(analysis)
        Log.info(f"Analyzed {len(results)} sections", document_type=document_type)
        return results

    @abstractmethod
    def _analyze_section(
        self, spec: SectionSpec, text: str, document_type: str
    ) -> SectionAnalysis:
        """Analyze one clause category."""


def degraded_section(spec: SectionSpec, exc: Exception) -> SectionAnalysis:
    return SectionAnalysis(
        title=spec.title,
        key=spec.key,
        content=f"Unable to analyze {spec.title}",
        alerts=[
            Alert(
                message=f"Analysis failed for {spec.title.lower()}: {exc}",
                level=AlertLevel.ERROR,
                category=spec.key,
            )
        ],
        confidence=0,
        has_content=False,
    )
