"""Section analysis backed by an external text-generation service."""

from collections.abc import Sequence
from pathlib import Path

from docverify.generation.client_base import BaseGenerationClient
from docverify.generation.exceptions import GenerationError
from docverify.generation.models import GenerationParams
from docverify.logging.logger import Log
from docverify.sections.base import BaseSectionAnalyzer
from docverify.sections.catalog import SECTION_CATALOG
from docverify.sections.exceptions import SectionParseError
from docverify.sections.models import Alert, AlertLevel, SectionAnalysis, SectionSpec
from docverify.sections.parser import CONFIDENCE_SCORES, parse_section_reply
from docverify.sections.prompt_loader import load_prompt_template


class ServiceBackedSectionAnalyzer(BaseSectionAnalyzer):
    """Asks the generation service about each section and parses its reply.

    Unusable replies and generation failures fall back to templated content
    at Low confidence.
    """

    def __init__(
        self,
        *,
        client: BaseGenerationClient,
        params: GenerationParams | None = None,
        text_limit: int = 2000,
        prompt_template_path: Path | None = None,
        catalog: Sequence[SectionSpec] = SECTION_CATALOG,
    ) -> None:
        super().__init__(catalog)
        self._client = client
        self._params = params or GenerationParams()
        self._text_limit = text_limit
        self._prompt_template = load_prompt_template(prompt_template_path)

    def _analyze_section(
        self, spec: SectionSpec, text: str, document_type: str
    ) -> SectionAnalysis:
        prompt = self._build_prompt(spec, text, document_type)
        Log.debug(f"Section prompt for {spec.key}:\n{prompt}")
        try:
            reply = self._client.generate(prompt, self._params).text
            Log.debug(f"AI raw response for {spec.key}:\n{reply}")
            return parse_section_reply(reply, spec)
        except (GenerationError, SectionParseError) as exc:
            Log.warning(f"Falling back to templated analysis for {spec.title}: {exc}")
            return fallback_section(spec, text)

    def _build_prompt(self, spec: SectionSpec, text: str, document_type: str) -> str:
        return self._prompt_template.format(
            section_title=spec.title,
            section_title_lower=spec.title.lower(),
            section_description=spec.description,
            document_type=document_type,
            document_text=text[: self._text_limit],
        )


def fallback_section(spec: SectionSpec, text: str) -> SectionAnalysis:
    """Templated analysis used when the service reply cannot be used."""
    lower_text = text.lower()
    title_lower = spec.title.lower()
    if spec.key.lower() in lower_text or title_lower in lower_text:
        content = (
            f"The document contains information related to {title_lower}, but detailed "
            "analysis could not be performed. Please review this section manually."
        )
    else:
        content = (
            f"No specific information found regarding {title_lower}. "
            "This section may need attention or clarification."
        )
    return SectionAnalysis(
        title=spec.title,
        key=spec.key,
        content=content,
        alerts=[
            Alert(
                message=(
                    f"Analysis for {title_lower} could not be completed automatically. "
                    "Manual review recommended."
                ),
                level=AlertLevel.WARNING,
                category=spec.key,
            )
        ],
        confidence=CONFIDENCE_SCORES["low"],
        has_content=False,
    )
