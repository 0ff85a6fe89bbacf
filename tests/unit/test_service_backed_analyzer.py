from pathlib import Path
from unittest.mock import MagicMock

import pytest

from docverify.generation.client_base import BaseGenerationClient
from docverify.generation.example_client_adapter import ExampleClientAdapter
from docverify.generation.exceptions import GenerationNetworkError
from docverify.generation.models import GenerationParams, GenerationResult
from docverify.sections.catalog import SECTION_CATALOG, SECTION_KEYS
from docverify.sections.exceptions import SectionAnalysisError
from docverify.sections.models import AlertLevel
from docverify.sections.service_backed import ServiceBackedSectionAnalyzer, fallback_section


class TestServiceBackedSectionAnalyzer:
    def test_returns_every_section_in_catalog_order(self) -> None:
        analyzer = ServiceBackedSectionAnalyzer(client=ExampleClientAdapter())
        sections = analyzer.analyze("Payment shall be made monthly.", "Lease")
        assert [s.key for s in sections] == list(SECTION_KEYS)
        assert all(s.alerts for s in sections)
        assert all(s.confidence == 60 for s in sections)

    def test_prompt_contains_section_and_truncated_text(self) -> None:
        client = MagicMock(spec=BaseGenerationClient)
        client.generate.return_value = GenerationResult(text=ExampleClientAdapter.DEFAULT_RESPONSE)
        params = GenerationParams(max_tokens=100)
        analyzer = ServiceBackedSectionAnalyzer(client=client, params=params, text_limit=10)

        analyzer.analyze("0123456789ABCDEF", "Sale Deed")

        prompt, used_params = client.generate.call_args_list[0].args
        assert "Section: Payment Terms" in prompt
        assert "Contract Type: Sale Deed" in prompt
        assert "0123456789" in prompt
        assert "ABCDEF" not in prompt
        assert used_params == params
        assert client.generate.call_count == len(SECTION_CATALOG)

    def test_generation_failure_falls_back_at_low_confidence(self) -> None:
        client = MagicMock(spec=BaseGenerationClient)
        client.generate.side_effect = GenerationNetworkError("AI provider network error")
        sections = ServiceBackedSectionAnalyzer(client=client).analyze("text")
        assert len(sections) == 8
        assert all(s.confidence == 30 for s in sections)
        assert all(s.has_content is False for s in sections)
        assert all(s.alerts[0].level == AlertLevel.WARNING for s in sections)

    def test_unparseable_reply_falls_back(self) -> None:
        analyzer = ServiceBackedSectionAnalyzer(client=ExampleClientAdapter("no grammar here"))
        sections = analyzer.analyze("text")
        assert "could not be completed automatically" in sections[0].alerts[0].message

    def test_unexpected_error_degrades_only_that_section(self) -> None:
        client = MagicMock(spec=BaseGenerationClient)
        good = GenerationResult(text=ExampleClientAdapter.DEFAULT_RESPONSE)
        client.generate.side_effect = [RuntimeError("boom")] + [good] * 7

        sections = ServiceBackedSectionAnalyzer(client=client).analyze("text")

        assert sections[0].content == "Unable to analyze Payment Terms"
        assert sections[0].confidence == 0
        assert sections[0].alerts[0].level == AlertLevel.ERROR
        assert "boom" in sections[0].alerts[0].message
        assert all(s.confidence == 60 for s in sections[1:])

    def test_missing_prompt_template_raises(self) -> None:
        with pytest.raises(SectionAnalysisError, match="Failed to load prompt template"):
            ServiceBackedSectionAnalyzer(
                client=ExampleClientAdapter(), prompt_template_path=Path("/nonexistent.txt")
            )


class TestFallbackSection:
    def test_mentions_related_information_when_keyword_present(self) -> None:
        section = fallback_section(SECTION_CATALOG[0], "The payment is due monthly")
        assert section.content.startswith("The document contains information related to payment terms")

    def test_reports_missing_information(self) -> None:
        section = fallback_section(SECTION_CATALOG[0], "Nothing relevant")
        assert section.content.startswith("No specific information found regarding payment terms")
