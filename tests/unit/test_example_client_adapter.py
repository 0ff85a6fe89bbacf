from unittest.mock import MagicMock

from docverify.generation.example_client_adapter import ExampleClientAdapter
from docverify.generation.models import GenerationParams, GenerationResult
from docverify.generation.rate_limited_client import RateLimitedGenerationClient
from docverify.ratelimit import RateLimiter
from docverify.sections.catalog import SECTION_CATALOG
from docverify.sections.parser import parse_section_reply


class TestExampleClientAdapter:
    def test_default_response_follows_section_grammar(self) -> None:
        result = ExampleClientAdapter().generate("prompt", GenerationParams())
        section = parse_section_reply(result.text, SECTION_CATALOG[0])
        assert section.confidence == 60
        assert section.has_content is True

    def test_custom_response(self) -> None:
        result = ExampleClientAdapter("fixed").generate("prompt", GenerationParams())
        assert result == GenerationResult(text="fixed")


class TestRateLimitedGenerationClient:
    def test_waits_before_delegating(self) -> None:
        limiter = MagicMock(spec=RateLimiter)
        calls: list[str] = []
        limiter.wait.side_effect = lambda: calls.append("wait")
        inner = MagicMock()
        inner.generate.side_effect = lambda prompt, params: (
            calls.append("generate") or GenerationResult(text="ok")
        )

        result = RateLimitedGenerationClient(inner, limiter).generate("p", GenerationParams())

        assert result.text == "ok"
        assert calls == ["wait", "generate"]
