"""Example text-generation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseGenerationClient and register the provider in GenerationClientFactory.
"""

from typing import ClassVar

from docverify.generation.client_base import BaseGenerationClient
from docverify.generation.models import GenerationParams, GenerationResult


class ExampleClientAdapter(BaseGenerationClient):
    """Example adapter that returns a fixed reply in the section-analysis grammar.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_RESPONSE: ClassVar[str] = (
        "CONTENT: The document addresses this section in general terms. "
        "Specific figures and conditions should be confirmed against the signed copy.\n"
        "ALERTS: No critical issues found.\n"
        "CONFIDENCE: Medium\n"
        "HAS_CONTENT: Yes"
    )

    def __init__(self, response: str | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def generate(self, prompt: str, params: GenerationParams) -> GenerationResult:
        _ = prompt, params
        return GenerationResult(text=self._response)
