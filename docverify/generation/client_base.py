from abc import ABC, abstractmethod

from docverify.generation.models import GenerationParams, GenerationResult


class BaseGenerationClient(ABC):
    """Contract for provider-specific text-generation clients."""

    @abstractmethod
    def generate(self, prompt: str, params: GenerationParams) -> GenerationResult:
        """Return the provider's completion for ``prompt``.

        Raises:
            GenerationError: on empty output or provider failure.
        """
