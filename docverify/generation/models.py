from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationParams:
    """Sampling parameters passed to the text-generation service."""

    max_tokens: int = 500
    temperature: float = 0.3
    top_p: float = 0.9


@dataclass(frozen=True)
class GenerationResult:
    """Text returned by the text-generation service."""

    text: str
