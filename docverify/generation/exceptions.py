from docverify.exceptions import ServiceUnavailableError


class GenerationError(Exception):
    """Raised when text generation fails or returns nothing usable."""


class GenerationNetworkError(GenerationError, ServiceUnavailableError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
