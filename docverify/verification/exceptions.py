from docverify.exceptions import ServiceUnavailableError


class RegistryVerificationError(Exception):
    """Raised when the registry returns an error or an unusable payload."""


class RegistryUnavailableError(RegistryVerificationError, ServiceUnavailableError):
    """Raised when the registry cannot be reached."""
