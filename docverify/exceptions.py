class ServiceUnavailableError(Exception):
    """Raised when an external collaborator (generation service, registry) is unreachable."""
