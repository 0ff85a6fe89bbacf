from abc import ABC, abstractmethod

from docverify.fields.models import DocumentRecord
from docverify.verification.models import VerificationDetails


class BaseRegistryClient(ABC):
    """Contract for land-records registry clients."""

    @abstractmethod
    def verify(self, record: DocumentRecord) -> VerificationDetails:
        """Cross-check a record against the registry.

        Raises:
            RegistryVerificationError: if the registry errors or cannot be reached.
        """
