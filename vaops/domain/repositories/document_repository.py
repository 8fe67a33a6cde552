"""Client document repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from vaops.domain.models.document import ClientDocument


class ClientDocumentRepository(ABC):
    """Repository interface for ClientDocument content access."""

    @abstractmethod
    async def find_by_id(self, document_id: str, va_id: str) -> Optional[ClientDocument]:
        """
        Find one of the VA's documents by ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def save_content(self, document: ClientDocument) -> ClientDocument:
        """
        Persist the document's content blob.
        """
        pass
