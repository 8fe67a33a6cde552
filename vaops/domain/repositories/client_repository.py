"""
Client repository interface.
Defines the read operations time reporting needs on clients.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from vaops.domain.models.client import Client


class ClientRepository(ABC):
    """Repository interface for Client lookups."""

    @abstractmethod
    async def find_by_id(self, client_id: str, va_id: str) -> Optional[Client]:
        """
        Find one of the VA's clients by its ID.
        Returns None if not found or owned by another VA.
        """
        pass

    @abstractmethod
    async def search(self, va_id: str, query: str, limit: int = 20) -> List[Client]:
        """
        Case-insensitive search over business name, first name and surname,
        ordered by surname.
        """
        pass
