"""
Client picker DTOs.
"""

from typing import List, Optional

from pydantic import Field

from vaops.application.dto.base_dto import BaseDTO, RequestDTO
from vaops.domain.models.client import Client


class SearchClientsRequestDTO(RequestDTO):
    query: str = Field(default="", max_length=255, description="Name fragment")
    limit: int = Field(default=20, ge=1, le=50)


class ClientSummaryDTO(BaseDTO):
    id: str
    display_name: str
    business_name: Optional[str] = None
    first_name: Optional[str] = None
    surname: Optional[str] = None

    @classmethod
    def from_domain(cls, client: Client) -> "ClientSummaryDTO":
        return cls(
            id=client.id,
            display_name=client.display_name,
            business_name=client.business_name,
            first_name=client.first_name,
            surname=client.surname,
        )


class ClientSearchResponseDTO(BaseDTO):
    clients: List[ClientSummaryDTO] = Field(default_factory=list)
    total: int = 0
