"""
Client picker use case.
"""

from vaops.application.use_cases.base_use_case import AuthorizedUseCase, SearchUseCase
from vaops.application.dto.client_dto import (
    ClientSearchResponseDTO,
    ClientSummaryDTO,
    SearchClientsRequestDTO,
)
from vaops.domain.repositories.client_repository import ClientRepository


class SearchClientsUseCase(AuthorizedUseCase, SearchUseCase[SearchClientsRequestDTO, ClientSearchResponseDTO]):
    """Find the VA's clients by business name, first name or surname."""

    def __init__(self, client_repository: ClientRepository):
        super().__init__()
        self.client_repository = client_repository

    async def _execute_business_logic(self, request: SearchClientsRequestDTO) -> ClientSearchResponseDTO:
        clients = await self.client_repository.search(
            self.current_user_id, request.query.strip(), limit=request.limit
        )
        return ClientSearchResponseDTO(
            clients=[ClientSummaryDTO.from_domain(client) for client in clients],
            total=len(clients),
        )
