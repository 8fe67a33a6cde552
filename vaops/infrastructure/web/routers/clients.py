"""
Client picker router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from vaops.application.dto.client_dto import ClientSearchResponseDTO, SearchClientsRequestDTO
from vaops.application.use_cases.client_use_cases import SearchClientsUseCase
from vaops.infrastructure.auth import get_current_user_id
from vaops.infrastructure.repositories import SQLAlchemyClientRepository
from vaops.infrastructure.web.dependencies import get_client_repository
from vaops.infrastructure.web.errors import unwrap_result


router = APIRouter()


@router.get("/search", response_model=ClientSearchResponseDTO)
async def search_clients(
    user_id: Annotated[str, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyClientRepository, Depends(get_client_repository)],
    q: str = Query("", max_length=255, description="Business name, first name or surname"),
    limit: int = Query(20, ge=1, le=50)
):
    """Search clients for the report client picker (at least 2 characters)."""
    use_case = SearchClientsUseCase(repository).set_current_user(user_id)
    result = await use_case.execute(SearchClientsRequestDTO(query=q, limit=limit))
    return unwrap_result(result)
