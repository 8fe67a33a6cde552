"""
Time reports router.
Handles previewing, saving, listing and deleting time report snapshots.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from vaops.application.dto.time_report_dto import (
    DeleteTimeReportRequestDTO,
    GetTimeReportRequestDTO,
    ListTimeReportsRequestDTO,
    ReportPreviewRequestDTO,
    ReportPreviewResponseDTO,
    SaveTimeReportRequestDTO,
    TimeReportDetailDTO,
    TimeReportListResponseDTO,
)
from vaops.application.use_cases.time_report_use_cases import (
    DeleteTimeReportUseCase,
    GenerateReportPreviewUseCase,
    GetTimeReportUseCase,
    ListTimeReportsUseCase,
    SaveTimeReportUseCase,
)
from vaops.domain.events.base import EventDispatcher
from vaops.domain.services.report_aggregation_service import ReportAggregationService
from vaops.infrastructure.auth import get_current_user_id
from vaops.infrastructure.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyTimeEntryRepository,
    SQLAlchemyTimeReportRepository,
)
from vaops.infrastructure.web.dependencies import (
    get_aggregation_service,
    get_client_repository,
    get_event_dispatcher,
    get_time_entry_repository,
    get_time_report_repository,
)
from vaops.infrastructure.web.errors import unwrap_result


router = APIRouter()


@router.post("/preview", response_model=ReportPreviewResponseDTO)
async def preview_time_report(
    request: ReportPreviewRequestDTO,
    user_id: Annotated[str, Depends(get_current_user_id)],
    client_repository: Annotated[SQLAlchemyClientRepository, Depends(get_client_repository)],
    time_entry_repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    aggregation_service: Annotated[ReportAggregationService, Depends(get_aggregation_service)]
):
    """
    Aggregate a client's time entries over an inclusive date range.

    - **client_id**: Client to report on
    - **date_from** / **date_to**: Calendar dates in the configured timezone
    - **include_notes**: Copy entry notes into the lines

    Nothing is saved.
    """
    use_case = GenerateReportPreviewUseCase(
        client_repository, time_entry_repository, aggregation_service
    ).set_current_user(user_id)
    return unwrap_result(await use_case.execute(request))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TimeReportListResponseDTO)
async def save_time_report(
    request: SaveTimeReportRequestDTO,
    user_id: Annotated[str, Depends(get_current_user_id)],
    client_repository: Annotated[SQLAlchemyClientRepository, Depends(get_client_repository)],
    repository: Annotated[SQLAlchemyTimeReportRepository, Depends(get_time_report_repository)],
    dispatcher: Annotated[EventDispatcher, Depends(get_event_dispatcher)]
):
    """
    Save previewed lines as a named report and return the refreshed list.
    A blank name uses the suggested "<Client> – <from>–<to>" name.
    """
    use_case = SaveTimeReportUseCase(client_repository, repository, dispatcher).set_current_user(user_id)
    return unwrap_result(await use_case.execute(request))


@router.get("", response_model=TimeReportListResponseDTO)
async def list_time_reports(
    user_id: Annotated[str, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyTimeReportRepository, Depends(get_time_report_repository)],
    client_id: Optional[str] = Query(None, description="Only reports of this client"),
    limit: Optional[int] = Query(None, ge=1, description="Page size; all reports when omitted"),
    offset: int = Query(0, ge=0, description="Number of reports to skip")
):
    """List saved reports, newest first."""
    use_case = ListTimeReportsUseCase(repository).set_current_user(user_id)
    result = await use_case.execute(
        ListTimeReportsRequestDTO(client_id=client_id, limit=limit, offset=offset)
    )
    return unwrap_result(result)


@router.get("/{report_id}", response_model=TimeReportDetailDTO)
async def get_time_report(
    report_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyTimeReportRepository, Depends(get_time_report_repository)]
):
    """Get a saved report with its lines and the session-grouped breakdown."""
    use_case = GetTimeReportUseCase(repository).set_current_user(user_id)
    result = await use_case.execute(GetTimeReportRequestDTO(report_id=report_id))
    return unwrap_result(result)


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_time_report(
    report_id: str,
    user_id: Annotated[str, Depends(get_current_user_id)],
    repository: Annotated[SQLAlchemyTimeReportRepository, Depends(get_time_report_repository)],
    dispatcher: Annotated[EventDispatcher, Depends(get_event_dispatcher)],
    confirm: bool = Query(False, description="Must be true to delete")
):
    """Delete a saved report and its lines. Requires `confirm=true`."""
    use_case = DeleteTimeReportUseCase(repository, dispatcher).set_current_user(user_id)
    result = await use_case.execute(DeleteTimeReportRequestDTO(report_id=report_id, confirm=confirm))
    unwrap_result(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
