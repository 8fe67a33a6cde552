"""
FastAPI dependency providers.
Everything is built from objects the application created at startup.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from vaops.config import Settings
from vaops.domain.events.base import EventDispatcher
from vaops.domain.services.report_aggregation_service import ReportAggregationService
from vaops.infrastructure.db.database import get_db
from vaops.infrastructure.rendering.report_renderer import ReportRenderer
from vaops.infrastructure.repositories import (
    SQLAlchemyClientDocumentRepository,
    SQLAlchemyClientRepository,
    SQLAlchemyTimeEntryRepository,
    SQLAlchemyTimeReportRepository,
)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_event_dispatcher(request: Request) -> EventDispatcher:
    return request.app.state.event_dispatcher


def get_report_renderer(request: Request) -> ReportRenderer:
    return request.app.state.report_renderer


def get_aggregation_service(settings: Settings = Depends(get_app_settings)) -> ReportAggregationService:
    return ReportAggregationService(settings.timezone)


def get_client_repository(session: Session = Depends(get_db)) -> SQLAlchemyClientRepository:
    """Dependency to get client repository."""
    return SQLAlchemyClientRepository(session)


def get_time_entry_repository(session: Session = Depends(get_db)) -> SQLAlchemyTimeEntryRepository:
    """Dependency to get time entry repository."""
    return SQLAlchemyTimeEntryRepository(session)


def get_time_report_repository(session: Session = Depends(get_db)) -> SQLAlchemyTimeReportRepository:
    """Dependency to get time report repository."""
    return SQLAlchemyTimeReportRepository(session)


def get_document_repository(session: Session = Depends(get_db)) -> SQLAlchemyClientDocumentRepository:
    """Dependency to get client document repository."""
    return SQLAlchemyClientDocumentRepository(session)
