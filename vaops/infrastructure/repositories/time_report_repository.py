"""
Time report repository implementation using SQLAlchemy.
"""

import logging
from typing import List, Optional

from sqlalchemy import asc, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from vaops.domain.models.base import PersistenceError
from vaops.domain.models.time_report import TimeReport
from vaops.domain.repositories.time_report_repository import TimeReportRepository as TimeReportRepositoryInterface
from vaops.infrastructure.db.models import (
    TimeEntryModel,
    TimeReportEntryModel,
    TimeReportModel,
)
from vaops.infrastructure.mappers.time_report_mapper import TimeReportMapper

logger = logging.getLogger(__name__)


class SQLAlchemyTimeReportRepository(TimeReportRepositoryInterface):
    """SQLAlchemy implementation of time report repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TimeReportMapper()
        self.model = TimeReportModel

    async def save_snapshot(self, report: TimeReport) -> TimeReport:
        """Insert report and entry rows in a single transaction."""
        model = self.mapper.domain_to_model(report)
        try:
            self.session.add(model)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(f"Failed to save time report {report.id}: {exc}")
            raise PersistenceError("Could not save time report") from exc

        logger.info(
            f"Saved time report {report.id} with {report.entry_count} entries "
            f"({report.total_seconds}s)"
        )
        return report

    async def find_by_id(
        self,
        report_id: str,
        va_id: Optional[str] = None,
        include_entries: bool = True,
    ) -> Optional[TimeReport]:
        """Get report by ID, with its entries resolved against their sources."""
        query = self.session.query(TimeReportModel).options(
            joinedload(TimeReportModel.client)
        ).filter(TimeReportModel.id == report_id)
        if va_id is not None:
            query = query.filter(TimeReportModel.va_user_id == va_id)

        model = query.first()
        if not model:
            return None

        rows = self._load_entries(model.id) if include_entries else []
        return self.mapper.model_to_domain(model, rows)

    async def find_by_va(
        self,
        va_id: str,
        client_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[TimeReport]:
        """Get a VA's report summaries, newest first."""
        query = self._va_reports(va_id, client_id).options(
            joinedload(TimeReportModel.client)
        )

        query = query.order_by(desc(TimeReportModel.created_at), asc(TimeReportModel.id))
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        return [self.mapper.model_to_domain(model) for model in query.all()]

    async def count_by_va(self, va_id: str, client_id: Optional[str] = None) -> int:
        return self._va_reports(va_id, client_id).count()

    def _va_reports(self, va_id: str, client_id: Optional[str]):
        query = self.session.query(TimeReportModel).filter(TimeReportModel.va_user_id == va_id)
        if client_id:
            query = query.filter(TimeReportModel.client_id == client_id)
        return query

    async def delete(self, report_id: str, va_id: str) -> bool:
        """Delete a report; its entries go with it."""
        model = self.session.query(TimeReportModel).filter_by(
            id=report_id, va_user_id=va_id
        ).first()

        if not model:
            return False

        try:
            self.session.delete(model)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(f"Failed to delete time report {report_id}: {exc}")
            raise PersistenceError("Could not delete time report") from exc

        logger.info(f"Deleted time report {report_id}")
        return True

    def _load_entries(self, report_id: str):
        # ties on entry_date keep the preview order (source entry id ascending)
        return self.session.query(TimeReportEntryModel, TimeEntryModel).outerjoin(
            TimeEntryModel,
            TimeEntryModel.id == TimeReportEntryModel.source_time_entry_id
        ).filter(
            TimeReportEntryModel.report_id == report_id
        ).order_by(
            desc(TimeReportEntryModel.entry_date),
            asc(TimeReportEntryModel.source_time_entry_id),
        ).all()
