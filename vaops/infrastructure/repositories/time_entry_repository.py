"""
Time entry repository implementation using SQLAlchemy.
"""

from datetime import datetime
from typing import List

from sqlalchemy import and_, asc, desc
from sqlalchemy.orm import Session, contains_eager

from vaops.domain.models.time_entry import TimeEntry
from vaops.domain.repositories.time_entry_repository import TimeEntryRepository as TimeEntryRepositoryInterface
from vaops.infrastructure.db.models import TaskModel, TimeEntryModel
from vaops.infrastructure.mappers.time_entry_mapper import TimeEntryMapper


class SQLAlchemyTimeEntryRepository(TimeEntryRepositoryInterface):
    """SQLAlchemy implementation of the read-only time entry repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TimeEntryMapper()
        self.model = TimeEntryModel

    async def find_for_client_between(
        self,
        va_id: str,
        client_id: str,
        start: datetime,
        end: datetime,
    ) -> List[TimeEntry]:
        """Get the VA's time entries on the client's tasks within [start, end]."""
        models = self.session.query(TimeEntryModel).join(
            TimeEntryModel.task
        ).options(
            contains_eager(TimeEntryModel.task)
        ).filter(
            and_(
                TimeEntryModel.va_id == va_id,
                TaskModel.client_id == client_id,
                TimeEntryModel.started_at >= start,
                TimeEntryModel.started_at <= end
            )
        ).order_by(desc(TimeEntryModel.started_at), asc(TimeEntryModel.id)).all()

        return [self.mapper.model_to_domain(model) for model in models]
