"""
Time entry mapper for converting database rows into domain entities.
"""

from vaops.domain.models.time_entry import TimeEntry
from vaops.infrastructure.db.models import TimeEntryModel


class TimeEntryMapper:
    """Maps TimeEntryModel rows (with their task loaded) to TimeEntry entities."""

    def model_to_domain(self, model: TimeEntryModel) -> TimeEntry:
        task = model.task
        return TimeEntry(
            id=model.id,
            va_id=model.va_id,
            task_id=model.task_id,
            started_at=model.started_at,
            ended_at=model.ended_at,
            duration_minutes=model.duration_minutes or 0,
            notes=model.notes,
            session_id=model.session_id,
            task_title=task.task_name if task is not None else None,
            client_id=task.client_id if task is not None else None,
        )
