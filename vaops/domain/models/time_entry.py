"""
TimeEntry domain model.
Time entries are written by the time tracking feature and are read-only here.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class TimeEntry:
    """
    One logged work interval against a task.

    `task_title` and `client_id` are resolved from the owning task when the
    entry is loaded; `task_title` is None when the task has no usable name.
    """

    id: str
    va_id: str
    task_id: Optional[str]
    started_at: datetime
    ended_at: Optional[datetime] = None
    duration_minutes: int = 0
    notes: Optional[str] = None
    session_id: Optional[str] = None
    task_title: Optional[str] = None
    client_id: Optional[str] = None

    @property
    def duration_seconds(self) -> int:
        """Logged duration converted to seconds."""
        return (self.duration_minutes or 0) * 60
