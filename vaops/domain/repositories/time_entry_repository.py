"""Time Entry repository interface.
Time entries are owned by time tracking; reporting only reads them.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from vaops.domain.models.time_entry import TimeEntry


class TimeEntryRepository(ABC):
    """Read-only repository interface for TimeEntry."""

    @abstractmethod
    async def find_for_client_between(
        self,
        va_id: str,
        client_id: str,
        start: datetime,
        end: datetime,
    ) -> List[TimeEntry]:
        """
        Find the VA's entries on tasks of ``client_id`` whose start time lies
        in ``[start, end]`` (naive UTC, both inclusive), newest first.
        """
        pass
