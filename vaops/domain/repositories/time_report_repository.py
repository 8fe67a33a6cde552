"""Time Report repository interface.
Defines the contract for persisting immutable report snapshots.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from vaops.domain.models.time_report import TimeReport


class TimeReportRepository(ABC):
    """
    Repository interface for the TimeReport aggregate.
    Reports are inserted and deleted, never updated.
    """

    @abstractmethod
    async def save_snapshot(self, report: TimeReport) -> TimeReport:
        """
        Insert the report row and all of its entry rows atomically.
        Either everything is written or nothing is.
        """
        pass

    @abstractmethod
    async def find_by_id(
        self,
        report_id: str,
        va_id: Optional[str] = None,
        include_entries: bool = True,
    ) -> Optional[TimeReport]:
        """
        Find a report by ID, optionally restricted to one VA.
        Entries come back newest first with session/task ids resolved
        from their source time entries.
        """
        pass

    @abstractmethod
    async def find_by_va(
        self,
        va_id: str,
        client_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[TimeReport]:
        """
        List a VA's saved reports (summaries only), newest first.
        Without a limit every report is returned.
        """
        pass

    @abstractmethod
    async def count_by_va(self, va_id: str, client_id: Optional[str] = None) -> int:
        """Count a VA's saved reports."""
        pass

    @abstractmethod
    async def delete(self, report_id: str, va_id: str) -> bool:
        """
        Delete a report together with its entries.
        Returns False if there was nothing to delete.
        """
        pass
