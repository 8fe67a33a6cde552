"""Session grouping for report breakdowns.

Report lines that share a work session are shown as one summary row with
the individual lines nested underneath. Grouping is display-only: stored
report lines are never modified.
"""

from typing import Dict, List, Optional, Sequence, Set, Tuple, Union

from vaops.domain.models.time_report import ReportDisplayRow, TimeReportEntry

SESSION_LABEL = "Client Session"
UNASSIGNED_LABEL = "Client Work"

# titles the timer gives to time logged without a task
_UNASSIGNED_MARKERS = ("client session", "client work", "unassigned")

_Block = Tuple[str, Union[str, TimeReportEntry]]


def _entry_key(entry: TimeReportEntry, position: int) -> str:
    return (
        entry.source_time_entry_id
        or entry.id
        or f"{entry.entry_date.isoformat()}-{entry.task_title}-{position}"
    )


def _display_title(entry: TimeReportEntry) -> str:
    if entry.task_id:
        return entry.task_title
    title = entry.task_title.lower()
    if any(marker in title for marker in _UNASSIGNED_MARKERS):
        return UNASSIGNED_LABEL
    return entry.task_title


def _shared_title(members: Sequence[TimeReportEntry]) -> Optional[str]:
    titles = {_display_title(member) for member in members}
    if len(titles) == 1:
        return titles.pop()
    return None


class SessionGroupingService:
    """Builds the two-level display tree for a list of report lines."""

    def __init__(self, session_label: str = SESSION_LABEL):
        self.session_label = session_label

    def build_display_rows(self, entries: Sequence[TimeReportEntry]) -> List[ReportDisplayRow]:
        """
        Group entries by session id.

        Each session becomes a summary row at the position of its first
        member, followed by its members (level 1) in input order. Entries
        without a session stay where they are. Lines logged without a task
        under a generic timer title are shown as "Client Work". Never raises for well-formed
        input; an empty list gives an empty result.
        """
        blocks: List[_Block] = []
        sessions: Dict[str, List[TimeReportEntry]] = {}

        for entry in entries:
            if entry.session_id:
                if entry.session_id not in sessions:
                    sessions[entry.session_id] = []
                    blocks.append(("session", entry.session_id))
                sessions[entry.session_id].append(entry)
            else:
                blocks.append(("entry", entry))

        rows: List[ReportDisplayRow] = []
        used_keys: Set[str] = set()

        for kind, value in blocks:
            if kind == "entry":
                rows.append(self._entry_row(value, level=0, rows=rows, used_keys=used_keys))
                continue

            members = sessions[value]
            rows.append(self._summary_row(value, members, used_keys))
            for member in members:
                rows.append(self._entry_row(member, level=1, rows=rows, used_keys=used_keys))

        return rows

    def _summary_row(
        self,
        session_id: str,
        members: Sequence[TimeReportEntry],
        used_keys: Set[str],
    ) -> ReportDisplayRow:
        title = _shared_title(members) or self.session_label
        return ReportDisplayRow(
            key=self._unique_key(f"session-{session_id}", used_keys),
            entry_date=min(member.entry_date for member in members),
            task_title=title,
            duration_seconds=sum(member.duration_seconds for member in members),
            notes=None,
            level=0,
            is_session_summary=True,
        )

    def _entry_row(
        self,
        entry: TimeReportEntry,
        level: int,
        rows: List[ReportDisplayRow],
        used_keys: Set[str],
    ) -> ReportDisplayRow:
        return ReportDisplayRow(
            key=self._unique_key(_entry_key(entry, len(rows)), used_keys),
            entry_date=entry.entry_date,
            task_title=_display_title(entry),
            duration_seconds=entry.duration_seconds,
            notes=entry.notes,
            level=level,
            is_session_summary=False,
        )

    @staticmethod
    def _unique_key(candidate: str, used_keys: Set[str]) -> str:
        key = candidate
        suffix = 1
        while key in used_keys:
            key = f"{candidate}-{suffix}"
            suffix += 1
        used_keys.add(key)
        return key


def build_report_display_rows(
    entries: Sequence[TimeReportEntry],
    session_label: Optional[str] = None,
) -> List[ReportDisplayRow]:
    """Convenience wrapper around ``SessionGroupingService``."""
    service = SessionGroupingService(session_label or SESSION_LABEL)
    return service.build_display_rows(entries)
