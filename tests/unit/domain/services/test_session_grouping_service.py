"""
Unit tests for the session grouping of report lines.
"""

from datetime import datetime

from vaops.domain.models.time_report import TimeReportEntry
from vaops.domain.services.session_grouping_service import (
    SESSION_LABEL,
    UNASSIGNED_LABEL,
    SessionGroupingService,
    build_report_display_rows,
)


def make_entry(
    source_id, day, minutes, title="Bookkeeping", session_id=None, hour=9, notes=None, task_id=None
):
    return TimeReportEntry(
        report_id="report-1",
        entry_date=datetime(2024, 1, day, hour, 0),
        task_title=title,
        duration_seconds=minutes * 60,
        notes=notes,
        source_time_entry_id=source_id,
        session_id=session_id,
        task_id=task_id,
    )


class TestSessionGroupingService:
    """Test cases for SessionGroupingService."""

    def setup_method(self):
        self.service = SessionGroupingService()

    def test_empty_input_gives_empty_output(self):
        assert self.service.build_display_rows([]) == []

    def test_entries_without_sessions_are_unchanged(self):
        entries = [
            make_entry("te-1", 12, 30, notes="first"),
            make_entry("te-2", 11, 45, title="Inbox"),
        ]

        rows = self.service.build_display_rows(entries)

        assert [row.key for row in rows] == ["te-1", "te-2"]
        assert all(row.level == 0 and not row.is_session_summary for row in rows)
        assert rows[0].notes == "first"
        assert rows[1].task_title == "Inbox"
        assert rows[1].duration_seconds == 45 * 60

    def test_acme_session_is_summarised(self):
        entries = [
            make_entry("te-2", 12, 45, session_id="S1", hour=14),
            make_entry("te-3", 12, 15, session_id="S1", hour=10),
            make_entry("te-1", 10, 30, title="Inbox"),
        ]

        rows = self.service.build_display_rows(entries)

        top_level = [row for row in rows if row.level == 0]
        children = [row for row in rows if row.level == 1]
        assert len(top_level) == 2
        assert len(children) == 2

        summary = rows[0]
        assert summary.is_session_summary
        assert summary.key == "session-S1"
        assert summary.duration_seconds == 3600
        assert summary.task_title == "Bookkeeping"
        assert summary.entry_date == datetime(2024, 1, 12, 10, 0)
        assert summary.notes is None

        assert [row.key for row in rows[1:3]] == ["te-2", "te-3"]
        assert rows[3].key == "te-1"
        assert rows[3].duration_seconds == 1800

    def test_mixed_titles_use_generic_label(self):
        entries = [
            make_entry("te-1", 5, 10, title="Email", session_id="S9"),
            make_entry("te-2", 5, 20, title="Calls", session_id="S9"),
        ]

        rows = self.service.build_display_rows(entries)

        assert rows[0].task_title == SESSION_LABEL
        assert rows[0].duration_seconds == 30 * 60

    def test_sessions_keep_first_appearance_order(self):
        entries = [
            make_entry("a", 9, 10, session_id="S1"),
            make_entry("b", 8, 10),
            make_entry("c", 7, 10, session_id="S1"),
            make_entry("d", 6, 10, session_id="S2"),
        ]

        rows = self.service.build_display_rows(entries)

        assert [(row.key, row.level) for row in rows] == [
            ("session-S1", 0),
            ("a", 1),
            ("c", 1),
            ("b", 0),
            ("session-S2", 0),
            ("d", 1),
        ]

    def test_keys_are_unique(self):
        entries = [
            make_entry("te-1", 3, 10),
            make_entry("te-1", 3, 20),
        ]

        rows = self.service.build_display_rows(entries)

        assert [row.key for row in rows] == ["te-1", "te-1-1"]

    def test_line_without_source_falls_back_to_its_own_id(self):
        entry = TimeReportEntry(
            report_id="report-1",
            entry_date=datetime(2024, 1, 3),
            task_title="Inbox",
            duration_seconds=60,
            id="line-1",
        )

        rows = self.service.build_display_rows([entry])

        assert rows[0].key == "line-1"

    def test_custom_label(self):
        entries = [
            make_entry("te-1", 5, 10, title="Email", session_id="S1"),
            make_entry("te-2", 5, 20, title="Calls", session_id="S1"),
        ]

        rows = build_report_display_rows(entries, session_label="Work block")

        assert rows[0].task_title == "Work block"

    def test_unassigned_lines_are_relabelled(self):
        entries = [
            make_entry("te-1", 4, 10, title="Client session 14:00"),
            make_entry("te-2", 4, 20, title="Unassigned time"),
            make_entry("te-3", 4, 30, title="Bookkeeping"),
        ]

        rows = self.service.build_display_rows(entries)

        assert [row.task_title for row in rows] == [UNASSIGNED_LABEL, UNASSIGNED_LABEL, "Bookkeeping"]

    def test_lines_with_a_task_keep_their_title(self):
        entries = [make_entry("te-1", 4, 10, title="Client work review", task_id="task-1")]

        rows = self.service.build_display_rows(entries)

        assert rows[0].task_title == "Client work review"

    def test_unassigned_session_members_share_relabelled_title(self):
        entries = [
            make_entry("te-1", 6, 10, title="Client Work", session_id="S9"),
            make_entry("te-2", 6, 20, title="unassigned", session_id="S9"),
        ]

        rows = self.service.build_display_rows(entries)

        assert rows[0].is_session_summary is True
        assert rows[0].task_title == UNASSIGNED_LABEL
        assert [row.task_title for row in rows[1:]] == [UNASSIGNED_LABEL, UNASSIGNED_LABEL]
