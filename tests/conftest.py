"""
Shared fixtures: an in-memory SQLite database and row builders.
"""

from datetime import datetime

import pytest

from vaops.infrastructure.db.database import Database
from vaops.infrastructure.db.models import (
    ClientDocumentModel,
    ClientModel,
    TaskModel,
    TimeEntryModel,
)

VA_ID = "va-1"
OTHER_VA_ID = "va-2"


class Seeder:
    """Inserts rows owned by other features (clients, tasks, time entries, documents)."""

    def __init__(self, session):
        self.session = session

    def client(self, client_id, va_id=VA_ID, business_name=None, first_name=None, surname=None):
        self.session.add(ClientModel(
            id=client_id,
            va_id=va_id,
            business_name=business_name,
            first_name=first_name,
            surname=surname,
        ))
        self.session.commit()

    def task(self, task_id, client_id, task_name, va_id=VA_ID):
        self.session.add(TaskModel(id=task_id, va_id=va_id, client_id=client_id, task_name=task_name))
        self.session.commit()

    def entry(self, entry_id, task_id, started_at, minutes, notes=None, session_id=None, va_id=VA_ID):
        self.session.add(TimeEntryModel(
            id=entry_id,
            va_id=va_id,
            task_id=task_id,
            session_id=session_id,
            started_at=started_at,
            ended_at=started_at,
            duration_minutes=minutes,
            notes=notes,
        ))
        self.session.commit()

    def document(self, document_id, client_id, content=None, doc_type="invoice", va_id=VA_ID):
        self.session.add(ClientDocumentModel(
            id=document_id,
            va_id=va_id,
            client_id=client_id,
            type=doc_type,
            title="Invoice",
            status="draft",
            content=content or {},
            created_at=datetime(2024, 2, 1),
            updated_at=datetime(2024, 2, 1),
        ))
        self.session.commit()

    def remove_entry(self, entry_id):
        self.session.query(TimeEntryModel).filter_by(id=entry_id).delete()
        self.session.commit()


@pytest.fixture
def database():
    db = Database("sqlite:///:memory:")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    db_session = database.session()
    yield db_session
    db_session.close()


@pytest.fixture
def seed(session):
    return Seeder(session)


@pytest.fixture
def acme(seed):
    """Acme Co with three January entries, two of them in session S1."""
    seed.client("client-acme", business_name="Acme Co")
    seed.task("task-bookkeeping", "client-acme", "Bookkeeping")
    seed.task("task-inbox", "client-acme", "Inbox")
    seed.entry("te-1", "task-inbox", datetime(2024, 1, 10, 9, 0), 30, notes="Cleared inbox")
    seed.entry("te-2", "task-bookkeeping", datetime(2024, 1, 12, 14, 0), 45, session_id="S1")
    seed.entry("te-3", "task-bookkeeping", datetime(2024, 1, 12, 10, 0), 15, session_id="S1")
    return "client-acme"
