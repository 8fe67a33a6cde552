"""
SQLAlchemy models for the database.
Maps domain entities to the Supabase tables used by time reporting.

Timestamps are stored as naive UTC.
"""

from datetime import datetime
import uuid

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Date, ForeignKey, JSON,
    Index, CheckConstraint
)
from sqlalchemy.orm import relationship

from .database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


class ClientModel(Base):
    """Client table (owned by the CRM feature)"""
    __tablename__ = 'clients'

    id = Column(String(36), primary_key=True, default=_uuid)
    va_id = Column(String(36), nullable=False)
    business_name = Column(String(255))
    first_name = Column(String(255))
    surname = Column(String(255))

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    tasks = relationship("TaskModel", back_populates="client")

    __table_args__ = (
        Index('idx_clients_va_surname', 'va_id', 'surname'),
    )


class TaskModel(Base):
    """Task table (owned by the task board)"""
    __tablename__ = 'tasks'

    id = Column(String(36), primary_key=True, default=_uuid)
    va_id = Column(String(36), nullable=False)
    client_id = Column(String(36), ForeignKey('clients.id', ondelete='CASCADE'), nullable=False)
    task_name = Column(String(500))

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    client = relationship("ClientModel", back_populates="tasks")
    time_entries = relationship("TimeEntryModel", back_populates="task")

    __table_args__ = (
        Index('idx_tasks_client', 'client_id'),
    )


class TimeEntryModel(Base):
    """Time entry table (owned by time tracking)"""
    __tablename__ = 'time_entries'

    id = Column(String(36), primary_key=True, default=_uuid)
    va_id = Column(String(36), nullable=False)
    task_id = Column(String(36), ForeignKey('tasks.id', ondelete='SET NULL'))
    session_id = Column(String(36))

    started_at = Column(DateTime, nullable=False)
    ended_at = Column(DateTime)
    duration_minutes = Column(Integer, nullable=False, default=0)
    notes = Column(Text)

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    task = relationship("TaskModel", back_populates="time_entries")

    __table_args__ = (
        Index('idx_time_entries_va_started', 'va_id', 'started_at'),
        Index('idx_time_entries_session', 'session_id'),
    )


class TimeReportModel(Base):
    """Saved time report snapshot"""
    __tablename__ = 'time_reports'

    id = Column(String(36), primary_key=True, default=_uuid)
    va_user_id = Column(String(36), nullable=False)
    client_id = Column(String(36), ForeignKey('clients.id', ondelete='CASCADE'), nullable=False)
    name = Column(String(500), nullable=False)
    date_from = Column(Date, nullable=False)
    date_to = Column(Date, nullable=False)
    total_seconds = Column(Integer, nullable=False, default=0)
    entry_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    client = relationship("ClientModel")
    entries = relationship(
        "TimeReportEntryModel",
        back_populates="report",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index('idx_time_reports_va_created', 'va_user_id', 'created_at'),
        Index('idx_time_reports_client', 'client_id'),
        CheckConstraint('date_from <= date_to', name='check_time_report_date_range'),
        CheckConstraint('total_seconds >= 0', name='check_time_report_total'),
    )


class TimeReportEntryModel(Base):
    """
    One frozen line of a time report.
    source_time_entry_id is deliberately not a foreign key: the line must
    survive edits and deletion of the time entry it was copied from.
    """
    __tablename__ = 'time_report_entries'

    id = Column(String(36), primary_key=True, default=_uuid)
    report_id = Column(String(36), ForeignKey('time_reports.id', ondelete='CASCADE'), nullable=False)
    entry_date = Column(DateTime, nullable=False)
    task_title = Column(Text, nullable=False)
    duration_seconds = Column(Integer, nullable=False, default=0)
    notes = Column(Text)
    source_time_entry_id = Column(String(36))

    # Relationships
    report = relationship("TimeReportModel", back_populates="entries")

    __table_args__ = (
        Index('idx_time_report_entries_report', 'report_id', 'entry_date'),
    )


class ClientDocumentModel(Base):
    """Client document table (invoices, proposals, booking forms)"""
    __tablename__ = 'client_documents'

    id = Column(String(36), primary_key=True, default=_uuid)
    va_id = Column(String(36), nullable=False)
    client_id = Column(String(36), ForeignKey('clients.id', ondelete='CASCADE'), nullable=False)
    type = Column(String(50), nullable=False)
    title = Column(String(500))
    status = Column(String(50))
    content = Column(JSON)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index('idx_client_documents_va_client', 'va_id', 'client_id'),
    )
