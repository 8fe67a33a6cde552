"""
Base value objects and exceptions for the domain layer.
This module contains the foundational classes shared by all domain models.
"""

from datetime import datetime, date
from typing import Optional, Any, Dict
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
import uuid


def new_id() -> str:
    """Generate a new entity identifier."""
    return str(uuid.uuid4())


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when input or entity validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message, "BUSINESS_RULE_VIOLATION")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class PersistenceError(DomainException):
    """Exception raised when the backing store rejects or fails a write or read."""

    def __init__(self, message: str):
        super().__init__(message, "PERSISTENCE_ERROR")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.
    Value objects are immutable and are compared by their values.
    """

    def __post_init__(self):
        """Validate value object after creation."""
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """Validate the value object's state."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert value object to a plain dictionary."""
        data = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, (datetime, date)):
                data[item.name] = value.isoformat()
            elif isinstance(value, ValueObject):
                data[item.name] = value.to_dict()
            elif isinstance(value, tuple):
                data[item.name] = [
                    element.to_dict() if isinstance(element, ValueObject) else element
                    for element in value
                ]
            else:
                data[item.name] = value
        return data


@dataclass(frozen=True)
class DateRange(ValueObject):
    """Inclusive calendar date range."""

    date_from: date
    date_to: date

    def validate(self) -> None:
        """Validate date range."""
        if self.date_from is None:
            raise ValidationError("Start date is required", "date_from")
        if self.date_to is None:
            raise ValidationError("End date is required", "date_to")
        if self.date_to < self.date_from:
            raise ValidationError("End date cannot be before start date", "date_to")

    @property
    def days(self) -> int:
        """Number of calendar days covered by the range."""
        return (self.date_to - self.date_from).days + 1
