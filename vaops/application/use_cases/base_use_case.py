"""
Base use case classes for the application layer.
Provides common patterns and structure for use case implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar, Generic, List
from dataclasses import dataclass
from datetime import datetime

from vaops.domain.events.base import DomainEvent, EventDispatcher
from vaops.domain.models.base import DomainException, ValidationError, BusinessRuleViolation


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success_result(cls, data: T, metadata: Optional[Dict[str, Any]] = None) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def error_result(
        cls,
        error: str,
        error_code: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            metadata=metadata
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "UseCaseResult[T]":
        """Create error result from exception."""
        if isinstance(exc, ValidationError):
            return cls.error_result(exc.message, "VALIDATION_ERROR")
        elif isinstance(exc, BusinessRuleViolation):
            return cls.error_result(exc.message, "BUSINESS_RULE_VIOLATION")
        elif isinstance(exc, DomainException):
            return cls.error_result(exc.message, exc.code)
        else:
            return cls.error_result(str(exc), "UNKNOWN_ERROR")


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.
    Provides common structure and error handling.
    """

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    async def execute(self, request: T) -> UseCaseResult[R]:
        """
        Execute the use case with proper error handling and logging.
        """
        self.execution_start = datetime.utcnow()
        use_case_name = self.__class__.__name__

        try:
            # Validate input
            await self._validate_request(request)

            # Execute business logic
            result = await self._execute_business_logic(request)

            self.execution_end = datetime.utcnow()
            execution_time = (self.execution_end - self.execution_start).total_seconds()
            logger.debug(f"{use_case_name} completed in {execution_time:.3f}s")

            return UseCaseResult.success_result(
                result,
                metadata={
                    "execution_time_seconds": execution_time,
                    "executed_at": self.execution_end.isoformat()
                }
            )

        except Exception as exc:
            self.execution_end = datetime.utcnow()
            execution_time = (self.execution_end - self.execution_start).total_seconds()

            if isinstance(exc, DomainException):
                logger.info(f"{use_case_name} rejected: {exc.code}: {exc.message}")
            else:
                logger.exception(f"{use_case_name} failed unexpectedly")

            error_result = UseCaseResult.from_exception(exc)
            error_result.metadata = {
                "execution_time_seconds": execution_time,
                "failed_at": self.execution_end.isoformat(),
                "exception_type": type(exc).__name__
            }

            return error_result

    async def _validate_request(self, request: T) -> None:
        """
        Validate the request. Override in subclasses if needed.
        """
        if hasattr(request, 'model_validate'):
            # Pydantic models
            request.model_validate(request.model_dump())
        elif hasattr(request, 'validate'):
            # Custom validation
            request.validate()

    @abstractmethod
    async def _execute_business_logic(self, request: T) -> R:
        """
        Execute the core business logic. Must be implemented by subclasses.
        """
        pass


class QueryUseCase(BaseUseCase[T, R]):
    """
    Base class for query use cases (read operations).
    """
    pass


class CommandUseCase(BaseUseCase[T, R]):
    """
    Base class for command use cases (write operations).
    Events collected while the command runs are published after it succeeds.
    """

    def __init__(self):
        super().__init__()
        self.events: List[DomainEvent] = []
        self.event_dispatcher: Optional[EventDispatcher] = None

    async def _execute_business_logic(self, request: T) -> R:
        try:
            result = await self._execute_command_logic(request)
        except Exception:
            self.events.clear()
            raise

        await self._publish_events()
        return result

    @abstractmethod
    async def _execute_command_logic(self, request: T) -> R:
        """Execute the command logic. Must be implemented by subclasses."""
        pass

    def _record_event(self, event: DomainEvent) -> None:
        self.events.append(event)

    async def _publish_events(self) -> None:
        """Publish collected domain events."""
        events, self.events = self.events, []
        if self.event_dispatcher is None:
            return
        for event in events:
            await self.event_dispatcher.dispatch(event)


class SearchUseCase(QueryUseCase[T, R]):
    """Base class for search use cases."""

    min_query_length = 2

    async def _validate_request(self, request: T) -> None:
        """Validate search request."""
        await super()._validate_request(request)

        if hasattr(request, 'query'):
            if not request.query or not request.query.strip():
                raise ValidationError("Search query cannot be empty", "query")
            if len(request.query.strip()) < self.min_query_length:
                raise ValidationError(
                    f"Search query must be at least {self.min_query_length} characters", "query"
                )


# Authorization mixin
class AuthorizedUseCase(BaseUseCase[T, R]):
    """
    Mixin for use cases that act on behalf of an authenticated VA.
    """

    def __init__(self):
        super().__init__()
        self.current_user_id: Optional[str] = None

    def set_current_user(self, user_id: str) -> "AuthorizedUseCase":
        """Set the current user context."""
        self.current_user_id = user_id
        return self

    async def _validate_request(self, request: T) -> None:
        """Validate request with authorization check."""
        await super()._validate_request(request)

        if not self.current_user_id:
            raise ValidationError("User authentication required")

        await self._check_authorization(request)

    async def _check_authorization(self, request: T) -> None:
        """Check if the current user is authorized. Override in subclasses."""
        pass
