"""
Unit tests for the use case base classes.
"""

import pytest

from vaops.application.use_cases.base_use_case import (
    AuthorizedUseCase,
    CommandUseCase,
    QueryUseCase,
    UseCaseResult,
)
from vaops.domain.events.base import ALL_EVENTS, EventDispatcher
from vaops.domain.events.time_report_events import TimeReportDeleted
from vaops.domain.models.base import (
    BusinessRuleViolation,
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)


class TestUseCaseResult:
    """Test cases for UseCaseResult."""

    def test_success_result(self):
        result = UseCaseResult.success_result({"id": "r1"})

        assert result.success is True
        assert result.data == {"id": "r1"}
        assert result.error is None
        assert result.error_code is None

    def test_error_result_with_metadata(self):
        result = UseCaseResult.error_result("Error", "ERR_001", {"attempt": 1})

        assert result.success is False
        assert result.error_code == "ERR_001"
        assert result.metadata == {"attempt": 1}

    @pytest.mark.parametrize("exc, code", [
        (ValidationError("bad"), "VALIDATION_ERROR"),
        (BusinessRuleViolation("no"), "BUSINESS_RULE_VIOLATION"),
        (EntityNotFoundError("TimeReport", "r1"), "ENTITY_NOT_FOUND"),
        (PersistenceError("down"), "PERSISTENCE_ERROR"),
        (RuntimeError("boom"), "UNKNOWN_ERROR"),
    ])
    def test_from_exception(self, exc, code):
        assert UseCaseResult.from_exception(exc).error_code == code


class EchoQuery(AuthorizedUseCase, QueryUseCase[str, str]):
    async def _execute_business_logic(self, request: str) -> str:
        if request == "fail":
            raise ValidationError("Request rejected")
        return f"{self.current_user_id}:{request}"


class DeleteCommand(AuthorizedUseCase, CommandUseCase[str, bool]):
    def __init__(self, dispatcher, fail=False):
        super().__init__()
        self.event_dispatcher = dispatcher
        self.fail = fail

    async def _execute_command_logic(self, request: str) -> bool:
        self._record_event(TimeReportDeleted(report_id=request, va_user_id=self.current_user_id))
        if self.fail:
            raise PersistenceError("Could not delete")
        return True


class TestBaseUseCase:
    """Test cases for execution, authorization and event publishing."""

    @pytest.mark.asyncio
    async def test_requires_current_user(self):
        result = await EchoQuery().execute("hello")

        assert result.success is False
        assert result.error_code == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_success_carries_metadata(self):
        result = await EchoQuery().set_current_user("va-1").execute("hello")

        assert result.success is True
        assert result.data == "va-1:hello"
        assert "execution_time_seconds" in result.metadata

    @pytest.mark.asyncio
    async def test_domain_error_becomes_result(self):
        result = await EchoQuery().set_current_user("va-1").execute("fail")

        assert result.success is False
        assert result.error == "Request rejected"
        assert result.metadata["exception_type"] == "ValidationError"

    @pytest.mark.asyncio
    async def test_events_published_after_success(self):
        dispatcher = EventDispatcher()
        received = []

        async def listener(event):
            received.append(event)

        dispatcher.subscribe(ALL_EVENTS, listener)

        result = await DeleteCommand(dispatcher).set_current_user("va-1").execute("r1")

        assert result.success is True
        assert [event.report_id for event in received] == ["r1"]

    @pytest.mark.asyncio
    async def test_events_dropped_on_failure(self):
        dispatcher = EventDispatcher()
        received = []

        async def listener(event):
            received.append(event)

        dispatcher.subscribe(ALL_EVENTS, listener)
        use_case = DeleteCommand(dispatcher, fail=True).set_current_user("va-1")

        result = await use_case.execute("r1")

        assert result.error_code == "PERSISTENCE_ERROR"
        assert received == []
        assert use_case.events == []
