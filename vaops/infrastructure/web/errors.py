"""
Translation of use case results into HTTP responses.
"""

from typing import Dict, TypeVar

from fastapi import HTTPException, status

from vaops.application.use_cases.base_use_case import UseCaseResult

T = TypeVar('T')

ERROR_STATUS_CODES: Dict[str, int] = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "BUSINESS_RULE_VIOLATION": status.HTTP_409_CONFLICT,
    "ENTITY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PERSISTENCE_ERROR": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for_error_code(error_code: str) -> int:
    return ERROR_STATUS_CODES.get(error_code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def unwrap_result(result: UseCaseResult[T]) -> T:
    """
    Return the data of a successful result.

    Raises:
        HTTPException: With the status mapped from the result's error code
    """
    if result.success:
        return result.data

    status_code = status_for_error_code(result.error_code)
    detail = result.error
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        detail = "An unexpected error occurred"

    raise HTTPException(
        status_code=status_code,
        detail={"error": result.error_code, "message": detail}
    )
