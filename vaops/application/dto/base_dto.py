"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Dict, Optional
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, ConfigDict


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    id: Optional[str] = None
    created_at: Optional[datetime] = None


class HealthCheckResponseDTO(BaseDTO):
    """Health check response DTO."""

    status: str = Field(description="Service status")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    version: Optional[str] = Field(default=None, description="Application version")
    environment: Optional[str] = Field(default=None, description="Deployment environment")
    dependencies: Optional[Dict[str, str]] = Field(default=None, description="Dependency statuses")


class ReportAudience(str, Enum):
    """Who a report breakdown is being shown to."""
    VA = "va"
    CLIENT = "client"
