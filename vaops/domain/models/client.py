"""
Client domain model.
Clients are owned by the CRM feature; this core only reads them to label reports.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_CLIENT_LABEL = "Client"


@dataclass(frozen=True)
class Client:
    """A VA's client as seen by time reporting."""

    id: str
    va_id: str
    business_name: Optional[str] = None
    first_name: Optional[str] = None
    surname: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Business name, else personal name, else a generic label."""
        if self.business_name and self.business_name.strip():
            return self.business_name.strip()
        personal = f"{self.first_name or ''} {self.surname or ''}".strip()
        return personal or DEFAULT_CLIENT_LABEL
