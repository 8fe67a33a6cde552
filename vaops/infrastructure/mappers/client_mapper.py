"""
Client mapper for converting database rows into domain entities.
"""

from vaops.domain.models.client import Client
from vaops.infrastructure.db.models import ClientModel


class ClientMapper:
    """Maps ClientModel rows to Client entities."""

    def model_to_domain(self, model: ClientModel) -> Client:
        return Client(
            id=model.id,
            va_id=model.va_id,
            business_name=model.business_name,
            first_name=model.first_name,
            surname=model.surname,
        )
