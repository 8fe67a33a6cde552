"""
Client repository implementation using SQLAlchemy.
"""

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from vaops.domain.models.client import Client
from vaops.domain.repositories.client_repository import ClientRepository as ClientRepositoryInterface
from vaops.infrastructure.db.models import ClientModel
from vaops.infrastructure.mappers.client_mapper import ClientMapper


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLAlchemyClientRepository(ClientRepositoryInterface):
    """SQLAlchemy implementation of client repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = ClientMapper()
        self.model = ClientModel

    async def find_by_id(self, client_id: str, va_id: str) -> Optional[Client]:
        """Get one of the VA's clients by ID."""
        model = self.session.query(ClientModel).filter_by(
            id=client_id, va_id=va_id
        ).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    async def search(self, va_id: str, query: str, limit: int = 20) -> List[Client]:
        """Search the VA's clients by name."""
        pattern = f"%{_escape_like(query.strip())}%"
        models = self.session.query(ClientModel).filter(
            ClientModel.va_id == va_id,
            or_(
                ClientModel.surname.ilike(pattern, escape="\\"),
                ClientModel.business_name.ilike(pattern, escape="\\"),
                ClientModel.first_name.ilike(pattern, escape="\\"),
            )
        ).order_by(ClientModel.surname, ClientModel.id).limit(limit).all()

        return [self.mapper.model_to_domain(model) for model in models]
