"""
Client document repository implementation using SQLAlchemy.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vaops.domain.models.base import EntityNotFoundError, PersistenceError
from vaops.domain.models.document import ClientDocument
from vaops.domain.repositories.document_repository import ClientDocumentRepository as ClientDocumentRepositoryInterface
from vaops.infrastructure.db.models import ClientDocumentModel
from vaops.infrastructure.mappers.document_mapper import ClientDocumentMapper

logger = logging.getLogger(__name__)


class SQLAlchemyClientDocumentRepository(ClientDocumentRepositoryInterface):
    """SQLAlchemy implementation of client document repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = ClientDocumentMapper()
        self.model = ClientDocumentModel

    async def find_by_id(self, document_id: str, va_id: str) -> Optional[ClientDocument]:
        """Get one of the VA's documents by ID."""
        model = self.session.query(ClientDocumentModel).filter_by(
            id=document_id, va_id=va_id
        ).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    async def save_content(self, document: ClientDocument) -> ClientDocument:
        """Write the content blob back."""
        model = self.session.query(ClientDocumentModel).filter_by(
            id=document.id, va_id=document.va_id
        ).first()
        if not model:
            raise EntityNotFoundError("ClientDocument", document.id)

        try:
            model.content = dict(document.content)
            model.updated_at = document.updated_at or datetime.utcnow()
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(f"Failed to update document {document.id}: {exc}")
            raise PersistenceError("Could not update document") from exc

        return self.mapper.model_to_domain(model)
