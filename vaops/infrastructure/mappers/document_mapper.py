"""
Client document mapper.
"""

from vaops.domain.models.document import ClientDocument
from vaops.infrastructure.db.models import ClientDocumentModel


class ClientDocumentMapper:
    """Maps ClientDocumentModel rows to ClientDocument entities."""

    def model_to_domain(self, model: ClientDocumentModel) -> ClientDocument:
        return ClientDocument(
            id=model.id,
            va_id=model.va_id,
            client_id=model.client_id,
            doc_type=model.type,
            title=model.title,
            status=model.status,
            content=dict(model.content or {}),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
