from app.domains.documents.entities import Document, DocumentStatus
from app.domains.documents.schemas import (
    SliceInstance, DocumentData, DocumentCreate, DocumentUpdate, DocumentResponse
)
from app.domains.documents.services import DocumentService
from app.domains.documents.validation import validate_document_data

__all__ = [
    "Document", "DocumentStatus",
    "SliceInstance", "DocumentData", "DocumentCreate", "DocumentUpdate", "DocumentResponse",
    "DocumentService", "validate_document_data"
]
