from app.domains.content_types.entities import ContentType
from app.domains.content_types.schemas import (
    ContentTypeCreate, ContentTypeUpdate, ContentTypeResponse, ContentTypeWithDocumentsResponse
)
from app.domains.content_types.services import ContentTypeService

__all__ = [
    "ContentType",
    "ContentTypeCreate", "ContentTypeUpdate", "ContentTypeResponse", "ContentTypeWithDocumentsResponse",
    "ContentTypeService"
]
