from app.db.repositories.content_type_repository import ContentTypeRepository
from app.db.repositories.slice_repository import SliceRepository
from app.db.repositories.document_repository import DocumentRepository
from app.db.repositories.asset_repository import AssetRepository

__all__ = [
    "ContentTypeRepository",
    "SliceRepository",
    "DocumentRepository",
    "AssetRepository"
]
