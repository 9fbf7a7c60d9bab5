from app.db.base import Base
from app.db.models.content_type import ContentType
from app.db.models.slice import SliceDefinition
from app.db.models.document import Document
from app.db.models.asset import Asset

__all__ = [
    "Base",
    "ContentType",
    "SliceDefinition",
    "Document",
    "Asset"
]
