import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Dict, Any


class DocumentStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class Document:
    """Сущность документа"""

    def __init__(
        self,
        id: uuid.UUID,
        uid: str,
        title: str,
        content_type: str,
        data: Dict[str, Any],
        status: DocumentStatus = DocumentStatus.DRAFT,
        published_at: Optional[datetime] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.uid = uid
        self.title = title
        self.content_type = content_type
        self.data = data
        self.status = DocumentStatus(status)
        self.published_at = published_at
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    @property
    def is_published(self) -> bool:
        return self.status == DocumentStatus.PUBLISHED

    def change_status(self, status: DocumentStatus) -> None:
        """Смена статуса публикации.

        publishedAt выставляется только на переходе draft -> published
        и сбрасывается на переходе published -> draft. Повторная публикация
        не меняет исходную дату.
        """
        status = DocumentStatus(status)
        if status == DocumentStatus.PUBLISHED and not self.is_published:
            self.published_at = datetime.now(timezone.utc)
        elif status == DocumentStatus.DRAFT and self.is_published:
            self.published_at = None

        self.status = status
        self.updated_at = datetime.now(timezone.utc)

    def update(
        self,
        title: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
        content_type: Optional[str] = None
    ) -> None:
        """Частичное обновление содержимого документа"""
        if title is not None:
            self.title = title
        if data is not None:
            self.data = data
        if content_type is not None:
            self.content_type = content_type
        self.updated_at = datetime.now(timezone.utc)

    @classmethod
    def create_document(
        cls,
        uid: str,
        title: str,
        content_type: str,
        data: Dict[str, Any],
        status: DocumentStatus = DocumentStatus.DRAFT
    ) -> "Document":
        """Создание нового документа"""
        status = DocumentStatus(status)
        return cls(
            id=uuid.uuid4(),
            uid=uid,
            title=title,
            content_type=content_type,
            data=data,
            status=status,
            published_at=datetime.now(timezone.utc) if status == DocumentStatus.PUBLISHED else None
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Document(uid={self.uid}, title={self.title}, status={self.status.value})"
