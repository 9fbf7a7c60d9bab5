import uuid

from sqlalchemy import Column, String, DateTime, JSON, UUID

from app.db.base import Base, TimestampMixin


class Document(TimestampMixin, Base):
    __tablename__ = "documents"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    uid = Column(String(255), unique=True, index=True, nullable=False)
    title = Column(String(255), nullable=False)
    # Ссылка на ContentType.name без внешнего ключа: типы и документы живут независимо
    content_type = Column(String(255), index=True, nullable=False)
    data = Column(JSON, nullable=False)
    status = Column(String(20), default="draft", nullable=False)
    published_at = Column(DateTime(timezone=True), nullable=True)
