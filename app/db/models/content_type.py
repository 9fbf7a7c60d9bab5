from sqlalchemy import Column, String, Text, JSON

from app.db.base import Base, TimestampMixin


class ContentType(TimestampMixin, Base):
    __tablename__ = "content_types"

    name = Column(String(255), primary_key=True)
    description = Column(Text, default="")
    schema = Column(JSON, nullable=False)
