from sqlalchemy import Column, String, Text, JSON

from app.db.base import Base, TimestampMixin


class SliceDefinition(TimestampMixin, Base):
    __tablename__ = "slice_definitions"

    slice_type = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, default="")
    schema = Column(JSON, nullable=False)
    items_schema = Column(JSON, nullable=True)
