from app.domains.fields.schemas import (
    SchemaContext, SliceFieldType, ContentTypeFieldType,
    SliceField, ContentTypeField, SliceSchema, ContentTypeSchema
)
from app.domains.fields.validation import validate_schema

__all__ = [
    "SchemaContext", "SliceFieldType", "ContentTypeFieldType",
    "SliceField", "ContentTypeField", "SliceSchema", "ContentTypeSchema",
    "validate_schema"
]
