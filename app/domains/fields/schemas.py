from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, StrictBool


class SchemaContext(str, Enum):
    """Контекст, в котором описывается схема полей"""
    CONTENT_TYPE = "content_type"
    SLICE = "slice"


class SliceFieldType(str, Enum):
    TEXT = "text"
    RICH_TEXT = "rich_text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    IMAGE = "image"
    GROUP = "group"
    SELECT = "select"
    DATE = "date"


class ContentTypeFieldType(str, Enum):
    TEXT = "text"
    UID = "uid"
    BOOLEAN = "boolean"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"


class FieldDescriptorBase(BaseModel):
    """Базовое описание поля схемы"""
    id: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    required: StrictBool = False
    # Открытый словарь, форма не проверяется
    config: Dict[str, Any] = Field(default_factory=dict)


class SliceField(FieldDescriptorBase):
    """Поле слайса"""
    type: SliceFieldType


class ContentTypeField(FieldDescriptorBase):
    """Поле типа контента"""
    type: ContentTypeFieldType


class ContentTypeSchema(BaseModel):
    """Схема типа контента: упорядоченный список полей.

    По соглашению ровно одно поле имеет тип uid (слаг документа),
    но валидация этого не требует.
    """
    fields: List[ContentTypeField]


class SliceSchema(BaseModel):
    """Схема слайса: поля primary и необязательные поля повторяемых items"""
    primary: List[SliceField]
    items: Optional[List[SliceField]] = None


SCHEMA_MODELS = {
    SchemaContext.CONTENT_TYPE: ContentTypeSchema,
    SchemaContext.SLICE: SliceSchema,
}
