from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domains.common.schemas import PaginationMeta
from app.domains.documents.schemas import DocumentResponse


class ContentTypeCreate(BaseModel):
    """Схема для создания типа контента"""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    schema_: Dict[str, Any] = Field(..., alias="schema")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()


class ContentTypeUpdate(BaseModel):
    """Схема для частичного обновления типа контента"""
    description: Optional[str] = None
    schema_: Optional[Dict[str, Any]] = Field(None, alias="schema")

    model_config = ConfigDict(populate_by_name=True)


class ContentTypeResponse(BaseModel):
    """Схема для ответа с данными типа контента"""
    name: str
    description: str
    schema_: Dict[str, Any] = Field(..., alias="schema")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")
    document_count: Optional[int] = Field(None, alias="documentCount")
    documents: Optional[List[DocumentResponse]] = None

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, content_type, include_documents: bool = False) -> "ContentTypeResponse":
        return cls(
            name=content_type.name,
            description=content_type.description,
            schema_=content_type.schema,
            created_at=content_type.created_at,
            updated_at=content_type.updated_at,
            document_count=content_type.document_count,
            documents=(
                [DocumentResponse.from_entity(doc) for doc in content_type.recent_documents]
                if include_documents else None
            )
        )


class ContentTypeWithDocumentsResponse(BaseModel):
    """Тип контента со страницей опубликованных документов"""
    success: bool = True
    content_type: ContentTypeResponse = Field(..., alias="contentType")
    documents: List[DocumentResponse]
    meta: PaginationMeta

    model_config = ConfigDict(populate_by_name=True)
