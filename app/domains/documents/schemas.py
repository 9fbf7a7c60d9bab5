from datetime import datetime
from typing import Any, Dict, List, Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domains.documents.entities import DocumentStatus


class SliceInstance(BaseModel):
    """Экземпляр слайса в теле документа"""
    slice_type: str = Field(..., min_length=1)
    slice_label: Optional[str] = None
    primary: Dict[str, Any]
    items: Optional[List[Dict[str, Any]]] = None


class DocumentData(BaseModel):
    """Содержимое документа: title, uid и упорядоченное тело из слайсов.

    Дополнительные ключи верхнего уровня (поля конкретного типа контента)
    сохраняются как есть.
    """
    title: str = Field(..., min_length=1)
    uid: str = Field(..., min_length=1)
    body: List[SliceInstance]

    model_config = ConfigDict(extra="allow")


class DocumentCreate(BaseModel):
    """Схема для создания документа"""
    uid: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    content_type: str = Field(..., alias="contentType", min_length=1)
    data: Dict[str, Any]
    status: DocumentStatus = DocumentStatus.DRAFT

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("uid", "title", "content_type")
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class DocumentUpdate(BaseModel):
    """Схема для частичного обновления документа"""
    title: Optional[str] = Field(None, min_length=1)
    content_type: Optional[str] = Field(None, alias="contentType", min_length=1)
    data: Optional[Dict[str, Any]] = None
    status: Optional[DocumentStatus] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip() if v else v


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: uuid.UUID
    uid: str
    title: str
    content_type: str = Field(..., alias="contentType")
    data: Dict[str, Any]
    status: DocumentStatus
    published_at: Optional[datetime] = Field(None, alias="publishedAt")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, document) -> "DocumentResponse":
        return cls(
            id=document.id,
            uid=document.uid,
            title=document.title,
            content_type=document.content_type,
            data=document.data,
            status=document.status,
            published_at=document.published_at,
            created_at=document.created_at,
            updated_at=document.updated_at
        )
