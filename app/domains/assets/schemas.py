from datetime import datetime
from typing import Optional
import uuid

from pydantic import BaseModel, ConfigDict, Field


class AssetUpdate(BaseModel):
    """Схема для обновления метаданных файла"""
    alt_text: Optional[str] = Field(None, alias="altText")

    model_config = ConfigDict(populate_by_name=True)


class AssetResponse(BaseModel):
    """Схема для ответа с данными файла"""
    id: uuid.UUID
    filename: str
    mime_type: str = Field(..., alias="mimeType")
    url: str
    size: int
    width: Optional[int] = None
    height: Optional[int] = None
    alt_text: Optional[str] = Field(None, alias="altText")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, asset) -> "AssetResponse":
        return cls(
            id=asset.id,
            filename=asset.filename,
            mime_type=asset.mime_type,
            url=asset.url,
            size=asset.size,
            width=asset.width,
            height=asset.height,
            alt_text=asset.alt_text,
            created_at=asset.created_at,
            updated_at=asset.updated_at
        )
