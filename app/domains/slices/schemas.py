from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SliceCreate(BaseModel):
    """Схема для создания слайса"""
    slice_type: str = Field(..., alias="sliceType", min_length=1)
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    schema_: Dict[str, Any] = Field(..., alias="schema")
    items_schema: Optional[Dict[str, Any]] = Field(None, alias="itemsSchema")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("slice_type", "name")
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class SliceUpdate(BaseModel):
    """Схема для частичного обновления слайса"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    schema_: Optional[Dict[str, Any]] = Field(None, alias="schema")
    items_schema: Optional[Dict[str, Any]] = Field(None, alias="itemsSchema")

    model_config = ConfigDict(populate_by_name=True)


class SliceResponse(BaseModel):
    """Схема для ответа с данными слайса"""
    slice_type: str = Field(..., alias="sliceType")
    name: str
    description: str
    schema_: Dict[str, Any] = Field(..., alias="schema")
    items_schema: Optional[Dict[str, Any]] = Field(None, alias="itemsSchema")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, slice_definition) -> "SliceResponse":
        return cls(
            slice_type=slice_definition.slice_type,
            name=slice_definition.name,
            description=slice_definition.description,
            schema_=slice_definition.schema,
            items_schema=slice_definition.items_schema,
            created_at=slice_definition.created_at,
            updated_at=slice_definition.updated_at
        )


class SliceValidationResponse(BaseModel):
    """Результат проверки данных слайса"""
    success: bool = True
    valid: bool
