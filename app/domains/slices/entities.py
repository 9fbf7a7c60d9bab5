from datetime import datetime, timezone
from typing import Optional, Dict, Any


class SliceDefinition:
    """Сущность определения слайса"""

    def __init__(
        self,
        slice_type: str,
        name: str,
        schema: Dict[str, Any],
        description: str = "",
        items_schema: Optional[Dict[str, Any]] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.slice_type = slice_type
        self.name = name
        self.description = description or ""
        self.schema = schema
        self.items_schema = items_schema
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    def update(self, **changes: Any) -> None:
        """Частичное обновление: меняются только переданные поля"""
        for field in ("name", "description", "schema", "items_schema"):
            if field in changes:
                setattr(self, field, changes[field])
        self.updated_at = datetime.now(timezone.utc)

    def to_payload(self) -> Dict[str, Any]:
        """Представление для уведомлений вебхуков"""
        return {
            "sliceType": self.slice_type,
            "name": self.name,
            "description": self.description,
            "schema": self.schema,
            "itemsSchema": self.items_schema,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }

    @classmethod
    def create_slice(
        cls,
        slice_type: str,
        name: str,
        schema: Dict[str, Any],
        description: str = "",
        items_schema: Optional[Dict[str, Any]] = None
    ) -> "SliceDefinition":
        """Создание нового определения слайса"""
        return cls(
            slice_type=slice_type,
            name=name,
            schema=schema,
            description=description,
            items_schema=items_schema
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, SliceDefinition):
            return False
        return self.slice_type == other.slice_type

    def __repr__(self) -> str:
        return f"SliceDefinition(slice_type={self.slice_type}, name={self.name})"
