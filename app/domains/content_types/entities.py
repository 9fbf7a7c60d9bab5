from datetime import datetime, timezone
from typing import Optional, Dict, Any, List


class ContentType:
    """Сущность типа контента"""

    def __init__(
        self,
        name: str,
        schema: Dict[str, Any],
        description: str = "",
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        document_count: Optional[int] = None
    ):
        self.name = name
        self.description = description or ""
        self.schema = schema
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)
        self.document_count = document_count
        # Последние документы подгружаются только для детального просмотра
        self.recent_documents: List = []

    def update(self, description: Optional[str] = None, schema: Optional[Dict[str, Any]] = None) -> None:
        """Частичное обновление типа контента"""
        if description is not None:
            self.description = description
        if schema is not None:
            self.schema = schema
        self.updated_at = datetime.now(timezone.utc)

    @classmethod
    def create_content_type(cls, name: str, schema: Dict[str, Any], description: str = "") -> "ContentType":
        """Создание нового типа контента"""
        return cls(name=name, schema=schema, description=description)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ContentType):
            return False
        return self.name == other.name

    def __repr__(self) -> str:
        return f"ContentType(name={self.name})"
