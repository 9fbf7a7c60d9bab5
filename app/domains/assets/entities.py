import uuid
from datetime import datetime, timezone
from typing import Optional


class Asset:
    """Сущность загруженного файла"""

    def __init__(
        self,
        id: uuid.UUID,
        filename: str,
        mime_type: str,
        url: str,
        size: int,
        width: Optional[int] = None,
        height: Optional[int] = None,
        alt_text: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None
    ):
        self.id = id
        self.filename = filename
        self.mime_type = mime_type
        self.url = url
        self.size = size
        # Размеры изображений не вычисляются
        self.width = width
        self.height = height
        self.alt_text = alt_text
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    @property
    def stored_name(self) -> str:
        """Имя файла на диске (последний сегмент url)"""
        return self.url.rstrip("/").rsplit("/", 1)[-1]

    def update_alt_text(self, alt_text: Optional[str]) -> None:
        self.alt_text = alt_text
        self.updated_at = datetime.now(timezone.utc)

    @classmethod
    def create_asset(
        cls,
        filename: str,
        mime_type: str,
        url: str,
        size: int,
        alt_text: Optional[str] = None
    ) -> "Asset":
        """Создание записи о новом файле"""
        return cls(
            id=uuid.uuid4(),
            filename=filename,
            mime_type=mime_type,
            url=url,
            size=size,
            alt_text=alt_text
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Asset):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"Asset(id={self.id}, filename={self.filename})"
