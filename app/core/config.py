from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./cms.db"
    database_echo: bool = False
    # Для разработки и тестов; в продакшене схему ведёт alembic
    auto_create_tables: bool = False

    environment: str = "development"
    log_level: str = "INFO"
    api_url: str = "http://localhost:3001"

    upload_dir: str = "./uploads"
    max_file_size: int = 10 * 1024 * 1024
    allowed_mime_types: List[str] = [
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/webp",
        "image/svg+xml",
        "application/pdf",
    ]

    # Список URL через запятую
    slice_webhook_urls: str = "http://localhost:3000/api/webhooks/slices"
    webhook_secret: str = "your-secret-key"
    webhook_timeout: float = 10.0

    admin_jwt_secret: Optional[str] = None
    jwt_algorithm: str = "HS256"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def webhook_urls(self) -> List[str]:
        """Список адресов вебхуков слайсов"""
        return [url.strip() for url in self.slice_webhook_urls.split(",") if url.strip()]

    @property
    def is_development(self) -> bool:
        return self.environment == "development"
