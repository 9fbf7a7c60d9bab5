import logging
from typing import Optional
import uuid

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.errors import AppError, NotFoundError, ValidationError
from app.db.repositories.asset_repository import AssetRepository
from app.domains.assets.entities import Asset
from app.domains.assets.storage import (
    generate_filename, get_public_url, is_allowed_mime_type,
    remove_file, sanitize_filename, save_file
)
from app.domains.common.schemas import Page

logger = logging.getLogger(__name__)


class AssetService:
    """Сервис для работы с загруженными файлами"""

    def __init__(self, session: AsyncSession, settings: Settings):
        self.session = session
        self.settings = settings
        self.asset_repository = AssetRepository(session)

    async def create_asset(self, upload: UploadFile, alt_text: Optional[str] = None) -> Asset:
        """Загрузка файла: сначала запись на диск, затем запись в БД.

        Если вставка в БД не удалась, файл удаляется (одна попытка),
        исходная ошибка пробрасывается дальше.
        """
        mime_type = upload.content_type or ""
        if not is_allowed_mime_type(mime_type, self.settings.allowed_mime_types):
            raise ValidationError("Invalid file type")

        max_size = self.settings.max_file_size
        # Читается не больше лимита плюс один байт
        if upload.size is not None and upload.size > max_size:
            raise self._too_large()
        content = await upload.read(max_size + 1)
        if len(content) > max_size:
            raise self._too_large()

        original_name = sanitize_filename(upload.filename or "file")
        stored_name = generate_filename(original_name)
        save_file(self.settings.upload_dir, stored_name, content)

        asset = Asset.create_asset(
            filename=original_name,
            mime_type=mime_type,
            url=get_public_url(self.settings.api_url, stored_name),
            size=len(content),
            alt_text=alt_text
        )

        try:
            created = await self.asset_repository.create(asset)
        except Exception:
            self._cleanup(stored_name)
            raise

        logger.info(f"Asset {created.id} stored as {stored_name} ({created.size} bytes)")
        return created

    async def get_asset(self, asset_id: uuid.UUID) -> Asset:
        """Получение файла по id"""
        asset = await self.asset_repository.get_by_id(asset_id)

        if not asset:
            raise NotFoundError("Asset not found")

        return asset

    async def list_assets(
        self,
        search: Optional[str] = None,
        mime_type: Optional[str] = None,
        page: int = 1,
        limit: int = 50
    ) -> Page:
        """Страница файлов с поиском по имени/altText и фильтром по префиксу MIME"""
        offset = (page - 1) * limit
        assets = await self.asset_repository.list(
            search=search,
            mime_type=mime_type,
            limit=limit,
            offset=offset
        )
        total = await self.asset_repository.count(search=search, mime_type=mime_type)
        return Page(assets, page, limit, total)

    async def update_asset(self, asset_id: uuid.UUID, alt_text: Optional[str]) -> Asset:
        """Обновление altText"""
        asset = await self.get_asset(asset_id)
        asset.update_alt_text(alt_text)

        updated = await self.asset_repository.update(asset)
        if not updated:
            raise NotFoundError("Asset not found")

        return updated

    async def delete_asset(self, asset_id: uuid.UUID) -> None:
        """Удаление файла с диска, затем записи в БД"""
        asset = await self.get_asset(asset_id)

        remove_file(self.settings.upload_dir, asset.stored_name)

        if not await self.asset_repository.delete(asset_id):
            raise NotFoundError("Asset not found")

    def _too_large(self) -> AppError:
        return AppError(f"File too large. Maximum size is {self.settings.max_file_size} bytes", 413)

    def _cleanup(self, stored_name: str) -> None:
        try:
            remove_file(self.settings.upload_dir, stored_name)
        except OSError as e:
            logger.error(f"Failed to clean up uploaded file {stored_name}: {e}")
