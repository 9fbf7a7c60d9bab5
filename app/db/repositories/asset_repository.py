from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func, or_
import uuid

from app.db.models.asset import Asset as AssetModel

if TYPE_CHECKING:
    from app.domains.assets.entities import Asset


class AssetRepository:
    """Репозиторий для работы с файлами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, asset: "Asset") -> "Asset":
        """Создание записи о файле"""
        db_asset = AssetModel(
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

        self.session.add(db_asset)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(db_asset)
        return self._to_domain(db_asset)

    async def get_by_id(self, asset_id: uuid.UUID) -> Optional["Asset"]:
        """Получение файла по id"""
        result = await self.session.execute(
            select(AssetModel).where(AssetModel.id == asset_id)
        )
        db_asset = result.scalar_one_or_none()
        return self._to_domain(db_asset) if db_asset else None

    async def list(
        self,
        search: Optional[str] = None,
        mime_type: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List["Asset"]:
        """Список файлов, новые сначала"""
        query = self._filtered(select(AssetModel), search, mime_type)
        result = await self.session.execute(
            query
            .order_by(AssetModel.created_at.desc(), AssetModel.filename)
            .offset(offset)
            .limit(limit)
        )
        return [self._to_domain(db_asset) for db_asset in result.scalars().all()]

    async def count(self, search: Optional[str] = None, mime_type: Optional[str] = None) -> int:
        """Подсчет файлов с теми же фильтрами, что и list"""
        query = self._filtered(select(func.count(AssetModel.id)), search, mime_type)
        result = await self.session.execute(query)
        return result.scalar()

    async def update(self, asset: "Asset") -> Optional["Asset"]:
        """Обновление метаданных файла"""
        stmt = (
            update(AssetModel)
            .where(AssetModel.id == asset.id)
            .values(alt_text=asset.alt_text, updated_at=asset.updated_at)
        )

        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            return None
        return await self.get_by_id(asset.id)

    async def delete(self, asset_id: uuid.UUID) -> bool:
        """Удаление записи о файле"""
        stmt = delete(AssetModel).where(AssetModel.id == asset_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    @staticmethod
    def _filtered(query, search: Optional[str], mime_type: Optional[str]):
        if search:
            query = query.where(
                or_(
                    AssetModel.filename.ilike(f"%{search}%"),
                    AssetModel.alt_text.ilike(f"%{search}%")
                )
            )

        if mime_type:
            query = query.where(AssetModel.mime_type.startswith(mime_type))

        return query

    def _to_domain(self, db_asset: AssetModel) -> "Asset":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.assets.entities import Asset

        return Asset(
            id=db_asset.id,
            filename=db_asset.filename,
            mime_type=db_asset.mime_type,
            url=db_asset.url,
            size=db_asset.size,
            width=db_asset.width,
            height=db_asset.height,
            alt_text=db_asset.alt_text,
            created_at=db_asset.created_at,
            updated_at=db_asset.updated_at
        )
