from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError

from app.db.errors import DuplicateEntityError
from app.db.models.slice import SliceDefinition as SliceModel

if TYPE_CHECKING:
    from app.domains.slices.entities import SliceDefinition


class SliceRepository:
    """Репозиторий для работы с определениями слайсов"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, slice_definition: "SliceDefinition") -> "SliceDefinition":
        """Создание нового определения слайса"""
        db_slice = SliceModel(
            slice_type=slice_definition.slice_type,
            name=slice_definition.name,
            description=slice_definition.description,
            schema=slice_definition.schema,
            items_schema=slice_definition.items_schema,
            created_at=slice_definition.created_at,
            updated_at=slice_definition.updated_at
        )

        self.session.add(db_slice)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateEntityError("Slice with this type already exists")

        await self.session.refresh(db_slice)
        return self._to_domain(db_slice)

    async def get_by_type(self, slice_type: str) -> Optional["SliceDefinition"]:
        """Получение слайса по sliceType"""
        result = await self.session.execute(
            select(SliceModel).where(SliceModel.slice_type == slice_type)
        )
        db_slice = result.scalar_one_or_none()
        return self._to_domain(db_slice) if db_slice else None

    async def get_all(self) -> List["SliceDefinition"]:
        """Все слайсы, новые сначала"""
        result = await self.session.execute(
            select(SliceModel).order_by(SliceModel.created_at.desc(), SliceModel.slice_type)
        )
        return [self._to_domain(db_slice) for db_slice in result.scalars().all()]

    async def update(self, slice_definition: "SliceDefinition") -> Optional["SliceDefinition"]:
        """Обновление слайса"""
        stmt = (
            update(SliceModel)
            .where(SliceModel.slice_type == slice_definition.slice_type)
            .values(
                name=slice_definition.name,
                description=slice_definition.description,
                schema=slice_definition.schema,
                items_schema=slice_definition.items_schema,
                updated_at=slice_definition.updated_at
            )
        )

        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            return None
        return await self.get_by_type(slice_definition.slice_type)

    async def delete(self, slice_type: str) -> bool:
        """Удаление слайса; True только если строка действительно удалена"""
        stmt = delete(SliceModel).where(SliceModel.slice_type == slice_type)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, db_slice: SliceModel) -> "SliceDefinition":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.slices.entities import SliceDefinition

        return SliceDefinition(
            slice_type=db_slice.slice_type,
            name=db_slice.name,
            description=db_slice.description,
            schema=db_slice.schema,
            items_schema=db_slice.items_schema,
            created_at=db_slice.created_at,
            updated_at=db_slice.updated_at
        )
