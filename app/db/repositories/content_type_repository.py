from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func
from sqlalchemy.exc import IntegrityError

from app.db.errors import DuplicateEntityError
from app.db.models.content_type import ContentType as ContentTypeModel
from app.db.models.document import Document as DocumentModel

if TYPE_CHECKING:
    from app.domains.content_types.entities import ContentType


class ContentTypeRepository:
    """Репозиторий для работы с типами контента"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, content_type: "ContentType") -> "ContentType":
        """Создание нового типа контента"""
        db_content_type = ContentTypeModel(
            name=content_type.name,
            description=content_type.description,
            schema=content_type.schema,
            created_at=content_type.created_at,
            updated_at=content_type.updated_at
        )

        self.session.add(db_content_type)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateEntityError("Content type with this name already exists")

        await self.session.refresh(db_content_type)
        return self._to_domain(db_content_type)

    async def get_by_name(self, name: str) -> Optional["ContentType"]:
        """Получение типа контента по имени"""
        result = await self.session.execute(
            select(ContentTypeModel).where(ContentTypeModel.name == name)
        )
        db_content_type = result.scalar_one_or_none()
        return self._to_domain(db_content_type) if db_content_type else None

    async def exists(self, name: str) -> bool:
        """Проверка существования типа контента"""
        result = await self.session.execute(
            select(func.count(ContentTypeModel.name)).where(ContentTypeModel.name == name)
        )
        return result.scalar() > 0

    async def get_all_with_counts(self) -> List["ContentType"]:
        """Все типы контента с количеством документов, новые сначала"""
        document_count = (
            select(func.count(DocumentModel.id))
            .where(DocumentModel.content_type == ContentTypeModel.name)
            .correlate(ContentTypeModel)
            .scalar_subquery()
        )
        result = await self.session.execute(
            select(ContentTypeModel, document_count.label("document_count"))
            .order_by(ContentTypeModel.created_at.desc(), ContentTypeModel.name)
        )
        return [
            self._to_domain(db_content_type, document_count=count)
            for db_content_type, count in result.all()
        ]

    async def update(self, content_type: "ContentType") -> Optional["ContentType"]:
        """Обновление типа контента"""
        stmt = (
            update(ContentTypeModel)
            .where(ContentTypeModel.name == content_type.name)
            .values(
                description=content_type.description,
                schema=content_type.schema,
                updated_at=content_type.updated_at
            )
        )

        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            return None
        return await self.get_by_name(content_type.name)

    async def delete(self, name: str) -> bool:
        """Удаление типа контента (документы не затрагиваются)"""
        stmt = delete(ContentTypeModel).where(ContentTypeModel.name == name)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, db_content_type: ContentTypeModel, document_count: Optional[int] = None) -> "ContentType":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.content_types.entities import ContentType

        return ContentType(
            name=db_content_type.name,
            description=db_content_type.description,
            schema=db_content_type.schema,
            created_at=db_content_type.created_at,
            updated_at=db_content_type.updated_at,
            document_count=document_count
        )
