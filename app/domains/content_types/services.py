from typing import List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ConflictError, NotFoundError
from app.db.errors import DuplicateEntityError
from app.db.repositories.content_type_repository import ContentTypeRepository
from app.db.repositories.document_repository import DocumentRepository
from app.domains.common.schemas import Page
from app.domains.content_types.entities import ContentType
from app.domains.content_types.schemas import ContentTypeCreate, ContentTypeUpdate
from app.domains.fields.schemas import SchemaContext
from app.domains.fields.validation import validate_schema

RECENT_DOCUMENTS_LIMIT = 5


class ContentTypeService:
    """Сервис для работы с типами контента"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.content_type_repository = ContentTypeRepository(session)
        self.document_repository = DocumentRepository(session)

    async def create_content_type(self, content_type_data: ContentTypeCreate) -> ContentType:
        """Создание нового типа контента"""
        schema = validate_schema(content_type_data.schema_, SchemaContext.CONTENT_TYPE)

        if await self.content_type_repository.exists(content_type_data.name):
            raise ConflictError(f"Content type \"{content_type_data.name}\" already exists")

        content_type = ContentType.create_content_type(
            name=content_type_data.name,
            schema=schema,
            description=content_type_data.description or ""
        )

        try:
            return await self.content_type_repository.create(content_type)
        except DuplicateEntityError as e:
            raise ConflictError(str(e))

    async def get_content_type(self, name: str, include_draft: bool = True) -> ContentType:
        """Получение типа контента с последними документами"""
        content_type = await self.content_type_repository.get_by_name(name)

        if not content_type:
            raise NotFoundError(f"Content type \"{name}\" not found")

        content_type.recent_documents = await self.document_repository.list(
            content_type=name,
            include_draft=include_draft,
            limit=RECENT_DOCUMENTS_LIMIT
        )
        return content_type

    async def get_all_content_types(self) -> List[ContentType]:
        """Все типы контента с количеством документов"""
        return await self.content_type_repository.get_all_with_counts()

    async def update_content_type(self, name: str, update_data: ContentTypeUpdate) -> ContentType:
        """Частичное обновление типа контента"""
        schema = (
            validate_schema(update_data.schema_, SchemaContext.CONTENT_TYPE)
            if update_data.schema_ is not None else None
        )

        content_type = await self.content_type_repository.get_by_name(name)
        if not content_type:
            raise NotFoundError("Content type not found")

        content_type.update(description=update_data.description, schema=schema)
        updated = await self.content_type_repository.update(content_type)
        if not updated:
            raise NotFoundError("Content type not found")

        return updated

    async def delete_content_type(self, name: str) -> None:
        """Удаление типа контента; документы этого типа остаются"""
        if not await self.content_type_repository.delete(name):
            raise NotFoundError("Content type not found")

    async def get_content_type_with_documents(
        self,
        name: str,
        page: int = 1,
        limit: int = 20
    ) -> Tuple[ContentType, Page]:
        """Тип контента и страница его опубликованных документов"""
        content_type = await self.content_type_repository.get_by_name(name)

        if not content_type:
            raise NotFoundError(f"Content type \"{name}\" not found")

        offset = (page - 1) * limit
        documents = await self.document_repository.list(
            content_type=name,
            include_draft=False,
            limit=limit,
            offset=offset
        )
        total = await self.document_repository.count(content_type=name, include_draft=False)

        return content_type, Page(documents, page, limit, total)
