from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.db.errors import DuplicateEntityError
from app.db.repositories.content_type_repository import ContentTypeRepository
from app.db.repositories.document_repository import DocumentRepository
from app.domains.common.schemas import Page
from app.domains.documents.entities import Document, DocumentStatus
from app.domains.documents.schemas import DocumentCreate, DocumentUpdate
from app.domains.documents.validation import validate_document_data


class DocumentService:
    """Сервис для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.document_repository = DocumentRepository(session)
        self.content_type_repository = ContentTypeRepository(session)

    async def create_document(self, document_data: DocumentCreate) -> Document:
        """Создание нового документа.

        Все проверки выполняются до записи: структура data, уникальность uid,
        существование типа контента.
        """
        data = validate_document_data(document_data.data)

        if await self.document_repository.get_by_uid(document_data.uid):
            raise ConflictError(f"Document with UID \"{document_data.uid}\" already exists")

        if not await self.content_type_repository.exists(document_data.content_type):
            raise ValidationError(f"Content type \"{document_data.content_type}\" does not exist")

        document = Document.create_document(
            uid=document_data.uid,
            title=document_data.title,
            content_type=document_data.content_type,
            data=data,
            status=document_data.status
        )

        try:
            return await self.document_repository.create(document)
        except DuplicateEntityError as e:
            raise ConflictError(str(e))

    async def get_document_by_uid(self, uid: str, include_draft: bool = False) -> Document:
        """Получение документа по uid; черновики только по запросу"""
        document = await self.document_repository.get_by_uid(uid, include_draft=include_draft)

        if not document:
            raise NotFoundError("Document not found")

        return document

    async def list_documents(
        self,
        content_type: Optional[str] = None,
        search: Optional[str] = None,
        include_draft: bool = False,
        page: int = 1,
        limit: int = 20
    ) -> Page:
        """Страница документов с фильтром по типу и поиском по title/uid"""
        offset = (page - 1) * limit
        documents = await self.document_repository.list(
            content_type=content_type,
            search=search,
            include_draft=include_draft,
            limit=limit,
            offset=offset
        )
        total = await self.document_repository.count(
            content_type=content_type,
            search=search,
            include_draft=include_draft
        )
        return Page(documents, page, limit, total)

    async def update_document(self, uid: str, update_data: DocumentUpdate) -> Document:
        """Частичное обновление документа.

        Существование нового contentType не проверяется.
        """
        document = await self.document_repository.get_by_uid(uid)

        if not document:
            raise NotFoundError("Document not found")

        data = validate_document_data(update_data.data) if update_data.data is not None else None

        document.update(
            title=update_data.title,
            data=data,
            content_type=update_data.content_type
        )
        if update_data.status is not None:
            document.change_status(update_data.status)

        updated = await self.document_repository.update(document)
        if not updated:
            raise NotFoundError("Document not found")

        return updated

    async def publish_document(self, uid: str) -> Document:
        """Публикация документа"""
        return await self.update_document(uid, DocumentUpdate(status=DocumentStatus.PUBLISHED))

    async def unpublish_document(self, uid: str) -> Document:
        """Снятие документа с публикации"""
        return await self.update_document(uid, DocumentUpdate(status=DocumentStatus.DRAFT))

    async def delete_document(self, uid: str) -> None:
        """Удаление документа"""
        if not await self.document_repository.delete(uid):
            raise NotFoundError("Document not found")
