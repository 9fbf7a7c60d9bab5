from typing import Optional, List, TYPE_CHECKING
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func, or_
from sqlalchemy.exc import IntegrityError

from app.db.errors import DuplicateEntityError
from app.db.models.document import Document as DocumentModel

if TYPE_CHECKING:
    from app.domains.documents.entities import Document


class DocumentRepository:
    """Репозиторий для работы с документами"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, document: "Document") -> "Document":
        """Создание нового документа"""
        db_document = DocumentModel(
            id=document.id,
            uid=document.uid,
            title=document.title,
            content_type=document.content_type,
            data=document.data,
            status=document.status.value,
            published_at=document.published_at,
            created_at=document.created_at,
            updated_at=document.updated_at
        )

        self.session.add(db_document)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateEntityError(f"Document with UID \"{document.uid}\" already exists")

        await self.session.refresh(db_document)
        return self._to_domain(db_document)

    async def get_by_uid(self, uid: str, include_draft: bool = True) -> Optional["Document"]:
        """Получение документа по uid"""
        query = select(DocumentModel).where(DocumentModel.uid == uid)
        if not include_draft:
            query = query.where(DocumentModel.status == "published")

        result = await self.session.execute(query)
        db_document = result.scalar_one_or_none()
        return self._to_domain(db_document) if db_document else None

    async def list(
        self,
        content_type: Optional[str] = None,
        search: Optional[str] = None,
        include_draft: bool = False,
        limit: int = 20,
        offset: int = 0
    ) -> List["Document"]:
        """Список документов с фильтрами, новые сначала"""
        query = self._filtered(select(DocumentModel), content_type, search, include_draft)
        result = await self.session.execute(
            query
            .order_by(DocumentModel.created_at.desc(), DocumentModel.uid)
            .offset(offset)
            .limit(limit)
        )
        return [self._to_domain(doc) for doc in result.scalars().all()]

    async def count(
        self,
        content_type: Optional[str] = None,
        search: Optional[str] = None,
        include_draft: bool = False
    ) -> int:
        """Подсчет документов с теми же фильтрами, что и list"""
        query = self._filtered(select(func.count(DocumentModel.id)), content_type, search, include_draft)
        result = await self.session.execute(query)
        return result.scalar()

    async def update(self, document: "Document") -> Optional["Document"]:
        """Обновление документа"""
        stmt = (
            update(DocumentModel)
            .where(DocumentModel.uid == document.uid)
            .values(
                title=document.title,
                content_type=document.content_type,
                data=document.data,
                status=document.status.value,
                published_at=document.published_at,
                updated_at=document.updated_at
            )
        )

        result = await self.session.execute(stmt)
        await self.session.commit()

        if result.rowcount == 0:
            return None
        return await self.get_by_uid(document.uid)

    async def delete(self, uid: str) -> bool:
        """Удаление документа"""
        stmt = delete(DocumentModel).where(DocumentModel.uid == uid)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    @staticmethod
    def _filtered(query, content_type: Optional[str], search: Optional[str], include_draft: bool):
        if content_type:
            query = query.where(DocumentModel.content_type == content_type)

        if search:
            query = query.where(
                or_(
                    DocumentModel.title.ilike(f"%{search}%"),
                    DocumentModel.uid.ilike(f"%{search}%")
                )
            )

        if not include_draft:
            query = query.where(DocumentModel.status == "published")

        return query

    def _to_domain(self, db_document: DocumentModel) -> "Document":
        """Преобразование модели БД в доменную сущность"""
        from app.domains.documents.entities import Document

        return Document(
            id=db_document.id,
            uid=db_document.uid,
            title=db_document.title,
            content_type=db_document.content_type,
            data=db_document.data,
            status=db_document.status,
            published_at=db_document.published_at,
            created_at=db_document.created_at,
            updated_at=db_document.updated_at
        )
