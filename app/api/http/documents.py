from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.domains.common.schemas import DataResponse, PaginatedResponse
from app.domains.documents.schemas import DocumentCreate, DocumentUpdate, DocumentResponse
from app.domains.documents.services import DocumentService

public_router = APIRouter(prefix="/documents", tags=["documents"])
router = APIRouter(prefix="/documents", tags=["documents"])


async def _list_documents(
    db: AsyncSession,
    content_type: Optional[str],
    search: Optional[str],
    include_draft: bool,
    page: int,
    limit: int
) -> PaginatedResponse[DocumentResponse]:
    result = await DocumentService(db).list_documents(
        content_type=content_type,
        search=search,
        include_draft=include_draft,
        page=page,
        limit=limit
    )
    return PaginatedResponse[DocumentResponse](
        data=[DocumentResponse.from_entity(doc) for doc in result.items],
        meta=result.meta
    )


@public_router.get("", response_model=PaginatedResponse[DocumentResponse])
async def list_published_documents(
    content_type: Optional[str] = Query(None, alias="type"),
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """Опубликованные документы; черновики в публичном API не отдаются"""
    return await _list_documents(db, content_type, search, False, page, limit)


@public_router.get("/{uid}", response_model=DataResponse[DocumentResponse])
async def get_published_document(uid: str, db: AsyncSession = Depends(get_db)):
    """Опубликованный документ по uid"""
    document = await DocumentService(db).get_document_by_uid(uid, include_draft=False)
    return DataResponse[DocumentResponse](data=DocumentResponse.from_entity(document))


@router.get("", response_model=PaginatedResponse[DocumentResponse])
async def list_documents(
    content_type: Optional[str] = Query(None, alias="type"),
    search: Optional[str] = None,
    draft: bool = False,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """Список документов; draft=true включает черновики"""
    return await _list_documents(db, content_type, search, draft, page, limit)


@router.post("", response_model=DataResponse[DocumentResponse], status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: DocumentCreate,
    db: AsyncSession = Depends(get_db)
):
    """Создание документа"""
    document = await DocumentService(db).create_document(document_data)
    return DataResponse[DocumentResponse](data=DocumentResponse.from_entity(document))


@router.get("/{uid}", response_model=DataResponse[DocumentResponse])
async def get_document(
    uid: str,
    draft: bool = False,
    db: AsyncSession = Depends(get_db)
):
    """Документ по uid; draft=true включает черновики"""
    document = await DocumentService(db).get_document_by_uid(uid, include_draft=draft)
    return DataResponse[DocumentResponse](data=DocumentResponse.from_entity(document))


@router.put("/{uid}", response_model=DataResponse[DocumentResponse])
async def update_document(
    uid: str,
    update_data: DocumentUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Частичное обновление документа"""
    document = await DocumentService(db).update_document(uid, update_data)
    return DataResponse[DocumentResponse](data=DocumentResponse.from_entity(document))


@router.delete("/{uid}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(uid: str, db: AsyncSession = Depends(get_db)):
    """Удаление документа"""
    await DocumentService(db).delete_document(uid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{uid}/publish", response_model=DataResponse[DocumentResponse])
async def publish_document(uid: str, db: AsyncSession = Depends(get_db)):
    """Публикация документа"""
    document = await DocumentService(db).publish_document(uid)
    return DataResponse[DocumentResponse](data=DocumentResponse.from_entity(document))


@router.post("/{uid}/unpublish", response_model=DataResponse[DocumentResponse])
async def unpublish_document(uid: str, db: AsyncSession = Depends(get_db)):
    """Снятие документа с публикации"""
    document = await DocumentService(db).unpublish_document(uid)
    return DataResponse[DocumentResponse](data=DocumentResponse.from_entity(document))
