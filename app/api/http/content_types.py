from typing import Union

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.domains.common.schemas import DataResponse, ListResponse
from app.domains.content_types.schemas import (
    ContentTypeCreate, ContentTypeUpdate, ContentTypeResponse, ContentTypeWithDocumentsResponse
)
from app.domains.content_types.services import ContentTypeService
from app.domains.documents.schemas import DocumentResponse

public_router = APIRouter(prefix="/content-types", tags=["content-types"])
router = APIRouter(prefix="/content-types", tags=["content-types"])


async def _get_content_type(
    service: ContentTypeService,
    name: str,
    with_documents: bool,
    page: int,
    limit: int,
    include_draft: bool
):
    if with_documents:
        content_type, documents = await service.get_content_type_with_documents(name, page, limit)
        return ContentTypeWithDocumentsResponse(
            content_type=ContentTypeResponse.from_entity(content_type),
            documents=[DocumentResponse.from_entity(doc) for doc in documents.items],
            meta=documents.meta
        )

    content_type = await service.get_content_type(name, include_draft=include_draft)
    return DataResponse[ContentTypeResponse](
        data=ContentTypeResponse.from_entity(content_type, include_documents=True)
    )


@public_router.get("", response_model=ListResponse[ContentTypeResponse])
@router.get("", response_model=ListResponse[ContentTypeResponse])
async def list_content_types(db: AsyncSession = Depends(get_db)):
    """Все типы контента с количеством документов"""
    content_types = await ContentTypeService(db).get_all_content_types()
    return ListResponse[ContentTypeResponse](
        data=[ContentTypeResponse.from_entity(ct) for ct in content_types]
    )


@public_router.get(
    "/{name}",
    response_model=Union[ContentTypeWithDocumentsResponse, DataResponse[ContentTypeResponse]]
)
async def get_public_content_type(
    name: str,
    with_documents: bool = Query(False, alias="withDocuments"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """Тип контента; последние документы только опубликованные"""
    return await _get_content_type(
        ContentTypeService(db), name, with_documents, page, limit, include_draft=False
    )


@router.get(
    "/{name}",
    response_model=Union[ContentTypeWithDocumentsResponse, DataResponse[ContentTypeResponse]]
)
async def get_content_type(
    name: str,
    with_documents: bool = Query(False, alias="withDocuments"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: AsyncSession = Depends(get_db)
):
    """Тип контента с последними документами, включая черновики"""
    return await _get_content_type(
        ContentTypeService(db), name, with_documents, page, limit, include_draft=True
    )


@router.post("", response_model=DataResponse[ContentTypeResponse], status_code=status.HTTP_201_CREATED)
async def create_content_type(
    content_type_data: ContentTypeCreate,
    db: AsyncSession = Depends(get_db)
):
    """Создание типа контента"""
    content_type = await ContentTypeService(db).create_content_type(content_type_data)
    return DataResponse[ContentTypeResponse](data=ContentTypeResponse.from_entity(content_type))


@router.put("/{name}", response_model=DataResponse[ContentTypeResponse])
async def update_content_type(
    name: str,
    update_data: ContentTypeUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Обновление описания и схемы типа контента"""
    content_type = await ContentTypeService(db).update_content_type(name, update_data)
    return DataResponse[ContentTypeResponse](data=ContentTypeResponse.from_entity(content_type))


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_content_type(name: str, db: AsyncSession = Depends(get_db)):
    """Удаление типа контента"""
    await ContentTypeService(db).delete_content_type(name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
