from typing import Optional
import uuid

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_settings
from app.core.config import Settings
from app.core.db import get_db
from app.domains.assets.schemas import AssetResponse, AssetUpdate
from app.domains.assets.services import AssetService
from app.domains.common.schemas import DataResponse, PaginatedResponse

router = APIRouter(prefix="/assets", tags=["assets"])


@router.post("", response_model=DataResponse[AssetResponse], status_code=status.HTTP_201_CREATED)
async def upload_asset(
    file: UploadFile = File(...),
    alt_text: Optional[str] = Form(None, alias="altText"),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Загрузка файла"""
    asset = await AssetService(db, settings).create_asset(file, alt_text)
    return DataResponse[AssetResponse](data=AssetResponse.from_entity(asset))


@router.get("", response_model=PaginatedResponse[AssetResponse])
async def list_assets(
    search: Optional[str] = None,
    mime_type: Optional[str] = Query(None, alias="mimeType"),
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Список файлов с поиском и фильтром по MIME-префиксу"""
    result = await AssetService(db, settings).list_assets(
        search=search,
        mime_type=mime_type,
        page=page,
        limit=limit
    )
    return PaginatedResponse[AssetResponse](
        data=[AssetResponse.from_entity(asset) for asset in result.items],
        meta=result.meta
    )


@router.get("/{asset_id}", response_model=DataResponse[AssetResponse])
async def get_asset(
    asset_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Получение файла по id"""
    asset = await AssetService(db, settings).get_asset(asset_id)
    return DataResponse[AssetResponse](data=AssetResponse.from_entity(asset))


@router.put("/{asset_id}", response_model=DataResponse[AssetResponse])
async def update_asset(
    asset_id: uuid.UUID,
    update_data: AssetUpdate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Обновление altText"""
    asset = await AssetService(db, settings).update_asset(asset_id, update_data.alt_text)
    return DataResponse[AssetResponse](data=AssetResponse.from_entity(asset))


@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_asset(
    asset_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Удаление файла"""
    await AssetService(db, settings).delete_asset(asset_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
