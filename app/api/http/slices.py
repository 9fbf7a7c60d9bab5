from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_event_publisher
from app.core.db import get_db
from app.domains.common.schemas import DataResponse, ListResponse
from app.domains.slices.schemas import SliceCreate, SliceUpdate, SliceResponse, SliceValidationResponse
from app.domains.slices.services import SliceService
from app.domains.webhooks.events import EventPublisher

public_router = APIRouter(prefix="/slices", tags=["slices"])
router = APIRouter(prefix="/slices", tags=["slices"])


@public_router.get("", response_model=ListResponse[SliceResponse])
@router.get("", response_model=ListResponse[SliceResponse])
async def list_slices(
    content_type: Optional[str] = Query(None, alias="contentType"),
    db: AsyncSession = Depends(get_db)
):
    """Список слайсов"""
    slice_service = SliceService(db)
    if content_type:
        slices = await slice_service.get_slices_by_content_type(content_type)
    else:
        slices = await slice_service.get_all_slices()

    return ListResponse[SliceResponse](data=[SliceResponse.from_entity(s) for s in slices])


@public_router.get("/{slice_type}", response_model=DataResponse[SliceResponse])
@router.get("/{slice_type}", response_model=DataResponse[SliceResponse])
async def get_slice(slice_type: str, db: AsyncSession = Depends(get_db)):
    """Получение слайса по sliceType"""
    slice_definition = await SliceService(db).get_slice(slice_type)
    return DataResponse[SliceResponse](data=SliceResponse.from_entity(slice_definition))


@router.post("", response_model=DataResponse[SliceResponse], status_code=status.HTTP_201_CREATED)
async def create_slice(
    slice_data: SliceCreate,
    db: AsyncSession = Depends(get_db),
    events: EventPublisher = Depends(get_event_publisher)
):
    """Создание слайса"""
    slice_definition = await SliceService(db, events).create_slice(slice_data)
    return DataResponse[SliceResponse](data=SliceResponse.from_entity(slice_definition))


@router.put("/{slice_type}", response_model=DataResponse[SliceResponse])
async def update_slice(
    slice_type: str,
    update_data: SliceUpdate,
    db: AsyncSession = Depends(get_db),
    events: EventPublisher = Depends(get_event_publisher)
):
    """Частичное обновление слайса"""
    slice_definition = await SliceService(db, events).update_slice(slice_type, update_data)
    return DataResponse[SliceResponse](data=SliceResponse.from_entity(slice_definition))


@router.delete("/{slice_type}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_slice(
    slice_type: str,
    db: AsyncSession = Depends(get_db),
    events: EventPublisher = Depends(get_event_publisher)
):
    """Удаление слайса"""
    await SliceService(db, events).delete_slice(slice_type)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{slice_type}/validate", response_model=SliceValidationResponse)
async def validate_slice_data(
    slice_type: str,
    payload: Dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db)
):
    """Проверка данных экземпляра слайса на обязательные поля"""
    data = payload["data"] if isinstance(payload.get("data"), dict) else payload
    valid = await SliceService(db).validate_slice_data(slice_type, data)
    return SliceValidationResponse(valid=valid)
