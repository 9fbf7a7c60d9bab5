from typing import Optional, List, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ConflictError, NotFoundError
from app.db.errors import DuplicateEntityError
from app.db.repositories.slice_repository import SliceRepository
from app.domains.fields.schemas import SchemaContext
from app.domains.fields.validation import validate_schema
from app.domains.slices.entities import SliceDefinition
from app.domains.slices.schemas import SliceCreate, SliceUpdate
from app.domains.slices.validation import check_slice_data
from app.domains.webhooks.events import EventPublisher, SliceEvent


class SliceService:
    """Сервис для работы с определениями слайсов.

    Единственное место, откуда публикуются события slice.*.
    """

    def __init__(self, session: AsyncSession, events: Optional[EventPublisher] = None):
        self.session = session
        self.slice_repository = SliceRepository(session)
        self.events = events

    async def create_slice(self, slice_data: SliceCreate) -> SliceDefinition:
        """Создание нового слайса"""
        schema = validate_schema(slice_data.schema_, SchemaContext.SLICE)
        items_schema = (
            validate_schema(slice_data.items_schema, SchemaContext.SLICE)
            if slice_data.items_schema is not None else None
        )

        if await self.slice_repository.get_by_type(slice_data.slice_type):
            raise ConflictError(f"Slice with type \"{slice_data.slice_type}\" already exists")

        slice_definition = SliceDefinition.create_slice(
            slice_type=slice_data.slice_type,
            name=slice_data.name,
            description=slice_data.description or "",
            schema=schema,
            items_schema=items_schema
        )

        try:
            created = await self.slice_repository.create(slice_definition)
        except DuplicateEntityError as e:
            raise ConflictError(str(e))

        self._publish(SliceEvent.CREATED, created.to_payload())
        return created

    async def get_slice(self, slice_type: str) -> SliceDefinition:
        """Получение слайса по sliceType"""
        slice_definition = await self.slice_repository.get_by_type(slice_type)

        if not slice_definition:
            raise NotFoundError(f"Slice \"{slice_type}\" not found")

        return slice_definition

    async def get_all_slices(self) -> List[SliceDefinition]:
        """Получение всех слайсов"""
        return await self.slice_repository.get_all()

    async def get_slices_by_content_type(self, content_type: str) -> List[SliceDefinition]:
        """Слайсы, доступные типу контента.

        Связь слайсов с типами контента не моделируется, поэтому
        возвращаются все слайсы.
        """
        return await self.get_all_slices()

    async def update_slice(self, slice_type: str, update_data: SliceUpdate) -> SliceDefinition:
        """Частичное обновление слайса"""
        changes: Dict[str, Any] = {}
        provided = update_data.model_fields_set

        if "name" in provided and update_data.name is not None:
            changes["name"] = update_data.name
        if "description" in provided:
            changes["description"] = update_data.description or ""
        if update_data.schema_ is not None:
            changes["schema"] = validate_schema(update_data.schema_, SchemaContext.SLICE)
        if "items_schema" in provided:
            changes["items_schema"] = (
                validate_schema(update_data.items_schema, SchemaContext.SLICE)
                if update_data.items_schema is not None else None
            )

        slice_definition = await self.slice_repository.get_by_type(slice_type)
        if not slice_definition:
            raise NotFoundError("Slice not found")

        slice_definition.update(**changes)
        updated = await self.slice_repository.update(slice_definition)
        if not updated:
            raise NotFoundError("Slice not found")

        self._publish(SliceEvent.UPDATED, updated.to_payload())
        return updated

    async def delete_slice(self, slice_type: str) -> None:
        """Удаление слайса; событие уходит только после подтверждённого удаления"""
        deleted = await self.slice_repository.delete(slice_type)

        if not deleted:
            raise NotFoundError("Slice not found")

        self._publish(SliceEvent.DELETED, {"sliceType": slice_type})

    async def validate_slice_data(self, slice_type: str, data: Dict[str, Any]) -> bool:
        """Проверка данных экземпляра слайса по его схеме.

        Отсутствующий слайс - NotFoundError, а не невалидные данные.
        """
        slice_definition = await self.get_slice(slice_type)
        return check_slice_data(slice_definition.schema, slice_definition.items_schema, data)

    def _publish(self, event: SliceEvent, data: Dict[str, Any]) -> None:
        if self.events is not None:
            self.events.publish(event, data)
