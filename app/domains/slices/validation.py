from typing import Any, Dict, Iterable, Mapping, Optional


def _required_ids(schema: Optional[Mapping[str, Any]]) -> Iterable[str]:
    if not schema:
        return []
    return [field["id"] for field in schema.get("primary") or [] if field.get("required")]


def _has_required(values: Any, field_ids: Iterable[str]) -> bool:
    # Ложные значения (0, "", False) считаются отсутствующими
    if not isinstance(values, Mapping):
        values = {}
    return all(values.get(field_id) for field_id in field_ids)


def check_slice_data(
    schema: Optional[Mapping[str, Any]],
    items_schema: Optional[Mapping[str, Any]],
    data: Mapping[str, Any]
) -> bool:
    """Проверка обязательных полей экземпляра слайса.

    Поля primary проверяются по schema.primary. Если у слайса есть
    itemsSchema и в данных есть items, каждый элемент проверяется
    по itemsSchema.primary; одна ошибка в любом элементе даёт False.
    """
    if not _has_required(data.get("primary"), _required_ids(schema)):
        return False

    items = data.get("items")
    if items_schema and items:
        item_ids = list(_required_ids(items_schema))
        for item in items:
            if not _has_required(item, item_ids):
                return False

    return True
