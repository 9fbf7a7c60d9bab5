from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from app.core.errors import ValidationError
from app.domains.fields.schemas import SCHEMA_MODELS, SchemaContext


def format_pydantic_errors(error: PydanticValidationError) -> str:
    """Краткое текстовое описание ошибок pydantic"""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def validate_schema(raw: Any, context: SchemaContext) -> Dict[str, Any]:
    """Структурная проверка схемы типа контента или слайса.

    Проверяются только обязательные ключи и описания полей (id, label, type).
    Уникальность id, порядок полей и содержимое config не проверяются.
    Возвращает нормализованную схему, пригодную для хранения в JSON.
    """
    if not isinstance(raw, dict):
        raise ValidationError("Schema must be an object")

    model = SCHEMA_MODELS[context]
    try:
        validated = model.model_validate(raw)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {context.value} schema: {format_pydantic_errors(e)}")

    return validated.model_dump(mode="json", exclude_unset=True)
