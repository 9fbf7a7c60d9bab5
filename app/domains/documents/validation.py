from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from app.core.errors import ValidationError
from app.domains.documents.schemas import DocumentData
from app.domains.fields.validation import format_pydantic_errors


def validate_document_data(raw: Any) -> Dict[str, Any]:
    """Структурная проверка содержимого документа.

    Проверяются title, uid и форма каждого экземпляра слайса в body.
    slice_type не сверяется с определениями слайсов, обязательные поля
    слайсов здесь не проверяются (см. SliceService.validate_slice_data).
    """
    if not isinstance(raw, dict):
        raise ValidationError("Document data must be an object")

    try:
        validated = DocumentData.model_validate(raw)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid document data: {format_pydantic_errors(e)}")

    # Лишние ключи верхнего уровня переносятся из исходных данных без изменений
    return {
        **raw,
        "title": validated.title,
        "uid": validated.uid,
        "body": [instance.model_dump(exclude_unset=True) for instance in validated.body],
    }
