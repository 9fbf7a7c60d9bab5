import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PaginationMeta(BaseModel):
    """Метаданные постраничной выдачи"""
    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit) if limit else 0)


class DataResponse(BaseModel, Generic[T]):
    """Успешный ответ с одним объектом"""
    success: bool = True
    data: T


class ListResponse(BaseModel, Generic[T]):
    """Успешный ответ со списком без пагинации"""
    success: bool = True
    data: List[T]


class PaginatedResponse(BaseModel, Generic[T]):
    """Успешный ответ со страницей списка"""
    success: bool = True
    data: List[T]
    meta: PaginationMeta


class Page(Generic[T]):
    """Страница результатов сервиса"""

    def __init__(self, items: List[T], page: int, limit: int, total: int):
        self.items = items
        self.meta = PaginationMeta.build(page, limit, total)
