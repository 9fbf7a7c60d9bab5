from app.domains.common.schemas import PaginationMeta, DataResponse, ListResponse, PaginatedResponse, Page

__all__ = ["PaginationMeta", "DataResponse", "ListResponse", "PaginatedResponse", "Page"]
