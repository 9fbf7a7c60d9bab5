from fastapi import APIRouter, Depends

from app.api.http import assets, content_types, documents, health, slices
from app.core.auth import require_admin

public_router = APIRouter()
public_router.include_router(health.public_router)
public_router.include_router(content_types.public_router)
public_router.include_router(slices.public_router)
public_router.include_router(documents.public_router)

admin_router = APIRouter(prefix="/admin", dependencies=[Depends(require_admin)])
admin_router.include_router(health.router)
admin_router.include_router(content_types.router)
admin_router.include_router(slices.router)
admin_router.include_router(documents.router)
admin_router.include_router(assets.router)
