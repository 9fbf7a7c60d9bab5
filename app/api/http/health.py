import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request

VERSION = "1.0.0"

public_router = APIRouter(tags=["health"])
router = APIRouter(tags=["health"])


def _health_payload(request: Request, service: str) -> dict:
    return {
        "success": True,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": service,
        "status": "healthy",
        "version": VERSION,
        "uptime": time.monotonic() - request.app.state.started_at,
    }


@public_router.get("/")
async def public_index():
    """Описание публичного API"""
    return {
        "success": True,
        "service": "CMS Public API",
        "version": VERSION,
        "endpoints": {
            "health": "/health",
            "documents": "/documents",
            "contentTypes": "/content-types",
            "slices": "/slices",
        },
        "note": "Uploads are served from /uploads/{filename}",
    }


@public_router.get("/health")
async def public_health(request: Request):
    """Проверка состояния публичного API"""
    return _health_payload(request, "cms-public-api")


@router.get("/")
async def admin_index():
    """Описание админского API"""
    return {
        "success": True,
        "service": "CMS Admin API",
        "version": VERSION,
        "endpoints": {
            "contentTypes": "GET,POST /content-types",
            "slices": "GET,POST /slices",
            "documents": "GET,POST /documents",
            "assets": "GET,POST /assets",
            "health": "/health",
        },
    }


@router.get("/health")
async def admin_health(request: Request):
    """Проверка состояния админского API"""
    return _health_payload(request, "cms-admin-api")
