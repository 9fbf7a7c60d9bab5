from fastapi import Request

from app.core.errors import ForbiddenError, UnauthorizedError
from app.core.security import bearer_token, verify_token


async def require_admin(request: Request) -> None:
    """Проверка доступа к админскому API.

    Если ADMIN_JWT_SECRET не задан, админский API открыт.
    """
    settings = request.app.state.settings
    if not settings.admin_jwt_secret:
        return

    token = bearer_token(request.headers.get("Authorization"))
    if not token:
        raise UnauthorizedError("Missing bearer token")

    payload = verify_token(token, settings.admin_jwt_secret, settings.jwt_algorithm)
    if payload is None:
        raise UnauthorizedError("Invalid token")

    if payload.get("role") != "admin":
        raise ForbiddenError("Admin role required")
