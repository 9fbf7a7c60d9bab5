from typing import Optional, Dict, Any

from fastapi.security.utils import get_authorization_scheme_param
from jose import JWTError, jwt


def verify_token(token: str, secret: str, algorithm: str = "HS256") -> Optional[Dict[str, Any]]:
    """Проверка подписи и срока действия JWT; None, если токен недействителен"""
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError:
        return None


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Токен из заголовка Authorization со схемой Bearer"""
    scheme, token = get_authorization_scheme_param(authorization)
    if scheme.lower() != "bearer" or not token:
        return None
    return token
