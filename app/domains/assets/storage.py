import logging
import os
import re
import time
import uuid
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")
_REPEATED_UNDERSCORES = re.compile(r"_+")


def sanitize_filename(filename: str) -> str:
    """Безопасное имя файла: только латиница, цифры, точка и дефис"""
    filename = _UNSAFE_CHARS.sub("_", filename)
    return _REPEATED_UNDERSCORES.sub("_", filename).lower()


def generate_filename(original_name: str) -> str:
    """Уникальное имя для хранения: <имя>-<unix ms>-<8 hex><расширение>"""
    basename, ext = os.path.splitext(original_name)
    timestamp = int(time.time() * 1000)
    suffix = uuid.uuid4().hex[:8]
    return f"{basename}-{timestamp}-{suffix}{ext}".lower()


def ensure_upload_dir(upload_dir: str) -> Path:
    path = Path(upload_dir).resolve()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_public_url(api_url: str, stored_name: str) -> str:
    return f"{api_url.rstrip('/')}/uploads/{stored_name}"


def is_allowed_mime_type(mime_type: str, allowed: Iterable[str]) -> bool:
    return mime_type in allowed


def save_file(upload_dir: str, stored_name: str, content: bytes) -> Path:
    """Запись содержимого файла в каталог загрузок"""
    path = ensure_upload_dir(upload_dir) / stored_name
    path.write_bytes(content)
    return path


def remove_file(upload_dir: str, stored_name: str) -> bool:
    """Удаление файла из каталога загрузок; False, если файла нет"""
    path = Path(upload_dir).resolve() / stored_name
    if not path.exists():
        return False

    path.unlink()
    logger.debug(f"Removed stored file {path}")
    return True
