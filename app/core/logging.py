import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Настройка корневого логгера приложения"""
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Повторный вызов create_app не должен плодить обработчики
    if any(getattr(handler, "_cms_handler", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._cms_handler = True
    root.addHandler(handler)
