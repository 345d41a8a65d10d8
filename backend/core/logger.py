import logging

from backend.core.settings import get_settings

_ROOT = "backend"
_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        root.setLevel(get_settings().log_level)
    return root


def get_logger(name: str) -> logging.Logger:
    """Логгер ``backend.<name>`` с общим форматом и уровнем из настроек."""
    _configure_root()
    return logging.getLogger(f"{_ROOT}.{name}")
