import sys

from loguru import logger as _root_logger

from core.config import LOG_LEVEL, SERVICE_NAME

_root_logger.remove()

# Tracebacks are logged without local variable values
_root_logger.add(
    sys.stderr,
    level=LOG_LEVEL,
    backtrace=False,
    diagnose=False,
    format=(
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<magenta>{extra[service]}</magenta> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    ),
)

logger = _root_logger.bind(service=SERVICE_NAME)

__all__ = ["logger"]
