import sys
from typing import Final

from loguru import logger

_LOG_FORMAT: Final[str] = (
    "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"
    " - <level>{message}</level>"
)


def setup_logging(level: str = "INFO") -> None:
    """Configure loguru logging with the specified level.

    The library only logs at TRACE and DEBUG, so it stays quiet unless an
    application asks for those levels.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=_LOG_FORMAT,
    )
