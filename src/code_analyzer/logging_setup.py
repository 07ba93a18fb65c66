import sys

from loguru import logger


def configure_logging(level: str = "INFO") -> None:
    """
    Replaces loguru's default handler with a single stderr sink at `level`.
    Library code only logs; sinks are chosen by the entry point.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<level>{level: <8}</level> | {name}:{function} - {message}",
    )
