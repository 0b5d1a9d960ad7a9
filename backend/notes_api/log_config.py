import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str = "INFO") -> int:
    """Configure root logging once and align the uvicorn loggers with it."""
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    for name in ("uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(resolved)
    return resolved
