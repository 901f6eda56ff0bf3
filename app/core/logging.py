import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger at startup; no-op for handlers if one is already installed."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
    # the request middleware already logs one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
