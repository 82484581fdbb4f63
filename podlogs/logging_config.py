from __future__ import annotations
import logging, sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d - %(message)s"


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO),
                        format=LOG_FORMAT, handlers=[logging.StreamHandler(sys.stdout)], force=True)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logger = logging.getLogger("podlogs")
    logger.info("Logging initialized (level=%s)", log_level)
    return logger
