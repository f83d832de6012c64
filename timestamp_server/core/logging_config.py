from __future__ import annotations
import logging, sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d [%(process)d] - %(message)s"

def setup_logging(app_name: str = "timestamp-server", log_level: str = "INFO", log_dir: str = ""):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(Path(log_dir) / f"{app_name}.log", encoding="utf-8"))
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO),
                        format=LOG_FORMAT, handlers=handlers, force=True)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logger = logging.getLogger("timestamp_server")
    logger.info("Logging initialized (app=%s, dir=%s, level=%s)", app_name, log_dir or "-", log_level)
    return logger
