# File: timestamp_server/main.py
from __future__ import annotations

from importlib import import_module
from typing import List, Tuple

import uvicorn
from fastapi import FastAPI
from fastapi.routing import APIRouter

from timestamp_server.core.logging_config import setup_logging
from timestamp_server.core.settings import settings

APP_VERSION = "0.1.0"

logger = setup_logging(settings.APP_NAME, settings.LOG_LEVEL, settings.LOG_DIR)

app = FastAPI(
    title=settings.APP_NAME,
    version=APP_VERSION,
)

def load_router(module_path: str) -> APIRouter:
    mod = import_module(module_path)
    router = getattr(mod, "router", None)
    if not isinstance(router, APIRouter):
        raise RuntimeError(f"Module {module_path} has no 'router'")
    return router

def mount(module_path: str, prefix: str = "") -> Tuple[str, str]:
    app.include_router(load_router(module_path), prefix=prefix)
    logger.info("Mounted router %s at prefix '%s'", module_path, prefix)
    return (module_path, prefix)

mounted: List[Tuple[str, str]] = [
    mount(m)
    for m in (
        "timestamp_server.routers.timestamp",
        "timestamp_server.routers.health",
        "timestamp_server.routers.version",
    )
]

def run() -> None:
    logger.info("Starting timestamp server on %s:%s", settings.HOST, settings.PORT)
    # uvicorn exits non-zero on its own if the socket cannot be bound
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)

if __name__ == "__main__":
    run()
