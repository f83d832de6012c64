# File: timestamp_server/routers/version.py
from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel

from timestamp_server.core.build_info import load_build_info
from timestamp_server.core.settings import settings

router = APIRouter(tags=["version"])

class VersionResponse(BaseModel):
    version: str
    build_time: str
    pretty_build_time: str

@router.get("/version", response_model=VersionResponse)
def version():
    # read per request, never cached
    info = load_build_info(settings.BUILD_INFO_DIR)
    return VersionResponse(
        version=info.version,
        build_time=info.build_time,
        pretty_build_time=info.pretty_build_time,
    )
