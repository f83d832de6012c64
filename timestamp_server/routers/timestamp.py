# File: timestamp_server/routers/timestamp.py
from __future__ import annotations

import time

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["timestamp"])

DEFAULT_MESSAGE = "Automate all the things!"

class TimestampResponse(BaseModel):
    message: str
    timestamp: int  # whole epoch seconds

def timestamp_response(message: str = DEFAULT_MESSAGE) -> TimestampResponse:
    return TimestampResponse(message=message, timestamp=int(time.time()))

@router.get("/", response_model=TimestampResponse)
def root():
    return timestamp_response()

@router.get("/timestamp", response_model=TimestampResponse)
def timestamp():
    return timestamp_response()
