from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])

# Liveness only: no disk, no clock, no settings.
@router.api_route("/health", methods=["GET", "HEAD"], response_class=PlainTextResponse)
def health():
    return "OK"
