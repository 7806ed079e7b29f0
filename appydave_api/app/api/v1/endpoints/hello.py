"""Greeting endpoint for API v1."""

from fastapi import APIRouter

from appydave_api.app.schemas.hello import HelloResponse

router = APIRouter()

GREETING = (
    "Hello, AppyDaveApp! Visit our YouTube channel for more updates: "
    "https://www.youtube.com/@AppyDave/videos"
)


@router.get("", response_model=HelloResponse)
def hello() -> HelloResponse:
    """Return the fixed greeting.  Takes no input and has no side effects."""
    return HelloResponse(message=GREETING)
