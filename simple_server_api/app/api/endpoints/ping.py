"""Health check endpoint."""

from fastapi import APIRouter, Response, status

router = APIRouter()


@router.get("/ping")
async def serve_status() -> Response:
    """Respond with 200 and an empty body; query parameters are ignored."""
    return Response(status_code=status.HTTP_200_OK)
