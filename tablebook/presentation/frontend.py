from __future__ import annotations

from fastapi import APIRouter, Response
from fastapi.responses import FileResponse, JSONResponse

from tablebook.infrastructure.config import settings

# Included after the API router: it catches whatever the API did not match.
router = APIRouter(include_in_schema=False)

API_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@router.api_route("/api", methods=API_METHODS)
@router.api_route("/api/{path:path}", methods=API_METHODS)
def api_not_found(path: str = "") -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "API endpoint not found"})


@router.get("/favicon.ico")
def favicon() -> Response:
    return Response(status_code=204)


@router.api_route("/", methods=API_METHODS)
@router.api_route("/{path:path}", methods=API_METHODS)
def frontend_shell(path: str = "") -> FileResponse:
    """
    Serve the single-page frontend for every non-API path
    """
    return FileResponse(settings.frontend_dir / "index.html")
