"""Retired spreadsheet-mirroring endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

router: APIRouter = APIRouter()

SHEETS_GONE_DETAIL: str = "Google Sheets integration has been removed"


@router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def sheets_gone(path: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_410_GONE, content={"detail": SHEETS_GONE_DETAIL, "code": "gone"})
