"""FastAPI entrypoint for the campus orders backend."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1.api import api_router
from app.api.v1.endpoints import sheets
from app.core.config import settings
from app.core.errors import OrderingError, ValidationFailed
from app.db.base import Base
from app.db.migrations import ensure_sqlite_schema
from app.db.seed import ensure_seed_data
from app.db.session import SessionLocal, engine

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router, prefix="/api/v1")
app.include_router(sheets.router, prefix="/api/sheets", tags=["sheets"])


@app.on_event("startup")
def startup() -> None:
    Base.metadata.create_all(bind=engine)
    ensure_sqlite_schema(engine)
    with SessionLocal() as session:
        try:
            ensure_seed_data(session)
        except SQLAlchemyError:
            logger.exception("[BOOTSTRAP] Seed failed; continuing startup.")
    logger.info("[BOOTSTRAP] %s ready (env=%s)", settings.app_name, settings.app_env)


@app.exception_handler(OrderingError)
async def ordering_error_handler(request: Request, exc: OrderingError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message, "code": exc.code})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request", "code": ValidationFailed.code},
    )


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return f"{settings.app_name} is running"
