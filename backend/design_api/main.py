"""Design API — canvas design persistence backend

Responsibilities:
  1. Design persistence per user (async SQLAlchemy)
  2. AI regeneration of a design's canvas (OpenAI-compatible API)

Authentication is upstream; this service only decodes the bearer token.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from design_api.config import get_settings
from design_api.db.session import init_db, close_db, is_db_available
from design_api.errors import DesignError, InvalidRequest
from design_api.routers import design

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: check the database. Shutdown: close DB pool."""
    await init_db()
    yield
    await close_db()


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


async def design_error_handler(request: Request, exc: DesignError) -> JSONResponse:
    return _envelope(exc.status_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return _envelope(InvalidRequest.status_code, InvalidRequest.default_message)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _envelope(exc.status_code, str(exc.detail))


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    application = FastAPI(
        title=settings.app_name,
        version=VERSION,
        description=(
            "Canvas design storage.\n\n"
            "Backend handles per-user design CRUD and AI-assisted "
            "regeneration of a design's canvas."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(DesignError, design_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_error_handler)

    # ─── Design persistence + AI regeneration ───
    application.include_router(design.router, prefix="/api/designs", tags=["Designs"])

    return application


app = create_app()


@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "service": "design-api",
        "version": VERSION,
        "database": "connected" if is_db_available() else "unavailable",
    }


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "design_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        reload=settings.debug,
    )
