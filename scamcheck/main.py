import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .exceptions import ScamCheckError, UnexpectedServerError
from .logging_setup import setup_logging
from .models.check import ErrorResponse
from .routers.check import router as check_router
from .routers.config_probe import router as config_probe_router

logger = logging.getLogger(__name__)


async def scam_check_error_handler(request: Request, exc: ScamCheckError) -> JSONResponse:
    body = ErrorResponse(error=exc.error, details=exc.details)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    body = ErrorResponse(error=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s: %s", request.method, request.url.path, exc)
    return await scam_check_error_handler(request, UnexpectedServerError())


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Scam Check API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ScamCheckError, scam_check_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(check_router)
    app.include_router(config_probe_router)

    @app.get("/")
    def root():
        return {"message": "API is running!"}

    return app


app = create_app()
