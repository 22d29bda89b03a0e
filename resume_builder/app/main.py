import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resume_builder.app.api.routes.experiences import router as experiences_router
from resume_builder.app.api.routes.life_data import router as life_data_router
from resume_builder.app.api.routes.resume import router as resume_router
from resume_builder.app.api.routes.resume_ai import router as resume_ai_router
from resume_builder.app.api.routes.user import router as user_router
from resume_builder.app.core.cache import ResumeCountCache
from resume_builder.app.core.config import get_settings

log = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render an `HTTPException` as `{"error": detail}`."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render a malformed request body or parameter as a 400."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    _msg = f"Request validation failed for {request.url.path}: {message}"
    log.debug(_msg)
    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected failure and answer with a generic 500."""
    _msg = f"Unhandled error in {request.method} {request.url.path}"
    log.exception(_msg, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        None

    Returns:
        FastAPI: The configured FastAPI application instance.

    Notes:
        1. Initialize the FastAPI application with the title "Resume Builder API".
        2. Create the resume count cache and keep it on `app.state`.
        3. Register exception handlers so every error body is `{"error": message}`.
        4. Add CORS middleware to allow requests from any origin.
        5. Include the generation, experience, life-data, resume and user routers.
        6. Define a health check endpoint at "/health".

    """
    _msg = "Creating FastAPI application"
    log.debug(_msg)

    settings = get_settings()
    app = FastAPI(title="Resume Builder API")
    app.state.resume_count_cache = ResumeCountCache(
        ttl_seconds=settings.resume_count_cache_ttl_seconds,
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(resume_ai_router)
    app.include_router(experiences_router)
    app.include_router(life_data_router)
    app.include_router(resume_router)
    app.include_router(user_router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint.

        Returns:
            dict: A dictionary with a single key "status" and value "ok".

        """
        return {"status": "ok"}

    _msg = "FastAPI application created successfully"
    log.debug(_msg)
    return app


app = create_app()
