from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.responses import http_error_handler, request_validation_handler
from app.api.routes import admin_analytics, admin_panel, bookings, food_items, halls, themes
from app.core.config import Settings, get_settings
from app.core.logging_config import get_logger, setup_logging
from app.core.redis import ViewCache, connect_redis
from app.db import base  # noqa: F401
from app.db.session import build_engine, build_session_factory

logger = get_logger()


def create_app(
    settings: Settings | None = None,
    session_factory=None,
    cache: ViewCache | None = None,
) -> FastAPI:
    """
    Build the API. The session factory and view cache are created here once
    per process unless the caller injects its own (tests do).
    """
    settings = settings or get_settings()

    if session_factory is None:
        setup_logging(settings.LOG_DIR)
        engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
        session_factory = build_session_factory(engine)

    if cache is None:
        cache = ViewCache(connect_redis(settings.REDIS_URL), ttl=settings.CACHE_TTL_SECONDS)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="API for Venue Booking: Halls, Food, Themes & Bookings",
    )
    app.state.session_factory = session_factory
    app.state.cache = cache

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    # Request Logging Middleware
    @app.middleware("http")
    async def log_requests(request, call_next):
        logger.info(f"REQUEST: {request.method} {request.url}")

        try:
            response = await call_next(request)
            logger.info(f"RESPONSE: {response.status_code} {request.url}")
            return response

        except Exception as e:
            logger.error(f"ERROR: {request.url} -> {str(e)}")
            raise e

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(halls.router)
    app.include_router(food_items.router)
    app.include_router(themes.router)
    app.include_router(bookings.router)
    app.include_router(admin_panel.router)
    app.include_router(admin_analytics.router)

    @app.get("/", tags=["Root"])
    def root():
        return {"message": "Backend running successfully"}

    return app
