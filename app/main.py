from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware
from app.api import auth, products, quote_requests
from app.core.config import Settings
from app.core.errors import register_error_handlers
from app.core.metrics import request_count, request_duration, db_connected, get_metrics_text
from app.core.security import TokenIssuer
from app.db.seed import seed_database
from app.db.session import build_engine, build_session_factory, init_db, ping_db
import time
import logging

logger = logging.getLogger(__name__)


def endpoint_label(request: Request) -> str:
    """Template of the matched route, e.g. ``/api/products/{product_id}``."""
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path or "<unmatched>"


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception:
            duration = time.time() - start_time
            endpoint = endpoint_label(request)
            request_count.labels(
                method=request.method,
                endpoint=endpoint,
                status=500
            ).inc()
            request_duration.labels(
                method=request.method,
                endpoint=endpoint
            ).observe(duration)
            raise

        duration = time.time() - start_time
        endpoint = endpoint_label(request)
        request_count.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code
        ).inc()
        request_duration.labels(
            method=request.method,
            endpoint=endpoint
        ).observe(duration)
        logger.debug(f"{request.method} {request.url.path} -> {response.status_code} ({duration:.3f}s)")
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting...")
    settings: Settings = app.state.settings

    try:
        await init_db(app.state.engine)
        async with app.state.session_factory() as session:
            await seed_database(session, settings)
        db_connected.set(1)
        logger.info("Database connected")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        db_connected.set(0)
        raise

    yield

    logger.info("Application shutting down...")
    await app.state.engine.dispose()
    db_connected.set(0)
    logger.info("Shutdown complete")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application from an explicit settings object.

    Run with ``uvicorn app.main:create_app --factory``.
    """
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.token_issuer = TokenIssuer(settings)
    app.state.engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)
    app.state.session_factory = build_session_factory(app.state.engine)

    app.add_middleware(MetricsMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(auth.router, prefix=settings.API_PREFIX)
    app.include_router(products.router, prefix=settings.API_PREFIX)
    app.include_router(quote_requests.router, prefix=settings.API_PREFIX)

    @app.get("/metrics", tags=["monitoring"])
    async def metrics():
        return Response(
            content=get_metrics_text(),
            media_type="text/plain; version=0.0.4; charset=utf-8"
        )

    @app.get("/health", tags=["monitoring"])
    async def health_check():
        try:
            await ping_db(app.state.engine)
            database = "connected"
            db_connected.set(1)
        except Exception as e:
            logger.warning(f"Health check database ping failed: {e}")
            database = "disconnected"
            db_connected.set(0)

        return {
            "status": "healthy" if database == "connected" else "degraded",
            "service": settings.API_TITLE,
            "version": settings.API_VERSION,
            "dependencies": {
                "database": database
            }
        }

    @app.get("/", tags=["root"])
    async def root():
        return {
            "message": settings.API_TITLE,
            "version": settings.API_VERSION,
            "docs": "/docs",
            "health": "/health",
            "metrics": "/metrics"
        }

    return app
