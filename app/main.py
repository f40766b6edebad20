# app/main.py (async version)

import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.openapi.utils import get_openapi
from contextlib import asynccontextmanager

from app.adapters.configuration.config import settings
from app.adapters.inbound.api.v1.router import api_router
from app.adapters.outbound.persistence.database import build_engine, build_session_factory, create_tables
from app.adapters.outbound.persistence.repositories import AsyncSQLClientRepository, InMemoryClientRepository
from app.application.ports.inbound import IClientUseCase
from app.application.use_cases.client_use_cases import AsyncClientService
from app.shared.middleware import AsyncExceptionMiddleware, AsyncRequestLoggingMiddleware

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Async context manager to handle startup and shutdown events.
    Creates the clients table and disposes the engine when the
    application owns a database store.
    """
    # Startup
    logger.info("Application starting up...")
    engine = app.state.engine
    if engine is not None:
        await create_tables(engine)

    yield

    # Shutdown
    logger.info("Application shutting down...")
    if engine is not None:
        await engine.dispose()


def build_client_service(app: FastAPI) -> IClientUseCase:
    """
    Build the client service over the store selected by STORAGE_BACKEND.
    """
    if settings.STORAGE_BACKEND == "database":
        if not settings.DATABASE_URL:
            raise RuntimeError("STORAGE_BACKEND is 'database' but no DATABASE_URL could be assembled")
        app.state.engine = build_engine(settings.DATABASE_URL)
        repository = AsyncSQLClientRepository(build_session_factory(app.state.engine))
    else:
        repository = InMemoryClientRepository()

    logger.info(f"Client store: {type(repository).__name__}")
    return AsyncClientService(repository)


def create_app(service: Optional[IClientUseCase] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Client service used by the endpoints. When omitted, one is
            built from the settings.

    Returns:
        Configured FastAPI instance
    """
    app = FastAPI(
        title="Clients",
        description="Client CRUD REST service",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.engine = None
    app.state.client_service = service if service is not None else build_client_service(app)

    # Middlewares (last added is outermost): error responses built by the
    # exception middleware still pass through request logging and CORS
    app.add_middleware(AsyncExceptionMiddleware)
    app.add_middleware(AsyncRequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(api_router)

    @app.get("/", include_in_schema=False)
    async def redirect_to_docs():
        return RedirectResponse(url="/docs")

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        spec = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )

        # Remove unwanted schemas and 422 responses
        for schema in ("HTTPValidationError", "ValidationError"):
            spec.get("components", {}).get("schemas", {}).pop(schema, None)

        for path in spec.get("paths", {}).values():
            for op in path.values():
                op.get("responses", {}).pop("422", None)

        app.openapi_schema = spec
        return spec

    app.openapi = custom_openapi

    return app


app = create_app()
