# catalog/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI

from catalog.core.config import Settings, get_settings
from catalog.core.errors import register_exception_handlers
from catalog.core.forms import FormBodyMiddleware
from catalog.database import create_db_and_tables, make_engine

# Import models so SQLModel metadata is populated before create_all()
from catalog.models import product as _product_models  # noqa: F401

# Routers
from catalog.routers.products import router as products_router

logger = logging.getLogger("uvicorn")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.LOG_LEVEL.upper())


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the API application.

    The store engine is created in the lifespan and owned by app.state;
    requests reach it only through the get_session dependency.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Startup:
          - Connect to the document store and create the products table.
          - A failed connection aborts startup, and the server exits.

        Shutdown:
          - Dispose of the engine's connections.
        """
        logger.info("🔄 Startup: Connecting to the document store (%s)...", settings.ENVIRONMENT)
        try:
            engine = make_engine(settings.database_url, settings.DATABASE_SSL_REQUIRE)
            create_db_and_tables(engine)
        except Exception as e:
            logger.error(f"❌ Startup: DB connection FAILED: {e}")
            raise
        logger.info("✅ Database connected successfully")

        app.state.engine = engine
        yield
        engine.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )

    # Form submissions are turned into JSON bodies before routing
    app.add_middleware(FormBodyMiddleware)

    # --- CORS configuration ---
    # Permissive by default; narrow with CORS_ORIGINS.
    allow_all = settings.CORS_ORIGINS == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Products live under /api/products
    app.include_router(products_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "product-catalog"}

    return app


app = create_app()
