import enum
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from sqlalchemy import text
from book_api.config import Settings, settings as default_settings
from book_api.database import Database
from book_api.middleware import RequestLogMiddleware
from book_api.migrations import apply_migrations
from book_api.routers import books

logger = logging.getLogger(__name__)


class StartupState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    CONNECTING = "connecting"
    MIGRATING = "migrating"
    SERVING = "serving"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)-5.5s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    configure_logging(settings.LOG_LEVEL)

    # Startup
    app.state.startup_state = StartupState.CONNECTING
    db = Database(settings.DATABASE_URL, echo=settings.DEBUG, ssl=settings.DATABASE_SSL)
    try:
        async with db.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        if settings.RUN_MIGRATIONS:
            app.state.startup_state = StartupState.MIGRATING
            await apply_migrations(db)
    except Exception:
        logger.exception("Startup failed while in state %s", app.state.startup_state.value)
        await db.dispose()
        raise

    app.state.db = db
    app.state.startup_state = StartupState.SERVING
    logger.info("Book API serving (env=%s)", settings.APP_ENV)
    yield
    # Shutdown
    await db.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    # The interactive API explorer is a development aid only.
    docs = settings.is_development

    app = FastAPI(
        title="Book API",
        description="Minimal CRUD service for books backed by PostgreSQL",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )
    app.state.settings = settings
    app.state.startup_state = StartupState.UNINITIALIZED

    # Middleware
    app.add_middleware(RequestLogMiddleware)

    # Routers
    app.include_router(books.router)

    @app.get("/health")
    async def health():
        return {"status": "healthy", "state": app.state.startup_state.value}

    return app


app = create_app()
