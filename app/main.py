from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.routes import health_router, prompts_router, resource_routers, webhooks_router
from app.core.background import BackgroundTaskRunner
from app.core.config import settings
from app.core.db import build_session_factory
from app.core.errors import register_exception_handlers
from app.core.logging import get_logger
from app.services.prompt_store import PromptRepository
from app.services.stores import SQLStore
from app.services.taxonomies import TAXONOMIES

log = get_logger("app")


def seed_database(session_factory) -> None:
    """Give an empty database the same starting data demo mode serves."""
    for taxonomy in TAXONOMIES.values():
        SQLStore(session_factory, taxonomy.key).seed_if_empty(taxonomy.fallback)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info(f"Starting admin backend in {settings.ENV.upper()} mode")

    # Startup
    session_factory = build_session_factory(settings.DATABASE_URL)
    if session_factory is None:
        log.info("No DATABASE_URL configured: serving sample data (demo mode)")
    else:
        seed_database(session_factory)

    if not settings.ZAPIER_WEBHOOK_URL:
        log.info("No ZAPIER_WEBHOOK_URL configured: discovery events will not be forwarded")

    log.info(f"Persona prompt enrichment runs in {settings.ENRICHMENT_MODE} mode")

    app.state.session_factory = session_factory
    app.state.prompt_repository = PromptRepository(settings.PROMPTS_DIR)
    app.state.task_runner = BackgroundTaskRunner()

    yield

    # Shutdown
    log.info("Shutting down services...")
    await app.state.task_runner.drain(timeout=settings.BACKGROUND_DRAIN_SECONDS)
    log.info("Application shutdown complete")


# Configure FastAPI based on environment
app = FastAPI(
    title="Content Platform Admin Backend",
    description="Brand, demographic and legal guideline administration with prompt discovery relay",
    version="1.0.0",
    lifespan=lifespan,
    # Disable docs in production for security
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
    debug=settings.debug_enabled,
)

register_exception_handlers(app)

for router in resource_routers:
    app.include_router(router)
app.include_router(prompts_router)
app.include_router(webhooks_router)
app.include_router(health_router)
