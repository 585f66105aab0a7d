"""API dependencies - build services from what the lifespan put on app.state."""

from __future__ import annotations

from typing import Callable

from fastapi import Depends, Request

from app.core.config import settings
from app.services.enrichment import EnrichmentDispatcher, PersonaPromptGenerator
from app.services.gateway import ResourceGateway
from app.services.prompt_store import PromptRepository
from app.services.relay import DiscoveryRelay
from app.services.stores import FallbackStore, SQLStore, Store
from app.services.taxonomies import Taxonomy


def build_store(taxonomy: Taxonomy, session_factory) -> Store:
    if session_factory is None:
        return FallbackStore(taxonomy.fallback)
    return SQLStore(session_factory, taxonomy.key)


def get_prompt_repository(request: Request) -> PromptRepository:
    return request.app.state.prompt_repository


def get_enrichment_dispatcher(
    request: Request,
    repository: PromptRepository = Depends(get_prompt_repository),
) -> EnrichmentDispatcher:
    runner = request.app.state.task_runner if settings.ENRICHMENT_MODE == "background" else None
    return EnrichmentDispatcher(PersonaPromptGenerator(repository), runner=runner)


def gateway_dependency(taxonomy: Taxonomy) -> Callable[..., ResourceGateway]:
    """Dependency factory: one gateway per request for ``taxonomy``."""

    def get_gateway(
        request: Request,
        enrichment: EnrichmentDispatcher = Depends(get_enrichment_dispatcher),
    ) -> ResourceGateway:
        store = build_store(taxonomy, request.app.state.session_factory)
        return ResourceGateway(taxonomy, store, enrichment=enrichment if taxonomy.enrich_on_create else None)

    get_gateway.__name__ = f"get_{taxonomy.key}_gateway"
    return get_gateway


def get_discovery_relay() -> DiscoveryRelay:
    return DiscoveryRelay(settings.ZAPIER_WEBHOOK_URL, timeout=settings.RELAY_TIMEOUT_SECONDS)
