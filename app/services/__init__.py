# Services package
from app.services.enrichment import EnrichmentDispatcher, PersonaPromptGenerator
from app.services.gateway import ResourceGateway
from app.services.prompt_store import PromptRepository
from app.services.relay import DiscoveryRelay
from app.services.stores import FallbackStore, SQLStore

__all__ = [
    "EnrichmentDispatcher",
    "PersonaPromptGenerator",
    "ResourceGateway",
    "PromptRepository",
    "DiscoveryRelay",
    "FallbackStore",
    "SQLStore",
]
