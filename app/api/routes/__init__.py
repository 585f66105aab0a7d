from app.api.routes.health import router as health_router
from app.api.routes.prompts import router as prompts_router
from app.api.routes.resources import routers as resource_routers
from app.api.routes.webhooks import router as webhooks_router

__all__ = ["health_router", "prompts_router", "resource_routers", "webhooks_router"]
