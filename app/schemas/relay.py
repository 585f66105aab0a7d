"""Prompt discovery event in, delivery payload out."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class DiscoveryEvent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: str
    productCategory: str
    timestamp: Optional[str] = None
    source: Optional[str] = None


class DeliveryPayload(BaseModel):
    """Sent once to the marketing webhook, never stored."""

    # Standard fields the webhook expects
    email: str
    product_category: str
    timestamp: str
    source: Optional[str] = None

    # Tracking context
    event_type: str = "prompt_discovery_started"
    user_agent: str = "Unknown"
    ip_address: str = "Unknown"
    request_id: str

    # Attribution
    utm_source: str = "geo-x"
    utm_medium: str = "web-app"
    utm_campaign: str = "prompt-discovery"
    feature_used: str = "GEO-X Prompt Discovery Engine"
    plan_type: str = "free"

    # Same instant in three encodings
    date_created: str
    date_created_unix: int
    date_created_readable: str
