"""Webhook routes - prompt discovery relay."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from app.api.deps import get_discovery_relay
from app.schemas.api import ErrorResponse, RelayResponse
from app.services.relay import DiscoveryRelay

router = APIRouter(prefix="/api/webhooks", tags=["webhooks"])


@router.post(
    "/prompt-discovery",
    response_model=RelayResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def prompt_discovery(
    request: Request,
    body: Any = Body(...),
    relay: DiscoveryRelay = Depends(get_discovery_relay),
):
    """
    Forward a prompt discovery event to the marketing webhook.

    Returns 400 only when ``email`` or ``productCategory`` is missing. Delivery
    problems (no URL configured, timeout, non-2xx, network error) are logged
    and the response is still ``success: true`` with a ``request_id``.
    """
    outcome = await relay.relay(body, request.headers)
    return RelayResponse(message=outcome.message, request_id=outcome.request_id, error=outcome.error)
