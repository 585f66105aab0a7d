"""Outbound Event Relay - forwards prompt discovery events to the marketing webhook.

Delivery is at-most-once and best effort: one POST, bounded by a hard timeout,
no retry. Only a malformed event is reported to the caller; everything that
goes wrong downstream is logged and absorbed.
"""

from __future__ import annotations

import asyncio
import random
import string
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

import httpx

from app.core.errors import DeliveryFailure, describe
from app.core.logging import get_logger
from app.core.result import Err, Ok, Result
from app.core.validation import require_fields
from app.schemas.relay import DeliveryPayload, DiscoveryEvent

log = get_logger("relay")

DEFAULT_TIMEOUT_SECONDS = 10.0
USER_AGENT = "ElevateAI-Webhook/1.0"
_BASE36 = string.digits + string.ascii_lowercase


def new_request_id() -> str:
    """``pd_<epoch-millis>_<9 base36 chars>``"""
    suffix = "".join(random.choices(_BASE36, k=9))
    return f"pd_{int(time.time() * 1000)}_{suffix}"


def parse_event_timestamp(value: Optional[str]) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC.

    Raises ValueError for anything unparseable.
    """
    if not value:
        return datetime.now(timezone.utc)
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def readable_timestamp(moment: datetime) -> str:
    """``1/1/2024, 12:00:00 AM`` style, in UTC."""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment.month}/{moment.day}/{moment.year}, {hour}:{moment.minute:02d}:{moment.second:02d} {meridiem}"


def client_ip(headers: Mapping[str, str]) -> str:
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip() or "Unknown"
    return headers.get("x-real-ip") or "Unknown"


def build_payload(event: DiscoveryEvent, headers: Mapping[str, str], request_id: Optional[str] = None) -> DeliveryPayload:
    moment = parse_event_timestamp(event.timestamp)
    iso = moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return DeliveryPayload(
        email=event.email,
        product_category=event.productCategory,
        timestamp=event.timestamp or iso,
        source=event.source,
        user_agent=headers.get("user-agent") or "Unknown",
        ip_address=client_ip(headers),
        request_id=request_id or new_request_id(),
        date_created=iso,
        date_created_unix=int(moment.timestamp()),
        date_created_readable=readable_timestamp(moment),
    )


@dataclass
class RelayOutcome:
    message: str
    request_id: Optional[str] = None
    delivered: bool = False
    error: Optional[str] = None


class DiscoveryRelay:
    """Relays one discovery event per ``relay`` call."""

    def __init__(
        self,
        webhook_url: Optional[str],
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.webhook_url)

    async def deliver(self, payload: DeliveryPayload) -> Result[int, DeliveryFailure]:
        """Single POST to the webhook. Never raises."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await asyncio.wait_for(
                    client.post(
                        self.webhook_url,
                        json=payload.model_dump(),
                        headers={"Content-Type": "application/json", "User-Agent": USER_AGENT},
                    ),
                    timeout=self.timeout,
                )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            return Err(DeliveryFailure(f"timed out after {self.timeout}s"))
        except httpx.HTTPError as exc:
            return Err(DeliveryFailure(f"transport error: {describe(exc)}"))

        if not response.is_success:
            return Err(DeliveryFailure(f"HTTP {response.status_code} {response.reason_phrase}", response.status_code))
        return Ok(response.status_code)

    async def relay(self, body: Any, headers: Mapping[str, str]) -> RelayOutcome:
        """Validate, build, deliver.

        Raises ValidationError when email or productCategory is missing; every
        other failure ends in a successful outcome.
        """
        require_fields(body, "email", "productCategory", message="Missing required fields: email or productCategory")

        # Returned on every path so delivery can be correlated out of band
        request_id = new_request_id()
        try:
            if not self.configured:
                log.info(f"No Zapier webhook URL configured, skipping delivery for {request_id}")
                return RelayOutcome(message="Webhook received but no Zapier URL configured", request_id=request_id)

            event = DiscoveryEvent.model_validate(body)
            payload = build_payload(event, headers, request_id=request_id)

            outcome = await self.deliver(payload)
            if isinstance(outcome, Err):
                # Best effort: the caller's flow must not depend on delivery
                log.error(f"Zapier webhook failed for {request_id}: {outcome.error.reason}")
            else:
                log.info(f"Zapier webhook sent successfully for {request_id} (HTTP {outcome.value})")

            return RelayOutcome(
                message="Webhook processed successfully",
                request_id=request_id,
                delivered=isinstance(outcome, Ok),
            )
        except Exception as exc:  # noqa: BLE001
            log.exception(f"Webhook processing error: {exc}")
            return RelayOutcome(
                message="Webhook received but processing failed",
                request_id=request_id,
                error=describe(exc),
            )
