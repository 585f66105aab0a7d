"""Prompt discovery relay tests"""

import asyncio
import json
import re
import time

import httpx
import pytest

from app.core.errors import ValidationError
from app.core.result import Err, Ok
from app.schemas.relay import DiscoveryEvent
from app.services.relay import DiscoveryRelay, build_payload, new_request_id, readable_timestamp, parse_event_timestamp

REQUEST_ID = re.compile(r"^pd_\d+_[0-9a-z]{9}$")
EVENT = {
    "email": "a@b.com",
    "productCategory": "shoes",
    "timestamp": "2024-01-01T00:00:00Z",
    "source": "test",
}
HEADERS = {"user-agent": "pytest", "x-forwarded-for": "10.0.0.1, 10.0.0.2"}


class RecordingEndpoint:
    """Mock webhook that records every request"""

    def __init__(self, status_code=200, delay=0.0, error=None):
        self.status_code = status_code
        self.delay = delay
        self.error = error
        self.requests = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return httpx.Response(self.status_code, json={"status": "ok"})

    @property
    def transport(self):
        return httpx.MockTransport(self)


def make_relay(endpoint, url="https://hooks.example.com/catch", timeout=10.0):
    return DiscoveryRelay(url, timeout=timeout, transport=endpoint.transport)


class TestPayload:
    """Test delivery payload construction"""

    def test_request_id_format(self):
        assert REQUEST_ID.match(new_request_id())

    def test_payload_fields(self):
        payload = build_payload(DiscoveryEvent(**EVENT), HEADERS, request_id="pd_1_abcdefghi")

        assert payload.email == "a@b.com"
        assert payload.product_category == "shoes"
        assert payload.source == "test"
        assert payload.event_type == "prompt_discovery_started"
        assert payload.user_agent == "pytest"
        assert payload.ip_address == "10.0.0.1"
        assert payload.request_id == "pd_1_abcdefghi"
        assert payload.utm_source == "geo-x"
        assert payload.utm_medium == "web-app"
        assert payload.utm_campaign == "prompt-discovery"
        assert payload.plan_type == "free"

    def test_timestamp_encodings(self):
        payload = build_payload(DiscoveryEvent(**EVENT), {})

        assert payload.date_created == "2024-01-01T00:00:00.000Z"
        assert payload.date_created_unix == 1704067200
        assert payload.date_created_readable == "1/1/2024, 12:00:00 AM"
        assert payload.user_agent == "Unknown"
        assert payload.ip_address == "Unknown"

    def test_real_ip_fallback(self):
        payload = build_payload(DiscoveryEvent(**EVENT), {"x-real-ip": "192.168.1.9"})
        assert payload.ip_address == "192.168.1.9"

    def test_readable_afternoon(self):
        moment = parse_event_timestamp("2024-07-04T15:05:09+02:00")
        assert readable_timestamp(moment) == "7/4/2024, 1:05:09 PM"

    def test_bad_timestamp_raises(self):
        with pytest.raises(ValueError):
            parse_event_timestamp("yesterday-ish")


class TestRelay:
    """Test best-effort relay behaviour"""

    @pytest.mark.asyncio
    async def test_skips_without_destination(self):
        outcome = await DiscoveryRelay(None).relay(EVENT, HEADERS)

        assert outcome.message == "Webhook received but no Zapier URL configured"
        assert REQUEST_ID.match(outcome.request_id)
        assert outcome.error is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["email", "productCategory"])
    async def test_missing_field_never_delivers(self, missing):
        endpoint = RecordingEndpoint()
        body = {k: v for k, v in EVENT.items() if k != missing}

        with pytest.raises(ValidationError) as exc_info:
            await make_relay(endpoint).relay(body, HEADERS)

        assert exc_info.value.error == "Missing required fields: email or productCategory"
        assert endpoint.requests == []

    @pytest.mark.asyncio
    async def test_whitespace_email_is_present(self):
        endpoint = RecordingEndpoint()
        outcome = await make_relay(endpoint).relay({**EVENT, "email": "  "}, HEADERS)

        assert outcome.delivered is True
        assert len(endpoint.requests) == 1

    @pytest.mark.asyncio
    async def test_delivers_payload(self):
        endpoint = RecordingEndpoint()
        outcome = await make_relay(endpoint).relay(EVENT, HEADERS)

        assert outcome.delivered is True
        assert outcome.message == "Webhook processed successfully"
        assert len(endpoint.requests) == 1

        sent = endpoint.requests[0]
        body = json.loads(sent.content)
        assert sent.method == "POST"
        assert sent.headers["user-agent"] == "ElevateAI-Webhook/1.0"
        assert body["request_id"] == outcome.request_id
        assert body["product_category"] == "shoes"

    @pytest.mark.asyncio
    async def test_non_2xx_is_absorbed(self):
        endpoint = RecordingEndpoint(status_code=503)
        relay = make_relay(endpoint)

        failure = await relay.deliver(build_payload(DiscoveryEvent(**EVENT), {}))
        outcome = await relay.relay(EVENT, HEADERS)

        assert isinstance(failure, Err)
        assert failure.error.status_code == 503
        assert outcome.delivered is False
        assert outcome.error is None
        assert outcome.message == "Webhook processed successfully"

    @pytest.mark.asyncio
    async def test_network_error_is_absorbed(self):
        endpoint = RecordingEndpoint(error=httpx.ConnectError("connection refused"))
        outcome = await make_relay(endpoint).relay(EVENT, HEADERS)

        assert outcome.delivered is False
        assert REQUEST_ID.match(outcome.request_id)

    @pytest.mark.asyncio
    async def test_timeout_is_bounded_and_absorbed(self):
        endpoint = RecordingEndpoint(delay=5.0)
        relay = make_relay(endpoint, timeout=0.2)

        started = time.perf_counter()
        outcome = await relay.relay(EVENT, HEADERS)
        elapsed = time.perf_counter() - started

        assert outcome.delivered is False
        assert outcome.message == "Webhook processed successfully"
        assert elapsed < 2.0

    @pytest.mark.asyncio
    async def test_successful_delivery_result(self):
        relay = make_relay(RecordingEndpoint(status_code=202))
        result = await relay.deliver(build_payload(DiscoveryEvent(**EVENT), {}))
        assert isinstance(result, Ok)
        assert result.value == 202

    @pytest.mark.asyncio
    async def test_processing_error_still_succeeds(self):
        endpoint = RecordingEndpoint()
        outcome = await make_relay(endpoint).relay({**EVENT, "timestamp": "not a date"}, HEADERS)

        assert outcome.message == "Webhook received but processing failed"
        assert outcome.error
        assert REQUEST_ID.match(outcome.request_id)
        assert endpoint.requests == []

    @pytest.mark.asyncio
    async def test_missing_timestamp_defaults_to_now(self):
        endpoint = RecordingEndpoint()
        event = {k: v for k, v in EVENT.items() if k != "timestamp"}
        outcome = await make_relay(endpoint).relay(event, HEADERS)

        body = json.loads(endpoint.requests[0].content)
        assert outcome.delivered is True
        assert body["date_created_unix"] >= 1704067200
