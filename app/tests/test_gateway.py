"""Resource gateway tests"""

import asyncio
import time

import pytest

from app.core.errors import InternalError, ValidationError
from app.schemas.resources import BrandProfile, DemographicProfile, LegalGuideline
from app.services.gateway import ResourceGateway
from app.services.stores import FallbackStore
from app.services.taxonomies import BRANDS, DEMOGRAPHICS, LEGAL, TAXONOMIES

MODEL_FIELDS = {
    "brands": set(BrandProfile.model_fields),
    "demographics": set(DemographicProfile.model_fields),
    "legal": set(LegalGuideline.model_fields),
}


class BrokenStore(FallbackStore):
    """Store whose every write fails"""

    def __init__(self):
        super().__init__([])

    def insert(self, record):
        raise ConnectionError("database unreachable")

    def update(self, record):
        raise ConnectionError("database unreachable")

    def list(self):
        raise ConnectionError("database unreachable")


class SlowStore(FallbackStore):
    """Store with a blocking list, like a slow database round trip"""

    def list(self):
        time.sleep(0.3)
        return super().list()


def make_gateway(taxonomy, store=None):
    return ResourceGateway(taxonomy, store or FallbackStore(taxonomy.fallback))


class TestCreate:
    """Test create defaulting and validation"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["brands", "demographics", "legal"])
    async def test_name_only_populates_every_field(self, key):
        """Test create with only a name fills every declared field"""
        gateway = make_gateway(TAXONOMIES[key])
        record = await gateway.create({"name": "Only a name"})

        assert set(record) == MODEL_FIELDS[key]
        assert all(value is not None for value in record.values())
        assert record["name"] == "Only a name"
        assert record["description"] == ""
        assert record["is_active"] is True
        assert record["id"].startswith("custom-")
        assert record["created_at"].endswith("Z")

    @pytest.mark.asyncio
    async def test_brand_defaults(self):
        record = await make_gateway(BRANDS).create({"name": "Acme", "logo": ""})
        assert record["tone"] == ""
        assert record["logo"] == "🏢"

    @pytest.mark.asyncio
    async def test_demographic_defaults(self):
        record = await make_gateway(DEMOGRAPHICS).create({"name": "Gamers"})
        assert record["age_range"] == ""
        assert record["characteristics"] == []
        assert record["emoji"] == "👤"

    @pytest.mark.asyncio
    async def test_legal_defaults(self):
        record = await make_gateway(LEGAL).create({"name": "Policy", "rules": None})
        assert record["rules"] == []
        assert record["severity_levels"] == ["low", "medium", "high"]
        assert record["compliance_requirements"] == []

    @pytest.mark.asyncio
    async def test_supplied_values_kept(self):
        """Test caller values win over defaults, including an explicit false"""
        record = await make_gateway(LEGAL).create(
            {"name": "Policy", "severity_levels": [], "is_active": False, "category": "Ads"}
        )
        assert record["severity_levels"] == []
        assert record["is_active"] is False
        assert record["category"] == "Ads"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [True, 0, "no", "maybe", "false"])
    async def test_is_active_true_unless_explicit_false(self, value):
        record = await make_gateway(BRANDS).create({"name": "Acme", "is_active": value})
        assert record["is_active"] is True

    @pytest.mark.asyncio
    async def test_client_id_ignored(self):
        """Test ids are always server-assigned"""
        record = await make_gateway(BRANDS).create({"name": "Acme", "id": "mine", "unknown": 1})
        assert record["id"] != "mine"
        assert "unknown" not in record

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": None}, {"description": "x"}])
    async def test_missing_name(self, payload):
        with pytest.raises(ValidationError) as exc_info:
            await make_gateway(BRANDS).create(payload)
        assert exc_info.value.status_code == 400
        assert exc_info.value.error == "Brand name is required"

    @pytest.mark.asyncio
    async def test_wrong_field_type(self):
        with pytest.raises(ValidationError):
            await make_gateway(DEMOGRAPHICS).create({"name": "X", "characteristics": "not a list"})

    @pytest.mark.asyncio
    async def test_non_object_body(self):
        with pytest.raises(ValidationError):
            await make_gateway(BRANDS).create(["name"])


class TestUpdate:
    """Test update timestamp handling"""

    @pytest.mark.asyncio
    async def test_created_at_preserved_when_supplied(self):
        gateway = make_gateway(BRANDS)
        record = await gateway.update({"id": "apple", "name": "Apple", "created_at": "2024-01-01T00:00:00.000Z"})

        assert record["id"] == "apple"
        assert record["created_at"] == "2024-01-01T00:00:00.000Z"
        assert record["updated_at"] > "2024-01-01T00:00:00.000Z"

    @pytest.mark.asyncio
    async def test_created_at_regenerated_when_absent(self):
        record = await make_gateway(BRANDS).update({"id": "apple", "name": "Apple"})
        assert record["created_at"] != "2024-01-01T00:00:00.000Z"
        assert record["created_at"] <= record["updated_at"]

    @pytest.mark.asyncio
    async def test_updated_at_never_goes_backwards(self):
        gateway = make_gateway(LEGAL)
        first = await gateway.update({"id": "gdpr-compliance", "name": "GDPR"})
        second = await gateway.update({**first})
        assert second["updated_at"] >= first["updated_at"]
        assert second["created_at"] == first["created_at"]

    @pytest.mark.asyncio
    async def test_defaults_reapplied(self):
        record = await make_gateway(DEMOGRAPHICS).update({"id": "gen-z", "name": "Gen Z"})
        assert record["characteristics"] == []
        assert record["emoji"] == "👤"
        assert record["is_active"] is True

    @pytest.mark.asyncio
    async def test_missing_id(self):
        with pytest.raises(ValidationError) as exc_info:
            await make_gateway(LEGAL).update({"name": "No id"})
        assert exc_info.value.error == "Legal guideline ID is required"


class TestListAndDelete:
    """Test list and delete"""

    @pytest.mark.asyncio
    async def test_list_returns_fallback(self):
        records = await make_gateway(DEMOGRAPHICS).list()
        assert [r["id"] for r in records] == [r["id"] for r in DEMOGRAPHICS.fallback]

    @pytest.mark.asyncio
    async def test_list_cannot_mutate_snapshot(self):
        gateway = make_gateway(BRANDS)
        records = await gateway.list()
        records[0]["name"] = "Changed"
        assert (await gateway.list())[0]["name"] == "Apple"

    @pytest.mark.asyncio
    async def test_delete_unknown_id_succeeds(self):
        assert await make_gateway(BRANDS).delete("never-existed") is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("record_id", [None, ""])
    async def test_delete_requires_id(self, record_id):
        with pytest.raises(ValidationError) as exc_info:
            await make_gateway(DEMOGRAPHICS).delete(record_id)
        assert exc_info.value.error == "Demographic ID is required"

    @pytest.mark.asyncio
    async def test_delete_whitespace_id_succeeds(self):
        """Test any non-empty id is accepted, even whitespace"""
        assert await make_gateway(DEMOGRAPHICS).delete(" ") is True


class TestStoreFailures:
    """Test store failures become InternalError"""

    @pytest.mark.asyncio
    async def test_create_store_failure(self):
        gateway = make_gateway(BRANDS, BrokenStore())
        with pytest.raises(InternalError) as exc_info:
            await gateway.create({"name": "Acme"})
        assert exc_info.value.status_code == 500
        assert exc_info.value.details == "database unreachable"

    @pytest.mark.asyncio
    async def test_list_store_failure(self):
        with pytest.raises(InternalError):
            await make_gateway(LEGAL, BrokenStore()).list()


class TestConcurrency:
    """Test blocking store calls stay off the event loop"""

    @pytest.mark.asyncio
    async def test_slow_store_calls_overlap(self):
        gateway = make_gateway(BRANDS, SlowStore(BRANDS.fallback))
        ticks = []

        async def heartbeat():
            for _ in range(5):
                ticks.append(time.monotonic())
                await asyncio.sleep(0.05)

        started = time.monotonic()
        _, first, second = await asyncio.gather(heartbeat(), gateway.list(), gateway.list())
        elapsed = time.monotonic() - started

        assert len(first) == len(second) == 6
        assert elapsed < 0.55
        # The loop kept running while both lists were in flight
        assert ticks[-1] - ticks[0] < 0.4
