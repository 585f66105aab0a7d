"""Resource Gateway - create/read/update/delete for one taxonomy."""

from __future__ import annotations

import asyncio

from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from app.core.errors import AppError, InternalError, ValidationError, describe
from app.core.logging import get_logger
from app.core.validation import is_blank, require_fields
from app.schemas.resources import utc_now_iso
from app.services.enrichment import EnrichmentDispatcher
from app.services.stores import Store
from app.services.taxonomies import Taxonomy

log = get_logger("gateway")


class ResourceGateway:
    """Validates input, fills defaults once, and hands records to a Store.

    Every record leaving ``create``/``update`` has all fields of the taxonomy's
    model populated. Store failures surface as InternalError; enrichment
    failures never surface at all.
    """

    def __init__(
        self,
        taxonomy: Taxonomy,
        store: Store,
        enrichment: Optional[EnrichmentDispatcher] = None,
    ):
        self.taxonomy = taxonomy
        self.store = store
        self.enrichment = enrichment

    @property
    def demo_mode(self) -> bool:
        return self.store.name == "demo"

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _materialize(self, payload: Mapping[str, Any], record_id: str, created_at: str) -> Dict[str, Any]:
        now = utc_now_iso()
        data = {**payload, "id": record_id, "created_at": created_at, "updated_at": now}
        try:
            return self.taxonomy.model.model_validate(data).model_dump()
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid {self.taxonomy.label.lower()} payload", details=str(exc)) from exc

    async def _store_call(self, action: str, fn, *args):
        # Store backends are synchronous; keep their I/O off the event loop
        try:
            return await asyncio.to_thread(fn, *args)
        except AppError:
            raise
        except Exception as exc:  # noqa: BLE001
            log.error(f"Store failed to {action} {self.taxonomy.label.lower()}: {exc}")
            raise InternalError(f"Failed to {action} {self.taxonomy.label.lower()}", details=describe(exc)) from exc

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------
    async def list(self) -> List[Dict[str, Any]]:
        return await self._store_call("load", self.store.list)

    async def create(self, payload: Any) -> Dict[str, Any]:
        require_fields(payload, "name", message=f"{self.taxonomy.label} name is required")

        record_id = await self._store_call("create", self.store.new_id)
        record = self._materialize(payload, record_id, created_at=utc_now_iso())
        record = await self._store_call("create", self.store.insert, record)
        log.info(f"Created {self.taxonomy.label.lower()} {record['id']} ({record['name']})")

        if self.taxonomy.enrich_on_create and self.enrichment is not None:
            # dispatch() never raises; the record is returned whatever happens
            await self.enrichment.dispatch(record)

        return record

    async def update(self, payload: Any) -> Dict[str, Any]:
        require_fields(payload, "id", message=f"{self.taxonomy.label} ID is required")

        created_at = payload.get("created_at")
        if is_blank(created_at):
            created_at = utc_now_iso()

        record = self._materialize(payload, str(payload["id"]), created_at=created_at)
        record = await self._store_call("update", self.store.update, record)
        log.info(f"Updated {self.taxonomy.label.lower()} {record['id']}")
        return record

    async def delete(self, record_id: Optional[str]) -> bool:
        if is_blank(record_id):
            raise ValidationError(f"{self.taxonomy.label} ID is required")

        existed = await self._store_call("delete", self.store.delete, record_id)
        log.info(f"Deleted {self.taxonomy.label.lower()} {record_id} (existed={existed})")
        return True
