"""Taxonomy routes - list/create/update/delete for brands, demographics and legal guidelines."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query

from app.api.deps import gateway_dependency
from app.schemas.api import DeleteResponse, ErrorResponse, ListResponse, RecordResponse
from app.services.gateway import ResourceGateway
from app.services.taxonomies import TAXONOMIES, Taxonomy

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _suffix(gateway: ResourceGateway) -> str:
    return " (demo mode)" if gateway.demo_mode else ""


def build_router(taxonomy: Taxonomy) -> APIRouter:
    router = APIRouter(prefix=f"/api/admin/{taxonomy.key}", tags=["admin", taxonomy.key])
    get_gateway = gateway_dependency(taxonomy)

    @router.get("", response_model=ListResponse, name=f"list_{taxonomy.key}")
    async def list_records(gateway: ResourceGateway = Depends(get_gateway)):
        """Return every record. In demo mode this is the sample dataset, so the admin UI always has data."""
        records = await gateway.list()
        if gateway.demo_mode:
            message = f"Demo {taxonomy.plural} loaded (database integration pending)"
        else:
            message = f"{taxonomy.plural.capitalize()} loaded"
        return ListResponse(data=records, message=message)

    @router.post("", response_model=RecordResponse, responses=_ERRORS, name=f"create_{taxonomy.key}")
    async def create_record(
        payload: Dict[str, Any] = Body(...),
        gateway: ResourceGateway = Depends(get_gateway),
    ):
        """
        Create a record. ``name`` is required; every other field is defaulted.

        Creating a demographic also runs persona prompt generation, inline or
        queued depending on ENRICHMENT_MODE. Its outcome never changes the
        response status.
        """
        record = await gateway.create(payload)
        if taxonomy.enrich_on_create and gateway.enrichment is not None:
            if gateway.enrichment.mode == "inline":
                message = f"{taxonomy.label} created successfully with auto-generated persona prompt"
            else:
                message = f"{taxonomy.label} created successfully; persona prompt generation queued"
        else:
            message = f"{taxonomy.label} created successfully{_suffix(gateway)}"
        return RecordResponse(data=record, message=message)

    @router.put("", response_model=RecordResponse, responses=_ERRORS, name=f"update_{taxonomy.key}")
    async def update_record(
        payload: Dict[str, Any] = Body(...),
        gateway: ResourceGateway = Depends(get_gateway),
    ):
        """Replace a record by ``id``. ``created_at`` is kept only when supplied."""
        record = await gateway.update(payload)
        return RecordResponse(data=record, message=f"{taxonomy.label} updated successfully{_suffix(gateway)}")

    @router.delete("", response_model=DeleteResponse, responses=_ERRORS, name=f"delete_{taxonomy.key}")
    async def delete_record(
        id: Optional[str] = Query(None, description="Record id"),
        gateway: ResourceGateway = Depends(get_gateway),
    ):
        await gateway.delete(id)
        return DeleteResponse(message=f"{taxonomy.label} deleted successfully{_suffix(gateway)}")

    return router


routers = [build_router(taxonomy) for taxonomy in TAXONOMIES.values()]
