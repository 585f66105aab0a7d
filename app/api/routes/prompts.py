"""Prompt routes - manage the active system prompt set."""

import asyncio
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query
from pydantic import ValidationError as PydanticValidationError

from app.api.deps import get_prompt_repository
from app.core.errors import NotFoundError, ValidationError
from app.core.logging import get_logger
from app.core.validation import is_blank, require_fields
from app.schemas.api import DeleteResponse, ErrorResponse, ListResponse, RecordResponse
from app.services.prompt_store import PromptRepository

log = get_logger("prompts")

router = APIRouter(prefix="/api/admin/prompts", tags=["admin", "prompts"])

PROMPT_TYPES = ("system", "persona", "brand")

_ERRORS = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _check_type(prompt_type: Any) -> None:
    if prompt_type not in PROMPT_TYPES:
        raise ValidationError("Invalid type. Must be system, persona, or brand")


@router.get("", response_model=ListResponse)
async def list_prompts(
    target_id: Optional[str] = Query(None, description="Only the active prompt for this target"),
    type: str = Query("persona", description="Prompt type used with target_id"),
    repository: PromptRepository = Depends(get_prompt_repository),
):
    """Active prompts, including persona prompts generated for new demographics."""
    if target_id is None:
        prompts = await asyncio.to_thread(repository.load_all)
        return ListResponse(
            data=[p.model_dump() for p in prompts],
            message=f"{len(prompts)} system prompt(s) loaded",
        )

    prompt = await asyncio.to_thread(repository.get_for_target, target_id, type)
    data = [prompt.model_dump()] if prompt else []
    return ListResponse(data=data, message=f"{len(data)} {type} prompt(s) found for {target_id}")


@router.post("", response_model=RecordResponse, responses=_ERRORS)
async def create_prompt(
    payload: Dict[str, Any] = Body(...),
    repository: PromptRepository = Depends(get_prompt_repository),
):
    """Add a custom prompt. ``name``, ``type`` and ``prompt_template`` are required."""
    require_fields(
        payload,
        "name",
        "type",
        "prompt_template",
        message="Missing required fields: name, type, and prompt_template",
    )
    _check_type(payload["type"])

    target_id = payload.get("target_id")
    prompt = await asyncio.to_thread(
        repository.create,
        payload["name"],
        payload["type"],
        None if is_blank(target_id) else target_id,
        payload["prompt_template"],
    )
    log.info(f"Created {prompt.type} prompt {prompt.id}")
    return RecordResponse(data=prompt.model_dump(), message="Prompt created successfully")


@router.put("", response_model=RecordResponse, responses=_ERRORS)
async def update_prompt(
    payload: Dict[str, Any] = Body(...),
    repository: PromptRepository = Depends(get_prompt_repository),
):
    """Edit a prompt by ``id``. Empty name, type or template keep the stored value."""
    require_fields(payload, "id", message="Missing required field: id")
    if payload.get("type"):
        _check_type(payload["type"])

    updates = {
        key: payload[key]
        for key in ("name", "type", "prompt_template", "target_id", "is_active")
        if key in payload
    }
    try:
        prompt = await asyncio.to_thread(repository.update, str(payload["id"]), updates)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid prompt payload", details=str(exc)) from exc
    if prompt is None:
        raise NotFoundError("Prompt not found")
    return RecordResponse(data=prompt.model_dump(), message="Prompt updated successfully")


@router.delete("", response_model=DeleteResponse, responses=_ERRORS)
async def delete_prompt(
    id: Optional[str] = Query(None, description="Prompt id"),
    repository: PromptRepository = Depends(get_prompt_repository),
):
    if is_blank(id):
        raise ValidationError("Missing prompt ID")

    deleted = await asyncio.to_thread(repository.delete, id)
    if not deleted:
        raise NotFoundError("Prompt not found")
    log.info(f"Deleted prompt {id}")
    return DeleteResponse(message="Prompt deleted successfully")
