"""Persona prompt enrichment for newly created demographics.

The dispatcher is the only caller of the generator. Whatever the generator
does (raise, hang, return garbage), ``dispatch`` returns normally and the
demographic create that triggered it is unaffected.
"""

from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional, Protocol

from app.core.background import BackgroundTaskRunner
from app.core.logging import get_logger
from app.core.result import Err, Ok, Result
from app.schemas.prompts import SystemPrompt
from app.services.prompt_store import PromptRepository

log = get_logger("enrichment")

PERSONA_TEMPLATE = """You are a {name} aged {age_range}. {description}

Key characteristics: {characteristics}

When discussing {{brand_name}}, respond authentically as this persona would, considering:
- Your unique demographic characteristics and values
- How your generation typically interacts with brands
- Your communication style and preferences
- Your purchasing power and decision-making process
- Your typical concerns and priorities when evaluating brands

Be genuine and provide realistic consumer insights from your demographic perspective. Use language and references appropriate for your demographic group."""


class PromptGenerator(Protocol):
    async def generate(self, record: Mapping[str, Any]) -> SystemPrompt: ...


class PersonaPromptGenerator:
    """Builds a persona prompt from a demographic and saves it as a custom prompt."""

    def __init__(self, repository: PromptRepository):
        self.repository = repository

    @staticmethod
    def build_template(record: Mapping[str, Any]) -> str:
        return PERSONA_TEMPLATE.format(
            name=record["name"],
            age_range=record.get("age_range", ""),
            description=record.get("description", ""),
            characteristics=", ".join(record.get("characteristics") or []),
        )

    async def generate(self, record: Mapping[str, Any]) -> SystemPrompt:
        template = self.build_template(record)
        # File I/O stays off the event loop
        return await asyncio.to_thread(
            self.repository.create,
            f"{record['name']} Persona",
            "persona",
            record["id"],
            template,
        )


class EnrichmentDispatcher:
    """Runs the persona generator for a record without ever failing the caller.

    With a ``runner`` the attempt is detached as a background task and
    ``dispatch`` returns at once; without one it is awaited inline.
    """

    def __init__(self, generator: PromptGenerator, runner: Optional[BackgroundTaskRunner] = None):
        self.generator = generator
        self.runner = runner

    @property
    def mode(self) -> str:
        return "background" if self.runner is not None else "inline"

    async def attempt(self, record: Mapping[str, Any]) -> Result[SystemPrompt, Exception]:
        try:
            return Ok(await self.generator.generate(record))
        except Exception as exc:  # noqa: BLE001
            return Err(exc)

    async def run(self, record: Mapping[str, Any]) -> None:
        outcome = await self.attempt(record)
        if isinstance(outcome, Ok):
            prompt_id = getattr(outcome.value, "id", None)
            log.info(f"Auto-generated persona prompt {prompt_id} for demographic {record.get('name')!r}")
            return
        # Enrichment is best effort: log and drop the error
        log.warning(f"Persona prompt generation failed for demographic {record.get('id')!r}: {outcome.error!r}")

    async def dispatch(self, record: Mapping[str, Any]) -> None:
        snapshot = dict(record)
        if self.runner is None:
            await self.run(snapshot)
            return

        try:
            self.runner.submit(self.run(snapshot), name=f"persona-prompt:{snapshot.get('id')}")
        except Exception as exc:  # noqa: BLE001
            log.warning(f"Could not queue persona prompt generation for {snapshot.get('id')!r}: {exc}")
