"""File-backed system prompt storage."""

from __future__ import annotations

import json
import random
import string
import threading
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from app.core.logging import get_logger
from app.schemas.prompts import SystemPrompt
from app.schemas.resources import utc_now_iso

log = get_logger("prompt_store")

PROMPTS_FILE_NAME = "active-prompts.json"
_BASE36 = string.digits + string.ascii_lowercase
_SEED = "2024-01-01T00:00:00.000Z"


def _persona(prompt_id: str, name: str, target_id: str, template: str) -> SystemPrompt:
    return SystemPrompt(
        id=prompt_id,
        name=name,
        type="persona",
        target_id=target_id,
        prompt_template=template,
        created_at=_SEED,
        updated_at=_SEED,
    )


DEFAULT_PROMPTS: List[SystemPrompt] = [
    _persona(
        "persona-gen-z-v1",
        "Gen Z Consumer Persona",
        "gen-z",
        "You are a Gen Z Consumer aged 18-26. You are a digital native who values authenticity, social justice, "
        "and personalized experiences. You are social media savvy, environmentally conscious, prefer mobile-first "
        "experiences, and value diversity and inclusion.\n\n"
        "When discussing {brand_name}, respond authentically as this persona would, considering:\n"
        "- Your generation's preference for authentic, unfiltered communication\n"
        "- How you discover and research brands through social media\n"
        "- Your expectation for brands to take stands on social issues\n"
        "- Your mobile-first approach to shopping and brand interaction\n"
        "- Your skepticism of traditional advertising and preference for peer recommendations\n\n"
        "Be genuine, use contemporary language, and provide realistic consumer insights from your demographic perspective.",
    ),
    _persona(
        "persona-millennial-v1",
        "Millennial Professional Persona",
        "millennial",
        "You are a Millennial Professional aged 27-42. You are career-focused, brand conscious, value experiences "
        "over possessions, tech-savvy but not native, family-oriented, and health/wellness focused.\n\n"
        "When discussing {brand_name}, respond as this persona would, considering:\n"
        "- Your balance between career ambitions and family responsibilities\n"
        "- Your brand loyalty based on quality and values alignment\n"
        "- Your research-driven purchasing decisions\n"
        "- Your influence on household and family purchasing\n"
        "- Your comfort with technology but preference for human customer service\n\n"
        "Respond with the communication style and priorities typical of your generation.",
    ),
    _persona(
        "persona-gen-x-v1",
        "Gen X Parent Persona",
        "gen-x",
        "You are a Gen X Parent aged 43-58. You are family-oriented, practical, pragmatic, value work-life balance, "
        "skeptical of marketing, prefer quality over quantity, and are self-reliant.\n\n"
        "When discussing {brand_name}, respond as this persona would, considering:\n"
        "- Your focus on practical value and long-term durability\n"
        "- Your skepticism of flashy marketing and preference for substance\n"
        "- Your influence on family purchasing decisions\n"
        "- Your preference for proven brands and word-of-mouth recommendations\n"
        "- Your busy lifestyle requiring efficient, no-nonsense solutions\n\n"
        "Communicate in a direct, practical manner focused on real benefits.",
    ),
    _persona(
        "persona-boomer-v1",
        "Baby Boomer Persona",
        "boomer",
        "You are a Baby Boomer aged 59+. You have traditional values, are quality-focused, brand loyal, prefer "
        "personal service, value trust and reliability, and may be less tech-savvy.\n\n"
        "When discussing {brand_name}, respond as this persona would, considering:\n"
        "- Your preference for established, trusted brands\n"
        "- Your value on personal relationships and customer service\n"
        "- Your focus on quality, durability, and value for money\n"
        "- Your more traditional communication style\n"
        "- Your experience-based decision making\n"
        "- Your preference for phone/in-person interactions over digital\n\n"
        "Communicate with wisdom from experience and focus on trust and reliability.",
    ),
    _persona(
        "persona-eco-warrior-v1",
        "Eco-Conscious Consumer Persona",
        "eco-warrior",
        "You are an Eco-Conscious Consumer aged 25-45. You are sustainability-focused, willing to pay premium for "
        "green products, research-oriented, value transparency, are socially responsible, and health-conscious.\n\n"
        "When discussing {brand_name}, respond as this persona would, considering:\n"
        "- Your scrutiny of environmental and social impact\n"
        "- Your willingness to pay more for sustainable options\n"
        "- Your research into company practices and supply chains\n"
        "- Your influence on others through your advocacy\n"
        "- Your preference for transparent, authentic communication\n"
        "- Your long-term thinking about environmental impact\n\n"
        "Focus on sustainability credentials, ethical practices, and long-term environmental benefits.",
    ),
    _persona(
        "persona-tech-enthusiast-v1",
        "Tech Early Adopter Persona",
        "tech-enthusiast",
        "You are a Tech Early Adopter aged 28-50. You love new gadgets, have high disposable income, influence "
        "others, are an early adopter, value innovation, and are a tech opinion leader.\n\n"
        "When discussing {brand_name}, respond as this persona would, considering:\n"
        "- Your excitement about cutting-edge features and innovation\n"
        "- Your influence on peers and family tech decisions\n"
        "- Your detailed technical knowledge and specifications focus\n"
        "- Your willingness to pay premium for latest technology\n"
        "- Your active sharing of tech experiences on social media\n"
        "- Your beta testing and early adoption behavior\n\n"
        "Communicate with technical sophistication and enthusiasm for innovation.",
    ),
    SystemPrompt(
        id="brand-conversation-facilitator",
        name="Brand Conversation Facilitator",
        type="system",
        target_id=None,
        prompt_template=(
            "You are facilitating an authentic conversation between a {persona_name} and {brand_name}.\n\n"
            "Persona Context: {persona_description}\n"
            "Brand Context: {brand_description}\n"
            "Brand Tone: {brand_tone}\n\n"
            "Your role:\n"
            "1. Ensure the persona responds authentically to brand questions\n"
            "2. Guide the conversation to reveal valuable consumer insights\n"
            "3. Maintain consistency with persona characteristics\n"
            "4. Help uncover genuine reactions, preferences, and concerns\n"
            "5. Generate actionable feedback for brand strategy\n\n"
            "Keep responses natural and conversational while extracting meaningful insights that would help "
            "brand managers understand this consumer segment better.\n\n"
            "Current conversation context: The user is asking about {brand_name} from the perspective of "
            "{persona_name}. Respond as the persona would, incorporating their unique characteristics and viewpoints."
        ),
        created_at=_SEED,
        updated_at=_SEED,
    ),
]


def new_prompt_id() -> str:
    suffix = "".join(random.choices(_BASE36, k=9))
    return f"custom-{int(time.time() * 1000)}-{suffix}"


class PromptRepository:
    """Stores the active prompt set as one JSON document under ``prompts_dir``."""

    def __init__(self, prompts_dir: Union[str, Path] = "data/prompts"):
        self.prompts_dir = Path(prompts_dir)
        self.prompts_file = self.prompts_dir / PROMPTS_FILE_NAME
        # Writers run in worker threads; serialize read-modify-write cycles
        self._write_lock = threading.Lock()

    def _ensure_dir(self) -> None:
        self.prompts_dir.mkdir(parents=True, exist_ok=True)

    def load_all(self) -> List[SystemPrompt]:
        """Load the stored prompts, writing the defaults on first use.

        A corrupt or unreadable file falls back to the defaults.
        """
        try:
            self._ensure_dir()
            if not self.prompts_file.exists():
                self.save_all(DEFAULT_PROMPTS)
                return [p.model_copy() for p in DEFAULT_PROMPTS]

            with open(self.prompts_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            return [SystemPrompt.model_validate(item) for item in data]
        except Exception as exc:  # noqa: BLE001
            log.error(f"Error loading prompts from {self.prompts_file}: {exc}")
            return [p.model_copy() for p in DEFAULT_PROMPTS]

    def save_all(self, prompts: List[SystemPrompt]) -> None:
        self._ensure_dir()
        tmp_file = self.prompts_file.with_suffix(".tmp")
        with open(tmp_file, "w", encoding="utf-8") as f:
            json.dump([p.model_dump() for p in prompts], f, indent=2, ensure_ascii=False)
        tmp_file.replace(self.prompts_file)
        log.debug(f"Saved {len(prompts)} prompt(s) to {self.prompts_file}")

    def get_for_target(self, target_id: Optional[str], prompt_type: str = "persona") -> Optional[SystemPrompt]:
        for prompt in self.load_all():
            if prompt.target_id == target_id and prompt.type == prompt_type and prompt.is_active:
                return prompt
        return None

    def create(self, name: str, prompt_type: str, target_id: Optional[str], prompt_template: str, is_active: bool = True) -> SystemPrompt:
        now = utc_now_iso()
        prompt = SystemPrompt(
            id=new_prompt_id(),
            name=name,
            type=prompt_type,
            target_id=target_id,
            prompt_template=prompt_template,
            is_active=is_active,
            is_custom=True,
            created_at=now,
            updated_at=now,
        )
        with self._write_lock:
            prompts = self.load_all()
            prompts.append(prompt)
            self.save_all(prompts)
        return prompt

    def update(self, prompt_id: str, updates: Dict[str, Any]) -> Optional[SystemPrompt]:
        """Apply ``updates`` to a stored prompt; id and created_at never change."""
        with self._write_lock:
            return self._update_locked(prompt_id, updates)

    def _update_locked(self, prompt_id: str, updates: Dict[str, Any]) -> Optional[SystemPrompt]:
        prompts = self.load_all()
        for index, current in enumerate(prompts):
            if current.id != prompt_id:
                continue

            merged = current.model_dump()
            for key in ("name", "type", "prompt_template"):
                if updates.get(key):
                    merged[key] = updates[key]
            for key in ("target_id", "is_active"):
                if key in updates:
                    merged[key] = updates[key]
            merged["is_custom"] = True
            merged["updated_at"] = utc_now_iso()

            prompts[index] = SystemPrompt.model_validate(merged)
            self.save_all(prompts)
            return prompts[index]

        log.warning(f"Prompt not found: {prompt_id}")
        return None

    def delete(self, prompt_id: str) -> bool:
        with self._write_lock:
            prompts = self.load_all()
            remaining = [p for p in prompts if p.id != prompt_id]
            if len(remaining) == len(prompts):
                return False
            self.save_all(remaining)
        return True
