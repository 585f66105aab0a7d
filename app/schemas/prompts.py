from typing import Literal, Optional

from pydantic import BaseModel


class SystemPrompt(BaseModel):
    id: str
    name: str
    type: Literal["persona", "brand", "system"] = "persona"
    target_id: Optional[str] = None
    prompt_template: str
    is_active: bool = True
    is_custom: bool = False
    created_at: str
    updated_at: str
