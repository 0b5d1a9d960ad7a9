from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class NoteCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Optional[str] = None
    attachment: Optional[str] = None


@dataclass(frozen=True)
class Note:
    user_id: str
    note_id: str
    content: Optional[str]
    attachment: Optional[str]
    created_at: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "noteId": self.note_id,
            "content": self.content,
            "attachment": self.attachment,
            "createdAt": self.created_at,
        }
