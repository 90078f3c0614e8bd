from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, Field

BoardTab = Literal["todos", "contacts", "specs"]


def _new_id() -> str:
    return uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ChatMessage(BaseModel):
    id: str = Field(default_factory=_new_id)
    content: str
    is_user: bool = False
    speaker: str | None = None
    timestamp: datetime = Field(default_factory=_now)


class TodoItem(BaseModel):
    id: str = Field(default_factory=_new_id)
    title: str
    description: str | None = None
    completed: bool = False
    created_at: datetime = Field(default_factory=_now)


class Contact(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str
    details: str = ""
    created_at: datetime = Field(default_factory=_now)


class Meeting(BaseModel):
    id: str = Field(default_factory=_new_id)
    title: str
    when: str = ""
    details: str = ""
    created_at: datetime = Field(default_factory=_now)


class Specification(BaseModel):
    id: str = Field(default_factory=_new_id)
    title: str
    type: str = "未分類"
    content: str = ""
    created_at: datetime = Field(default_factory=_now)
