"""Client-side chat state, rebuilt from each shaped reply.

The board never talks to a store. The UI routes serialize it into the page
and the browser posts it back with the next request.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, ValidationError

from agentteam.core.orchestration.schemas import ChatReply
from agentteam.core.tools.base import RecordKind, ToolOutcome
from agentteam.core.tools.builtin.specification import SPECIFICATION_SPEAKER

from .schemas import BoardTab, ChatMessage, Contact, Meeting, Specification, TodoItem

USER_SPEAKER = "あなた"
TOAST_FALLBACK = "操作が完了しました"
ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."

logger = logging.getLogger("agentteam.board")


def classify_record(tool: ToolOutcome) -> RecordKind | None:
    if tool.record_kind is not None:
        return tool.record_kind
    data = tool.data
    if data.get("contactName"):
        return "contact"
    if data.get("meetingTitle"):
        return "meeting"
    if data.get("title"):
        return "specification" if tool.speaker == SPECIFICATION_SPEAKER else "task"
    return None


def _string(value: object, default: str = "") -> str:
    return default if value is None or value == "" else str(value)


class ChatBoard(BaseModel):
    messages: list[ChatMessage] = Field(default_factory=list)
    todos: list[TodoItem] = Field(default_factory=list)
    contacts: list[Contact] = Field(default_factory=list)
    meetings: list[Meeting] = Field(default_factory=list)
    specifications: list[Specification] = Field(default_factory=list)
    toasts: list[str] = Field(default_factory=list)
    active_tab: BoardTab = "todos"

    @classmethod
    def load(cls, raw: str | None) -> "ChatBoard":
        if not raw:
            return cls()
        try:
            return cls.model_validate_json(raw)
        except ValidationError:
            logger.warning("board_state_invalid", extra={"extra_fields": {"length": len(raw)}})
            return cls()

    def dump(self) -> str:
        return self.model_dump_json(exclude={"toasts"})

    def add_user_message(self, text: str) -> None:
        self.messages.append(ChatMessage(content=text, is_user=True, speaker=USER_SPEAKER))

    def add_error_message(self) -> None:
        self.messages.append(ChatMessage(content=ERROR_MESSAGE))

    def apply_reply(self, reply: ChatReply) -> None:
        self.messages.append(ChatMessage(content=reply.response, speaker=reply.speaker))
        for tool in reply.tools:
            if tool.show_toast:
                self.toasts.append(tool.message or TOAST_FALLBACK)
        for tool in reply.tools:
            self.add_record(tool)
        for agent_response in reply.agent_responses:
            self.messages.append(ChatMessage(content=agent_response.content, speaker=agent_response.speaker))

    def add_record(self, tool: ToolOutcome) -> RecordKind | None:
        kind = classify_record(tool)
        data = tool.data
        if kind == "task" and data.get("title"):
            todo = TodoItem(title=str(data["title"]), description=data.get("description"))
            if data.get("id"):
                todo.id = str(data["id"])
            self.todos.append(todo)
        elif kind == "contact" and data.get("contactName"):
            self.contacts.append(Contact(name=str(data["contactName"]), details=_string(data.get("details"))))
        elif kind == "meeting" and data.get("meetingTitle"):
            self.meetings.append(
                Meeting(
                    title=str(data["meetingTitle"]),
                    when=_string(data.get("datetime")),
                    details=_string(data.get("details")),
                )
            )
        elif kind == "specification" and data.get("title"):
            self.specifications.append(
                Specification(
                    title=str(data["title"]),
                    type=_string(data.get("type"), "未分類"),
                    content=_string(data.get("content")),
                )
            )
        else:
            return None
        return kind

    def toggle_todo(self, todo_id: str) -> bool:
        for todo in self.todos:
            if todo.id == todo_id:
                todo.completed = not todo.completed
                return True
        return False

    def select_tab(self, tab: BoardTab) -> None:
        self.active_tab = tab

    def drain_toasts(self) -> list[str]:
        toasts, self.toasts = self.toasts, []
        return toasts
