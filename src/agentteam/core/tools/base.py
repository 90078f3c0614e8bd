from __future__ import annotations

import logging
import time
from datetime import date
from typing import Any, Literal, Mapping, Protocol

from pydantic import BaseModel, ConfigDict, Field

RecordKind = Literal["task", "contact", "meeting", "specification"]

UNKNOWN_ACTION_MESSAGE = "不明なアクションです"

logger = logging.getLogger("agentteam.tools")


class ToolOutcome(BaseModel):
    """What a tool did, as reported back to the model and the chat UI.

    ``record_kind`` names the UI list a successful outcome belongs to, so
    consumers never have to guess from the shape of ``data``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    message: str
    data: dict[str, Any] = Field(default_factory=dict)
    speaker: str
    show_toast: bool = Field(default=False, alias="showToast")
    record_kind: RecordKind | None = Field(default=None, alias="recordKind")


class ToolHandler(Protocol):
    name: str
    description: str
    speaker: str
    parameters: dict[str, Any]

    def run(self, arguments: Mapping[str, Any]) -> ToolOutcome: ...


def millis_id() -> str:
    return str(time.time_ns() // 1_000_000)


def format_date(value: date) -> str:
    return f"{value.year}/{value.month}/{value.day}"


def text(value: Any) -> str:
    return "" if value is None else str(value)


def optional_string(description: str) -> dict[str, Any]:
    return {"type": ["string", "null"], "description": description}


def action_schema(actions: list[str], action_description: str, /, **fields: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "action": {"type": "string", "enum": actions, "description": action_description},
            **fields,
        },
        "required": ["action"],
        "additionalProperties": False,
    }


def unknown_action(speaker: str) -> ToolOutcome:
    return ToolOutcome(success=False, message=UNKNOWN_ACTION_MESSAGE, speaker=speaker)


def log_tool_call(name: str, arguments: Mapping[str, Any]) -> None:
    logger.info(
        "tool_call",
        extra={
            "extra_fields": {
                "tool": name,
                "action": arguments.get("action"),
                "arg_names": sorted(key for key, value in arguments.items() if value is not None),
            }
        },
    )
