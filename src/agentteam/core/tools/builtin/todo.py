from __future__ import annotations

from typing import Any, Callable, Mapping

from agentteam.core.tools.base import (
    ToolOutcome,
    action_schema,
    log_tool_call,
    millis_id,
    optional_string,
    text,
    unknown_action,
)

TODO_SPEAKER = "TODO管理係"


class TodoManagerTool:
    name = "manage_todo"
    description = "Create, update, or list TODO items for the user"
    speaker = TODO_SPEAKER
    parameters = action_schema(
        ["create", "list", "complete"],
        "The action to perform",
        title=optional_string("Title for new TODO"),
        description=optional_string("Description for new TODO"),
        id=optional_string("TODO ID for complete action"),
    )

    def __init__(self, id_factory: Callable[[], str] | None = None) -> None:
        self.id_factory = id_factory or millis_id

    def run(self, arguments: Mapping[str, Any]) -> ToolOutcome:
        log_tool_call(self.name, arguments)
        action = arguments.get("action")
        title = arguments.get("title")
        description = arguments.get("description")
        todo_id = arguments.get("id")

        if action == "create":
            return ToolOutcome(
                success=True,
                message=f"TODO「{text(title)}」を作成しました！",
                data={"title": title, "description": description, "id": self.id_factory()},
                speaker=self.speaker,
                show_toast=True,
                record_kind="task",
            )
        if action == "list":
            return ToolOutcome(
                success=True,
                message="現在のTODOリストを確認しています...",
                data={"todos": []},
                speaker=self.speaker,
            )
        if action == "complete":
            return ToolOutcome(
                success=True,
                message=f"TODO「{text(todo_id)}」を完了にしました！",
                data={"completedId": todo_id},
                speaker=self.speaker,
            )
        return unknown_action(self.speaker)
