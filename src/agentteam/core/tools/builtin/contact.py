from __future__ import annotations

from typing import Any, Mapping

from agentteam.core.tools.base import ToolOutcome, action_schema, log_tool_call, optional_string, text, unknown_action

CONTACT_SPEAKER = "連絡管理係"
NO_DETAILS = "詳細なし"


class ContactManagementTool:
    name = "manage_contact"
    description = "Manage contacts, schedule meetings, and handle communications"
    speaker = CONTACT_SPEAKER
    parameters = action_schema(
        ["add_contact", "schedule_meeting", "send_reminder", "check_schedule"],
        "The contact management action",
        name=optional_string("Contact name or meeting title"),
        details=optional_string("Contact details or meeting details"),
        datetime=optional_string("Date and time for meetings"),
    )

    def run(self, arguments: Mapping[str, Any]) -> ToolOutcome:
        log_tool_call(self.name, arguments)
        action = arguments.get("action")
        name = arguments.get("name")
        details = arguments.get("details")
        when = arguments.get("datetime")

        if action == "add_contact":
            return ToolOutcome(
                success=True,
                message=f"連絡先「{text(name)}」を追加しました！\n詳細: {details or NO_DETAILS}",
                data={"contactName": name, "details": details},
                speaker=self.speaker,
                show_toast=True,
                record_kind="contact",
            )
        if action == "schedule_meeting":
            return ToolOutcome(
                success=True,
                message=(
                    f"会議「{text(name)}」をスケジュールしました！\n"
                    f"日時: {text(when)}\n"
                    f"詳細: {details or NO_DETAILS}"
                ),
                data={"meetingTitle": name, "datetime": when, "details": details},
                speaker=self.speaker,
                show_toast=True,
                record_kind="meeting",
            )
        if action == "send_reminder":
            return ToolOutcome(
                success=True,
                message=f"リマインダーを送信しました: {text(details)}",
                data={"reminder": details},
                speaker=self.speaker,
                show_toast=True,
            )
        if action == "check_schedule":
            return ToolOutcome(
                success=True,
                message="本日のスケジュールを確認しています...\n現在、予定されている会議はありません。",
                data={"schedule": []},
                speaker=self.speaker,
            )
        return unknown_action(self.speaker)
