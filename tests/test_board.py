from __future__ import annotations

from agentteam.core.board import ChatBoard, classify_record
from agentteam.core.board.board import ERROR_MESSAGE, TOAST_FALLBACK
from agentteam.core.orchestration.schemas import AgentResponse, ChatReply
from agentteam.core.tools.base import ToolOutcome


def _tool(speaker: str, data: dict, show_toast: bool = True, message: str = "done", record_kind=None) -> ToolOutcome:
    return ToolOutcome(
        success=True,
        message=message,
        data=data,
        speaker=speaker,
        show_toast=show_toast,
        record_kind=record_kind,
    )


def test_apply_reply_orders_bubbles_and_buckets_records() -> None:
    board = ChatBoard()
    reply = ChatReply(
        response="TODO管理係に依頼いたします。",
        speaker="ボス",
        tools=[_tool("TODO管理係", {"title": "資料作成", "id": "t1"}, message="TODO「資料作成」を作成しました！", record_kind="task")],
        agent_responses=[AgentResponse(content="作成しました。", speaker="TODO管理係")],
        handoff_occurred=True,
    )

    board.apply_reply(reply)

    assert [(m.speaker, m.content) for m in board.messages] == [
        ("ボス", "TODO管理係に依頼いたします。"),
        ("TODO管理係", "作成しました。"),
    ]
    assert len(board.todos) == 1
    assert board.todos[0].id == "t1"
    assert board.todos[0].title == "資料作成"
    assert board.todos[0].completed is False
    assert board.drain_toasts() == ["TODO「資料作成」を作成しました！"]
    assert board.drain_toasts() == []


def test_records_fall_back_to_field_presence() -> None:
    assert classify_record(_tool("連絡管理係", {"contactName": "山田"})) == "contact"
    assert classify_record(_tool("連絡管理係", {"meetingTitle": "定例"})) == "meeting"
    assert classify_record(_tool("TODO管理係", {"title": "買い物"})) == "task"
    assert classify_record(_tool("仕様書管理係", {"title": "API仕様書"})) == "specification"
    assert classify_record(_tool("連絡管理係", {"reminder": "x"})) is None
    assert classify_record(_tool("TODO管理係", {})) is None


def test_explicit_record_kind_wins_over_shape() -> None:
    tool = _tool("TODO管理係", {"title": "設計書", "content": "# 設計書"}, record_kind="specification")

    assert classify_record(tool) == "specification"


def test_records_fill_defaults_and_generate_ids() -> None:
    board = ChatBoard()

    board.add_record(_tool("連絡管理係", {"contactName": "山田", "details": None}))
    board.add_record(_tool("連絡管理係", {"meetingTitle": "定例", "datetime": "月曜10時", "details": None}))
    board.add_record(_tool("仕様書管理係", {"title": "API仕様書", "type": None, "content": "# API"}))
    board.add_record(_tool("TODO管理係", {"title": "買い物"}))

    assert board.contacts[0].name == "山田"
    assert board.contacts[0].details == ""
    assert board.meetings[0].when == "月曜10時"
    assert board.specifications[0].type == "未分類"
    assert board.specifications[0].content == "# API"
    assert board.todos[0].id
    assert board.todos[0].created_at is not None


def test_toast_uses_fallback_text_when_message_empty() -> None:
    board = ChatBoard()
    board.apply_reply(ChatReply(response="ok", speaker="ボス", tools=[_tool("連絡管理係", {"reminder": "r"}, message="")]))

    assert board.drain_toasts() == [TOAST_FALLBACK]


def test_tools_without_toast_flag_are_silent() -> None:
    board = ChatBoard()
    board.apply_reply(ChatReply(response="ok", speaker="ボス", tools=[_tool("TODO管理係", {"todos": []}, show_toast=False)]))

    assert board.toasts == []
    assert board.todos == []


def test_toggle_todo_flips_completion() -> None:
    board = ChatBoard()
    board.add_record(_tool("TODO管理係", {"title": "a", "id": "t1"}))

    assert board.toggle_todo("t1") is True
    assert board.todos[0].completed is True
    assert board.toggle_todo("t1") is True
    assert board.todos[0].completed is False
    assert board.toggle_todo("missing") is False


def test_board_round_trips_without_toasts() -> None:
    board = ChatBoard()
    board.add_user_message("こんにちは")
    board.add_error_message()
    board.add_record(_tool("TODO管理係", {"title": "a", "id": "t1"}))
    board.toasts.append("pending")
    board.select_tab("specs")

    restored = ChatBoard.load(board.dump())

    assert [m.content for m in restored.messages] == ["こんにちは", ERROR_MESSAGE]
    assert restored.messages[0].is_user is True
    assert restored.messages[0].speaker == "あなた"
    assert restored.todos[0].id == "t1"
    assert restored.active_tab == "specs"
    assert restored.toasts == []


def test_load_tolerates_missing_or_corrupt_state() -> None:
    assert ChatBoard.load("") == ChatBoard()
    assert ChatBoard.load("{broken").messages == []
