from __future__ import annotations

from agentteam.core.orchestration.schemas import MessageOutputItem, RunResult, ToolCallOutputItem
from agentteam.core.orchestration.shaper import delegation_notice, shape_reply
from agentteam.core.tools.base import ToolOutcome


def _outcome(message: str, speaker: str = "TODO管理係", **data) -> ToolOutcome:
    return ToolOutcome(success=True, message=message, data=data, speaker=speaker, show_toast=True)


def test_plain_answer_from_routing_agent_passes_through() -> None:
    result = RunResult(final_output="こんにちは", last_agent="ボス", new_items=[])

    reply = shape_reply(result)

    assert reply.to_payload() == {
        "response": "こんにちは",
        "speaker": "ボス",
        "tools": [],
        "agentResponses": [],
        "handoffOccurred": False,
    }


def test_handoff_replaces_final_output_with_delegation_notice() -> None:
    result = RunResult(
        final_output="TODO「資料作成」を作成しました。",
        last_agent="TODO管理係",
        new_items=[
            MessageOutputItem(agent="ボス", content="TODO管理係に依頼いたします。"),
            ToolCallOutputItem(agent="TODO管理係", output=_outcome("TODO「資料作成」を作成しました！", title="資料作成")),
            MessageOutputItem(agent="TODO管理係", content="TODO「資料作成」を作成しました。"),
        ],
    )

    reply = shape_reply(result)

    assert reply.handoff_occurred is True
    assert reply.response == "TODO管理係に依頼いたします。"
    assert reply.response != result.final_output
    assert [(r.speaker, r.content) for r in reply.agent_responses] == [("TODO管理係", "TODO「資料作成」を作成しました。")]
    assert reply.speaker == "ボス"


def test_tool_outputs_keep_execution_order_regardless_of_speaker() -> None:
    outputs = [
        _outcome("first", title="a"),
        _outcome("second", speaker="連絡管理係", contactName="b"),
        _outcome("third", speaker="ボス"),
    ]
    items = [
        ToolCallOutputItem(agent="TODO管理係", output=outputs[0]),
        MessageOutputItem(agent="TODO管理係", content="between"),
        ToolCallOutputItem(agent="連絡管理係", output=outputs[1]),
        ToolCallOutputItem(agent="ボス", output=outputs[2]),
    ]

    reply = shape_reply(RunResult(final_output="done", last_agent="ボス", new_items=items))

    assert reply.tools == outputs
    assert len(reply.tools) == sum(isinstance(item, ToolCallOutputItem) for item in items)


def test_routing_agent_messages_never_appear_in_agent_responses() -> None:
    items = [
        MessageOutputItem(agent="ボス", content="one"),
        MessageOutputItem(agent="連絡管理係", content="two"),
        MessageOutputItem(agent="ボス", content="three"),
        MessageOutputItem(agent="仕様書管理係", content="four"),
    ]

    reply = shape_reply(RunResult(final_output="x", last_agent="仕様書管理係", new_items=items))

    assert [r.content for r in reply.agent_responses] == ["two", "four"]
    assert all(r.speaker != "ボス" for r in reply.agent_responses)


def test_shaping_is_pure_and_repeatable() -> None:
    result = RunResult(
        final_output="ok",
        last_agent="連絡管理係",
        new_items=[ToolCallOutputItem(agent="連絡管理係", output=_outcome("m", speaker="連絡管理係", meetingTitle="定例"))],
    )
    snapshot = result.model_dump_json()

    first = shape_reply(result).model_dump_json(by_alias=True)
    second = shape_reply(result).model_dump_json(by_alias=True)

    assert first == second
    assert result.model_dump_json() == snapshot


def test_custom_routing_agent_name() -> None:
    result = RunResult(final_output="hi", last_agent="router", new_items=[MessageOutputItem(agent="router", content="hi")])

    reply = shape_reply(result, routing_agent="router")

    assert reply.handoff_occurred is False
    assert reply.speaker == "router"
    assert reply.agent_responses == []


def test_delegation_notice_format() -> None:
    assert delegation_notice("仕様書管理係") == "仕様書管理係に依頼いたします。"


def test_trace_items_parse_from_tagged_json() -> None:
    result = RunResult.model_validate(
        {
            "final_output": "",
            "last_agent": "TODO管理係",
            "new_items": [
                {"type": "message_output_item", "agent": "TODO管理係", "content": "hi"},
                {
                    "type": "tool_call_output_item",
                    "agent": "TODO管理係",
                    "output": {"success": True, "message": "m", "speaker": "TODO管理係", "showToast": True},
                },
            ],
        }
    )

    assert isinstance(result.new_items[0], MessageOutputItem)
    assert isinstance(result.new_items[1], ToolCallOutputItem)
    assert result.new_items[1].output.show_toast is True
