from __future__ import annotations

import pytest

from agentteam.core.agents.definitions import ROUTING_AGENT_NAME, AgentDefinition, AgentGraph, build_agent_graph
from agentteam.core.errors import AgentGraphError
from agentteam.core.tools.builtin.contact import ContactManagementTool
from agentteam.core.tools.builtin.todo import TodoManagerTool


def test_default_graph_routes_to_three_specialists() -> None:
    graph = build_agent_graph(model="gpt-4o-mini")

    assert graph.root.name == ROUTING_AGENT_NAME == "ボス"
    assert graph.root.tools == ()
    assert [agent.name for agent in graph.root.handoffs] == ["TODO管理係", "連絡管理係", "仕様書管理係"]
    assert graph.names() == ["ボス", "TODO管理係", "連絡管理係", "仕様書管理係"]
    for delegate in graph.root.handoffs:
        assert len(delegate.tools) == 1
        assert delegate.handoffs == ()
        assert delegate.model == "gpt-4o-mini"
        assert delegate.tools[0].speaker == delegate.name


def test_graph_lookup_and_handoff_tool_names() -> None:
    graph = build_agent_graph()

    todo_agent = graph.get("TODO管理係")

    assert todo_agent.handoff_tool_name() == "transfer_to_todo_manager"
    assert todo_agent.tool("manage_todo").name == "manage_todo"
    with pytest.raises(KeyError):
        todo_agent.tool("manage_contact")
    with pytest.raises(KeyError):
        graph.get("秘書")


def test_boss_instructions_name_every_delegate() -> None:
    graph = build_agent_graph()

    for delegate in graph.root.handoffs:
        assert delegate.name in graph.root.instructions
    assert "○○係に依頼いたします。" in graph.root.instructions


def test_graph_rejects_nested_handoffs() -> None:
    leaf = AgentDefinition(key="leaf", name="leaf", instructions="", model="m")
    middle = AgentDefinition(key="middle", name="middle", instructions="", model="m", handoffs=(leaf,))
    root = AgentDefinition(key="root", name="root", instructions="", model="m", handoffs=(middle,))

    with pytest.raises(AgentGraphError):
        AgentGraph(root=root)


def test_graph_rejects_delegate_with_several_tools() -> None:
    busy = AgentDefinition(
        key="busy",
        name="busy",
        instructions="",
        model="m",
        tools=(TodoManagerTool(), ContactManagementTool()),
    )

    with pytest.raises(AgentGraphError):
        AgentGraph(root=AgentDefinition(key="root", name="root", instructions="", model="m", handoffs=(busy,)))


def test_graph_rejects_duplicate_names_and_bad_keys() -> None:
    a = AgentDefinition(key="a", name="same", instructions="", model="m")
    b = AgentDefinition(key="b", name="same", instructions="", model="m")
    with pytest.raises(AgentGraphError):
        AgentGraph(root=AgentDefinition(key="root", name="root", instructions="", model="m", handoffs=(a, b)))

    bad = AgentDefinition(key="Not Valid", name="x", instructions="", model="m")
    with pytest.raises(AgentGraphError):
        AgentGraph(root=AgentDefinition(key="root", name="root", instructions="", model="m", handoffs=(bad,)))


def test_definitions_are_immutable() -> None:
    graph = build_agent_graph()

    with pytest.raises(AttributeError):
        graph.root.name = "社長"  # type: ignore[misc]
