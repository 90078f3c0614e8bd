"""Static agent configuration.

The graph is built once at startup and handed to the runner by reference.
A routing agent sits at the root and may hand a conversation off to any of
its delegates; delegates own a single tool and never hand off further.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from agentteam.core.errors import AgentGraphError
from agentteam.core.tools.base import ToolHandler
from agentteam.core.tools.builtin.contact import CONTACT_SPEAKER
from agentteam.core.tools.builtin.specification import SPECIFICATION_SPEAKER
from agentteam.core.tools.builtin.todo import TODO_SPEAKER
from agentteam.core.tools.registry import ToolRegistry, build_default_registry

from .prompts import (
    CONTACT_MANAGER_INSTRUCTIONS,
    SPECIFICATION_MANAGER_INSTRUCTIONS,
    TODO_MANAGER_INSTRUCTIONS,
    boss_instructions,
)

ROUTING_AGENT_NAME = "ボス"
DEFAULT_MODEL = "gpt-4o-mini"

_KEY_RE = re.compile(r"^[a-z][a-z0-9_]{0,47}$")


@dataclass(frozen=True)
class AgentDefinition:
    key: str
    name: str
    instructions: str
    model: str
    tools: tuple[ToolHandler, ...] = ()
    handoffs: tuple["AgentDefinition", ...] = ()

    def tool(self, name: str) -> ToolHandler:
        for tool in self.tools:
            if tool.name == name:
                return tool
        raise KeyError(name)

    def handoff_tool_name(self) -> str:
        return f"transfer_to_{self.key}"


@dataclass(frozen=True)
class AgentGraph:
    root: AgentDefinition
    _by_name: dict[str, AgentDefinition] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, AgentDefinition] = {}
        keys: set[str] = set()
        for agent in (self.root, *self.root.handoffs):
            if agent.name in index:
                raise AgentGraphError(f"duplicate agent name: {agent.name}")
            if not _KEY_RE.match(agent.key) or agent.key in keys:
                raise AgentGraphError(f"invalid or duplicate agent key: {agent.key!r}")
            index[agent.name] = agent
            keys.add(agent.key)
        for delegate in self.root.handoffs:
            if delegate.handoffs:
                raise AgentGraphError(f"{delegate.name} may not declare handoffs")
            if len(delegate.tools) > 1:
                raise AgentGraphError(f"{delegate.name} may declare at most one tool")
        object.__setattr__(self, "_by_name", index)

    def get(self, name: str) -> AgentDefinition:
        return self._by_name[name]

    def names(self) -> list[str]:
        return list(self._by_name)


def build_agent_graph(model: str = DEFAULT_MODEL, registry: ToolRegistry | None = None) -> AgentGraph:
    tools = registry or build_default_registry()
    delegates = (
        AgentDefinition(
            key="todo_manager",
            name=TODO_SPEAKER,
            instructions=TODO_MANAGER_INSTRUCTIONS,
            model=model,
            tools=(tools.get("manage_todo"),),
        ),
        AgentDefinition(
            key="contact_manager",
            name=CONTACT_SPEAKER,
            instructions=CONTACT_MANAGER_INSTRUCTIONS,
            model=model,
            tools=(tools.get("manage_contact"),),
        ),
        AgentDefinition(
            key="specification_manager",
            name=SPECIFICATION_SPEAKER,
            instructions=SPECIFICATION_MANAGER_INSTRUCTIONS,
            model=model,
            tools=(tools.get("manage_specification"),),
        ),
    )
    boss = AgentDefinition(
        key="boss",
        name=ROUTING_AGENT_NAME,
        instructions=boss_instructions([agent.name for agent in delegates]),
        model=model,
        handoffs=delegates,
    )
    return AgentGraph(root=boss)
