from __future__ import annotations

from datetime import date
from typing import Callable

from agentteam.core.tools.base import ToolHandler
from agentteam.core.tools.builtin.contact import ContactManagementTool
from agentteam.core.tools.builtin.specification import SpecificationTool
from agentteam.core.tools.builtin.todo import TodoManagerTool


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: dict[str, ToolHandler] = {}

    def register(self, tool: ToolHandler) -> None:
        self._tools[tool.name] = tool

    def get(self, name: str) -> ToolHandler:
        return self._tools[name]

    def names(self) -> list[str]:
        return sorted(self._tools.keys())


def build_default_registry(
    today: Callable[[], date] | None = None,
    id_factory: Callable[[], str] | None = None,
) -> ToolRegistry:
    registry = ToolRegistry()
    registry.register(TodoManagerTool(id_factory=id_factory))
    registry.register(ContactManagementTool())
    registry.register(SpecificationTool(today=today))
    return registry
