from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Protocol

from agentteam.core.agents.definitions import AgentDefinition

from .schemas import MessageOutputItem, RunResult

logger = logging.getLogger("agentteam.runner")

MAX_RECORDED_CALLS = 100


class AgentRunner(Protocol):
    def run(self, agent: AgentDefinition, message: str) -> RunResult: ...


def _greeting(agent: AgentDefinition, message: str) -> RunResult:
    content = f"「{message}」承りました。"
    return RunResult(
        final_output=content,
        last_agent=agent.name,
        new_items=[MessageOutputItem(agent=agent.name, content=content)],
    )


class ScriptedRunner:
    """Runner that answers from a fixed script instead of a model.

    Pass ``result`` to always return the same run, ``error`` to always fail,
    or ``responder`` to compute the run from the request.
    """

    def __init__(
        self,
        result: RunResult | None = None,
        error: Exception | None = None,
        responder: Callable[[AgentDefinition, str], RunResult] | None = None,
    ) -> None:
        self.result = result
        self.error = error
        self.responder = responder or _greeting
        # Most recent requests only; the demo app keeps one runner for its lifetime.
        self.calls: deque[tuple[str, str]] = deque(maxlen=MAX_RECORDED_CALLS)

    def run(self, agent: AgentDefinition, message: str) -> RunResult:
        self.calls.append((agent.name, message))
        logger.info("scripted_run", extra={"extra_fields": {"agent": agent.name}})
        if self.error is not None:
            raise self.error
        if self.result is not None:
            return self.result
        return self.responder(agent, message)
