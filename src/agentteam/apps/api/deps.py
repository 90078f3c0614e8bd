from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from agentteam.core.agents.definitions import AgentGraph, build_agent_graph
from agentteam.core.config import Settings
from agentteam.core.orchestration.openai_compat import OpenAICompatRunner
from agentteam.core.orchestration.orchestrator import Orchestrator
from agentteam.core.orchestration.runner import AgentRunner, ScriptedRunner


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def get_agent_graph() -> AgentGraph:
    return build_agent_graph(model=get_settings().model)


@lru_cache(maxsize=1)
def get_runner() -> AgentRunner:
    settings = get_settings()
    if settings.runner == "scripted":
        return ScriptedRunner()
    return OpenAICompatRunner(
        base_url=settings.base_url,
        api_key=settings.api_key,
        timeout_s=settings.timeout_s,
        max_turns=settings.max_turns,
    )


def get_orchestrator(
    runner: AgentRunner = Depends(get_runner),
    graph: AgentGraph = Depends(get_agent_graph),
) -> Orchestrator:
    return Orchestrator(runner=runner, graph=graph)
