from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from agentteam.apps.api import deps
from agentteam.apps.api.main import app
from agentteam.core.agents.definitions import AgentGraph, build_agent_graph
from agentteam.core.orchestration.runner import ScriptedRunner
from agentteam.core.tools.registry import build_default_registry

FIXED_DAY = date(2026, 10, 18)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setenv("AGENTTEAM_LOG_TO_FILE", "off")
    monkeypatch.setenv("AGENTTEAM_RUNNER", "scripted")
    deps.get_settings.cache_clear()
    deps.get_agent_graph.cache_clear()
    deps.get_runner.cache_clear()


@pytest.fixture
def graph() -> AgentGraph:
    registry = build_default_registry(today=lambda: FIXED_DAY, id_factory=lambda: "todo-1")
    return build_agent_graph(registry=registry)


@pytest.fixture
def runner() -> ScriptedRunner:
    return ScriptedRunner()


@pytest.fixture
def client(graph: AgentGraph, runner: ScriptedRunner):
    app.dependency_overrides[deps.get_agent_graph] = lambda: graph
    app.dependency_overrides[deps.get_runner] = lambda: runner
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
