from __future__ import annotations

import json
import logging
import time
from typing import Any

from agentteam.core.agents.definitions import AgentDefinition
from agentteam.core.errors import MaxTurnsExceeded, UpstreamFailure
from agentteam.core.http import AgentTeamHTTPError, AgentTeamHTTPStatusError, request
from agentteam.core.logging import log_context
from agentteam.core.logging.redact import redact_string
from agentteam.core.tools.base import ToolOutcome

from .schemas import MessageOutputItem, RunResult, ToolCallOutputItem, TraceItem

logger = logging.getLogger("agentteam.runner")


def _function_spec(name: str, description: str, parameters: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "function",
        "function": {"name": name, "description": description, "parameters": parameters},
    }


def tool_specs(agent: AgentDefinition) -> list[dict[str, Any]]:
    specs = [_function_spec(tool.name, tool.description, tool.parameters) for tool in agent.tools]
    for target in agent.handoffs:
        specs.append(
            _function_spec(
                target.handoff_tool_name(),
                f"Handoff to the {target.name} agent to handle the request.",
                {"type": "object", "properties": {}, "additionalProperties": False},
            )
        )
    return specs


def _handoff_target(agent: AgentDefinition, tool_name: str) -> AgentDefinition | None:
    for target in agent.handoffs:
        if target.handoff_tool_name() == tool_name:
            return target
    return None


def _parse_arguments(raw: object) -> dict[str, Any]:
    if raw is None or raw == "":
        return {}
    if isinstance(raw, dict):
        return raw
    try:
        parsed = json.loads(str(raw))
    except json.JSONDecodeError as exc:
        raise UpstreamFailure("model returned malformed tool arguments") from exc
    if not isinstance(parsed, dict):
        raise UpstreamFailure("model returned non-object tool arguments")
    return parsed


class OpenAICompatRunner:
    """Agent loop over an OpenAI-compatible ``/chat/completions`` endpoint.

    Tool handlers run locally. A handoff is a ``transfer_to_<key>`` tool call:
    the target agent takes over with the conversation so far and its own
    instructions. The loop ends on the first reply without tool calls.
    """

    def __init__(self, base_url: str, api_key: str | None, timeout_s: float = 60.0, max_turns: int = 10) -> None:
        self.url = f"{base_url.rstrip('/')}/chat/completions"
        self.api_key = api_key
        self.timeout_s = timeout_s
        self.max_turns = max_turns

    def run(self, agent: AgentDefinition, message: str) -> RunResult:
        if not self.api_key:
            raise UpstreamFailure("OPENAI_API_KEY is not set")

        active = agent
        history: list[dict[str, Any]] = [{"role": "user", "content": message}]
        items: list[TraceItem] = []

        for turn in range(self.max_turns):
            with log_context(agent=active.name):
                reply = self._complete(active, history, turn)
            content = reply.get("content") or ""
            tool_calls = reply.get("tool_calls") or []

            if not tool_calls:
                items.append(MessageOutputItem(agent=active.name, content=content))
                return RunResult(final_output=content, last_agent=active.name, new_items=items)

            if content:
                items.append(MessageOutputItem(agent=active.name, content=content))
            history.append({"role": "assistant", "content": content or None, "tool_calls": tool_calls})

            next_agent = active
            for call in tool_calls:
                function = call.get("function") or {}
                name = str(function.get("name") or "")
                target = _handoff_target(active, name)
                if target is not None:
                    if next_agent is active:
                        next_agent = target
                        logger.info("handoff", extra={"extra_fields": {"source": active.name, "target": target.name}})
                    output = json.dumps({"assistant": next_agent.name}, ensure_ascii=False)
                else:
                    outcome = self._run_tool(active, name, _parse_arguments(function.get("arguments")))
                    items.append(ToolCallOutputItem(agent=active.name, output=outcome))
                    output = outcome.model_dump_json(by_alias=True)
                history.append({"role": "tool", "tool_call_id": call.get("id"), "content": output})
            active = next_agent

        raise MaxTurnsExceeded(self.max_turns)

    def _run_tool(self, agent: AgentDefinition, name: str, arguments: dict[str, Any]) -> ToolOutcome:
        try:
            tool = agent.tool(name)
        except KeyError as exc:
            raise UpstreamFailure(f"model called unknown tool {name!r} on {agent.name}") from exc
        return tool.run(arguments)

    def _complete(self, agent: AgentDefinition, history: list[dict[str, Any]], turn: int) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": agent.model,
            "messages": [{"role": "system", "content": agent.instructions}, *history],
        }
        specs = tool_specs(agent)
        if specs:
            payload["tools"] = specs

        start = time.perf_counter()
        try:
            response = request(
                "POST",
                self.url,
                headers={"Authorization": f"Bearer {self.api_key}"},
                json=payload,
                timeout_s=self.timeout_s,
            )
            data = response.json()
        except AgentTeamHTTPStatusError as exc:
            self._log_call(agent, turn, start, ok=False)
            raise UpstreamFailure(redact_string(f"{exc}: {exc.body}")) from exc
        except AgentTeamHTTPError as exc:
            self._log_call(agent, turn, start, ok=False)
            raise UpstreamFailure(redact_string(str(exc))) from exc
        except ValueError as exc:
            self._log_call(agent, turn, start, ok=False)
            raise UpstreamFailure("model endpoint returned invalid JSON") from exc

        self._log_call(agent, turn, start, ok=True)
        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices:
            raise UpstreamFailure("model endpoint returned no choices")
        message = choices[0].get("message") or {}
        return message if isinstance(message, dict) else {}

    def _log_call(self, agent: AgentDefinition, turn: int, start: float, ok: bool) -> None:
        logger.info(
            "llm_call",
            extra={
                "extra_fields": {
                    "model": agent.model,
                    "turn": turn,
                    "duration_ms": int((time.perf_counter() - start) * 1000),
                    "ok": ok,
                }
            },
        )
