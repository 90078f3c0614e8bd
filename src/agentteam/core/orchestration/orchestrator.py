from __future__ import annotations

import logging
import time
from typing import Any

from agentteam.core.agents.definitions import AgentGraph
from agentteam.core.errors import ChatValidationError, UpstreamFailure
from agentteam.core.logging.redact import redact_string

from .runner import AgentRunner
from .schemas import ChatReply, ChatRequest
from .shaper import shape_reply

logger = logging.getLogger("agentteam.orchestrator")


def parse_chat_request(payload: Any) -> ChatRequest:
    if not isinstance(payload, dict):
        raise ChatValidationError()
    message = payload.get("message")
    if not isinstance(message, str) or not message:
        raise ChatValidationError()
    return ChatRequest(message=message)


class Orchestrator:
    def __init__(self, runner: AgentRunner, graph: AgentGraph) -> None:
        self.runner = runner
        self.graph = graph

    def handle(self, request: ChatRequest) -> ChatReply:
        if not request.message:
            raise ChatValidationError()

        start = time.perf_counter()
        try:
            result = self.runner.run(self.graph.root, request.message)
        except Exception as exc:
            logger.error(
                "orchestration_failed",
                exc_info=True,
                extra={
                    "extra_fields": {
                        "error": redact_string(str(exc)),
                        "duration_ms": int((time.perf_counter() - start) * 1000),
                    }
                },
            )
            raise UpstreamFailure("Internal server error") from exc

        reply = shape_reply(result, routing_agent=self.graph.root.name)
        logger.info(
            "chat_turn",
            extra={
                "extra_fields": {
                    "last_agent": result.last_agent,
                    "handoff": reply.handoff_occurred,
                    "tool_count": len(reply.tools),
                    "item_count": len(result.new_items),
                    "duration_ms": int((time.perf_counter() - start) * 1000),
                }
            },
        )
        return reply
