from .orchestrator import Orchestrator, parse_chat_request
from .runner import AgentRunner, ScriptedRunner
from .schemas import (
    AgentResponse,
    ChatReply,
    ChatRequest,
    MessageOutputItem,
    RunResult,
    ToolCallOutputItem,
    TraceItem,
)
from .shaper import delegation_notice, shape_reply

__all__ = [
    "AgentResponse",
    "AgentRunner",
    "ChatReply",
    "ChatRequest",
    "MessageOutputItem",
    "Orchestrator",
    "RunResult",
    "ScriptedRunner",
    "ToolCallOutputItem",
    "TraceItem",
    "delegation_notice",
    "parse_chat_request",
    "shape_reply",
]
