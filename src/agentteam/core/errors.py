from __future__ import annotations


class AgentTeamError(RuntimeError):
    """Base error for agentteam."""


class ChatValidationError(AgentTeamError):
    def __init__(self, message: str = "Message is required") -> None:
        super().__init__(message)
        self.message = message


class UpstreamFailure(AgentTeamError):
    """Raised when the agent-execution backend fails for any reason."""


class MaxTurnsExceeded(UpstreamFailure):
    def __init__(self, max_turns: int) -> None:
        super().__init__(f"Max turns ({max_turns}) exceeded")
        self.max_turns = max_turns


class AgentGraphError(AgentTeamError):
    pass
