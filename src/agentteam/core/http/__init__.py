from .client import get_http_client, request
from .errors import AgentTeamHTTPError, AgentTeamHTTPNetworkError, AgentTeamHTTPStatusError

__all__ = [
    "get_http_client",
    "request",
    "AgentTeamHTTPError",
    "AgentTeamHTTPNetworkError",
    "AgentTeamHTTPStatusError",
]
