from __future__ import annotations

import os
import threading

import httpx

from .errors import AgentTeamHTTPNetworkError, AgentTeamHTTPStatusError

_DEFAULT_TIMEOUT_S = 60.0
_CONNECT_TIMEOUT_S = 5.0
_DEFAULT_USER_AGENT = "agentteam/0.1"
_MAX_ERROR_BODY_CHARS = 500

_client: httpx.Client | None = None
_client_lock = threading.Lock()


def _build_timeout(total_s: float) -> httpx.Timeout:
    total_s = max(0.1, total_s)
    return httpx.Timeout(total_s, connect=min(_CONNECT_TIMEOUT_S, total_s))


def get_http_client() -> httpx.Client:
    global _client
    if _client is not None:
        return _client

    with _client_lock:
        if _client is None:
            user_agent = os.getenv("AGENTTEAM_HTTP_USER_AGENT", _DEFAULT_USER_AGENT)
            _client = httpx.Client(timeout=_build_timeout(_DEFAULT_TIMEOUT_S), headers={"User-Agent": user_agent})
    return _client


def request(
    method: str,
    url: str,
    *,
    headers: dict[str, str] | None = None,
    json: object | None = None,
    timeout_s: float | None = None,
) -> httpx.Response:
    """Send one request on the shared client; non-2xx and transport failures raise."""
    client = get_http_client()
    try:
        response = client.request(
            method,
            url,
            headers=headers,
            json=json,
            timeout=_build_timeout(timeout_s) if timeout_s is not None else httpx.USE_CLIENT_DEFAULT,
        )
    except httpx.HTTPError as exc:
        raise AgentTeamHTTPNetworkError(f"HTTP request failed for {url}: {exc.__class__.__name__}") from exc

    if not 200 <= response.status_code < 300:
        raise AgentTeamHTTPStatusError(
            f"HTTP status {response.status_code} for {url}",
            status_code=response.status_code,
            body=response.text[:_MAX_ERROR_BODY_CHARS],
        )
    return response
