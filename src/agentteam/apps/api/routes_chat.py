from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from agentteam.core.errors import ChatValidationError
from agentteam.core.orchestration.orchestrator import Orchestrator, parse_chat_request

from .deps import get_orchestrator

router = APIRouter()


@router.post("/chat")
async def chat(request: Request, orchestrator: Orchestrator = Depends(get_orchestrator)) -> dict:
    try:
        payload = await request.json()
    except ValueError as exc:
        raise ChatValidationError() from exc
    chat_request = parse_chat_request(payload)
    reply = await run_in_threadpool(orchestrator.handle, chat_request)
    return reply.to_payload()
