from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from agentteam.core.agents.definitions import AgentGraph
from agentteam.core.board import ChatBoard
from agentteam.core.board.schemas import BoardTab
from agentteam.core.errors import AgentTeamError
from agentteam.core.orchestration.orchestrator import Orchestrator
from agentteam.core.orchestration.schemas import ChatRequest

from .deps import get_agent_graph, get_orchestrator

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))
templates.env.filters["path_segment"] = lambda value: quote(str(value), safe="")
logger = logging.getLogger("agentteam.ui")

QUICK_PROMPTS = [
    ("📝 TODO作成", "新しいTODOを作成してください"),
    ("📞 会議予約", "来週の会議をスケジュールしてください"),
    ("📋 仕様書作成", "API仕様書を作成してください"),
]
SPEAKER_ICONS = {
    "ボス": "👔",
    "TODO管理係": "📝",
    "連絡管理係": "📞",
    "仕様書管理係": "📋",
    "あなた": "👤",
}


def _render(request: Request, board: ChatBoard, graph: AgentGraph):
    toasts = board.drain_toasts()
    return templates.TemplateResponse(
        request,
        "chat.html",
        {
            "board": board,
            "board_json": board.dump(),
            "toasts": toasts,
            "agents": graph.names(),
            "icons": SPEAKER_ICONS,
            "quick_prompts": QUICK_PROMPTS,
        },
    )


@router.get("/")
def ui_root() -> RedirectResponse:
    return RedirectResponse(url="/ui/chat", status_code=303)


@router.get("/chat")
def ui_chat(request: Request, graph: AgentGraph = Depends(get_agent_graph)):
    return _render(request, ChatBoard(), graph)


@router.post("/chat")
async def ui_chat_post(
    request: Request,
    message: str = Form(default=""),
    board: str = Form(default=""),
    orchestrator: Orchestrator = Depends(get_orchestrator),
    graph: AgentGraph = Depends(get_agent_graph),
):
    state = ChatBoard.load(board)
    if message.strip():
        state.add_user_message(message)
        try:
            reply = await run_in_threadpool(orchestrator.handle, ChatRequest(message=message))
        except AgentTeamError:
            logger.warning("ui_chat_failed")
            state.add_error_message()
        else:
            state.apply_reply(reply)
    return _render(request, state, graph)


@router.post("/todos/{todo_id:path}/toggle")
def ui_toggle_todo(
    request: Request,
    todo_id: str,
    board: str = Form(default=""),
    graph: AgentGraph = Depends(get_agent_graph),
):
    state = ChatBoard.load(board)
    state.toggle_todo(todo_id)
    state.select_tab("todos")
    return _render(request, state, graph)


@router.post("/tab/{tab}")
def ui_select_tab(
    request: Request,
    tab: BoardTab,
    board: str = Form(default=""),
    graph: AgentGraph = Depends(get_agent_graph),
):
    state = ChatBoard.load(board)
    state.select_tab(tab)
    return _render(request, state, graph)
