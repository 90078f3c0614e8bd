from __future__ import annotations

from pathlib import Path
from uuid import uuid4

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from agentteam.core.errors import ChatValidationError, UpstreamFailure
from agentteam.core.logging import configure_logging
from agentteam.core.logging.context import log_context

from .deps import get_settings
from .routes_chat import router as chat_router
from .routes_ui import router as ui_router

_STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(title="Agent Team API")
configure_logging(get_settings().logging)
app.mount("/ui/static", StaticFiles(directory=str(_STATIC_DIR)), name="ui-static")

app.include_router(chat_router, prefix="/api", tags=["chat"])
app.include_router(ui_router, prefix="/ui", tags=["ui"])


@app.middleware("http")
async def request_context_middleware(request, call_next):
    correlation_id = request.headers.get("X-Correlation-ID") or str(uuid4())
    with log_context(correlation_id=correlation_id):
        response = await call_next(request)
    response.headers["X-Correlation-ID"] = correlation_id
    return response


@app.exception_handler(ChatValidationError)
async def chat_validation_error_handler(request: Request, exc: ChatValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(UpstreamFailure)
async def upstream_failure_handler(request: Request, exc: UpstreamFailure) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/")
def root() -> RedirectResponse:
    return RedirectResponse(url="/ui/chat", status_code=303)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/healthz")
def healthz() -> dict[str, bool]:
    return {"ok": True}


def run() -> None:
    uvicorn.run("agentteam.apps.api.main:app", host="127.0.0.1", port=8000)
