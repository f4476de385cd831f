"""
FastAPI host for the documentation tools: health check, tool listing and tool
invocation. The toolkit is built once in the lifespan hook and kept on app.state.
Logs are structured (request_id, tool, duration); no secrets are logged.
"""
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from agent_tools.base import ToolValidationError, UnknownToolError
from agent_tools.toolkit import DocsToolkit
from app.config import get_settings

log = logging.getLogger(__name__)
logging.basicConfig(level=getattr(logging, get_settings().log_level.upper(), logging.INFO))

logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the toolkit (settings + HTTP client) on startup, close it on shutdown."""
    app.state.toolkit = DocsToolkit(get_settings())
    yield
    app.state.toolkit.close()


app = FastAPI(title="aws-docs-agent-tools", lifespan=lifespan)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


class ToolInfo(BaseModel):
    id: str
    description: str
    input_schema: dict[str, Any]


class ToolResponse(BaseModel):
    tool: str
    result: Any


def _toolkit(request: Request) -> DocsToolkit:
    return request.app.state.toolkit


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    rid = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = rid
    response = await call_next(request)
    response.headers["x-request-id"] = rid
    return response


@app.exception_handler(ToolValidationError)
async def tool_validation_error(request: Request, exc: ToolValidationError):
    return JSONResponse(
        status_code=422,
        content={
            "tool": exc.tool_id,
            "error": str(exc),
            "errors": [{"path": path, "message": msg} for path, msg in exc.errors],
        },
    )


@app.get("/health")
async def health():
    """Basic health check."""
    return {"status": "ok"}


@app.get("/tools", response_model=list[ToolInfo])
async def list_tools(request: Request):
    """Descriptors the agent sees: id, description and JSON schema of the validated input."""
    return [
        ToolInfo(id=d.id, description=d.description, input_schema=d.input_schema.model_json_schema())
        for d in _toolkit(request).descriptors.values()
    ]


@app.post("/tools/{tool_id}", response_model=ToolResponse)
def invoke_tool(tool_id: str, request: Request, envelope: Any = Body(default=None)):
    """
    Execute one tool call. The body is either the arguments or an envelope
    with the arguments under "context". Sync handler: runs in the threadpool.
    """
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    start = time.perf_counter()
    log.info("tool_call_start", extra={"request_id": request_id, "tool": tool_id})
    try:
        result = _toolkit(request).execute(tool_id, envelope)
    except UnknownToolError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    duration = time.perf_counter() - start
    log.info("tool_call_done", extra={"request_id": request_id, "tool": tool_id, "duration_sec": round(duration, 3)})
    return ToolResponse(tool=tool_id, result=result)


def run() -> None:
    """Serve the tool host on the configured API_HOST/API_PORT."""
    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
