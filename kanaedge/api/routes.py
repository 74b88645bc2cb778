import logging
import uuid
from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from kanaedge.api.schemas import DEFAULT_MODE, DEFAULT_TARGET, ConvertResponse, UUIDResponse
from kanaedge.core.config import settings
from kanaedge.core.errors import ConversionError, InitError
from kanaedge.services.completions import build_completion, stream_completion
from kanaedge.services.model_string import parse_model
from kanaedge.services.transliteration import TransliterationService

router = APIRouter()
service = TransliterationService()

CHAT_PATH = "/v1/chat/completions"


def error_response(status_code: int, error: str, message: Optional[str] = None, detail: Optional[str] = None):
    body = {"error": error}
    if message is not None:
        body["message"] = message
    if detail is not None:
        body["detail"] = detail
    return JSONResponse(body, status_code=status_code)


async def run_conversion(text: str, to: Any, mode: Any, rid: str):
    """Initialize the engine if needed and convert. Returns (converted, None) or (None, error response)."""
    try:
        await service.ensure_ready(rid)
    except InitError as e:
        return None, error_response(500, "Initialization failed", detail=str(e))
    try:
        converted = await service.convert(text, to, mode, rid)
    except ConversionError as e:
        return None, error_response(500, "Conversion failed", detail=str(e))
    return converted, None


@router.get("/", response_model=UUIDResponse)
async def new_uuid():
    return UUIDResponse(uuid=str(uuid.uuid4()))


@router.post(CHAT_PATH)
async def chat_completions(request: Request):
    rid = getattr(request.state, "request_id", "n/a")
    try:
        body = await request.json()
    except ValueError:
        return error_response(400, "Invalid JSON body")
    if not isinstance(body, dict):
        body = {}

    messages = body.get("messages")
    if not isinstance(messages, list) or not messages:
        return error_response(400, "Invalid format", message="`messages` must be a non-empty array")
    last = messages[-1]
    if not isinstance(last, dict) or last.get("role") != "user" or not isinstance(last.get("content"), str):
        return error_response(
            400, "Invalid message", message="Last message must be { role: 'user', content: string }"
        )
    prompt = last["content"]

    to, mode = parse_model(body.get("model"), body.get("mode"))
    stream = body.get("stream") is True
    raw_model = body.get("model")
    model = raw_model if isinstance(raw_model, str) and raw_model else to
    logging.info("chat_completion request_id=%s to=%s mode=%s stream=%s", rid, to, mode, stream)

    converted, failure = await run_conversion(prompt, to, mode, rid)
    if failure is not None:
        return failure

    if not stream:
        return JSONResponse(build_completion(prompt, converted, model).model_dump())

    return StreamingResponse(
        stream_completion(converted, model, settings.STREAM_CHAR_DELAY_MS / 1000),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
    )


@router.post("/")
async def convert(request: Request):
    rid = getattr(request.state, "request_id", "n/a")
    try:
        payload = await request.json()
    except ValueError:
        return error_response(400, "Invalid JSON body")
    if not isinstance(payload, dict):
        payload = {}

    text = payload.get("text")
    # Passed through as-is; the engine rejects unknown values
    to = payload.get("to", DEFAULT_TARGET)
    mode = payload.get("mode", DEFAULT_MODE)
    if not isinstance(text, str):
        return error_response(400, "`text` must be a string")

    converted, failure = await run_conversion(text, to, mode, rid)
    if failure is not None:
        return failure
    return JSONResponse(ConvertResponse(converted=converted).model_dump())


async def unmatched_route_handler(request: Request, exc: StarletteHTTPException):
    """Route misses: wrong method on the chat path is a 405, everything else a 404."""
    if exc.status_code == 405 and request.url.path == CHAT_PATH:
        return error_response(405, "Method Not Allowed", message=f"Use POST on {CHAT_PATH}")
    if exc.status_code in (404, 405):
        return error_response(404, "Not Found", message=f"Supported: GET /, POST /, POST {CHAT_PATH}")
    return JSONResponse({"detail": exc.detail}, status_code=exc.status_code, headers=exc.headers)
