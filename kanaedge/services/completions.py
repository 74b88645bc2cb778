"""
OpenAI chat-completion envelopes around a finished conversion.
"""
import asyncio
import time
import uuid
from typing import AsyncIterator

from kanaedge.api.schemas import (
    ChatCompletion,
    ChatCompletionChunk,
    ChatMessage,
    Choice,
    ChunkChoice,
    Usage,
)


def _completion_id() -> str:
    return f"chatcmpl-{uuid.uuid4()}"


def build_completion(prompt: str, converted: str, model: str) -> ChatCompletion:
    # usage counts characters, not tokens
    return ChatCompletion(
        id=_completion_id(),
        created=int(time.time()),
        model=model,
        choices=[Choice(index=0, message=ChatMessage(role="assistant", content=converted))],
        usage=Usage(
            prompt_tokens=len(prompt),
            completion_tokens=len(converted),
            total_tokens=len(prompt) + len(converted),
        ),
    )


def build_chunk(model: str, delta: dict, finish_reason=None) -> ChatCompletionChunk:
    return ChatCompletionChunk(
        id=_completion_id(),
        created=int(time.time()),
        model=model,
        choices=[ChunkChoice(index=0, delta=delta, finish_reason=finish_reason)],
    )


def sse_frame(chunk: ChatCompletionChunk) -> str:
    return f"data: {chunk.model_dump_json()}\n\n"


async def stream_completion(converted: str, model: str, delay_seconds: float = 0.01) -> AsyncIterator[str]:
    """Emit one SSE frame per character of `converted`, then a closing "stop" frame."""
    for i, ch in enumerate(converted):
        if i and delay_seconds > 0:
            await asyncio.sleep(delay_seconds)
        yield sse_frame(build_chunk(model, {"content": ch}))
    yield sse_frame(build_chunk(model, {}, finish_reason="stop"))
