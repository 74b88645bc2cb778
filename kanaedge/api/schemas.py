from pydantic import BaseModel, Field
from typing import Dict, List, Optional

TARGETS = ("hiragana", "katakana", "romaji")
MODES = ("normal", "spaced", "okurigana", "furigana")
DEFAULT_TARGET = "hiragana"
DEFAULT_MODE = "normal"


class UUIDResponse(BaseModel):
    uuid: str


class ConvertResponse(BaseModel):
    converted: str = Field(..., description="Text rendered in the requested script and mode")


class ChatMessage(BaseModel):
    role: str
    content: str


class Choice(BaseModel):
    index: int = 0
    message: ChatMessage
    finish_reason: str = "stop"


class Usage(BaseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatCompletion(BaseModel):
    id: str
    object: str = "chat.completion"
    created: int
    model: str
    choices: List[Choice]
    usage: Usage


class ChunkChoice(BaseModel):
    delta: Dict[str, str]
    index: int = 0
    finish_reason: Optional[str] = None


class ChatCompletionChunk(BaseModel):
    id: str
    object: str = "chat.completion.chunk"
    created: int
    model: str
    choices: List[ChunkChoice]
