import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    PORT: int = int(os.environ.get("PORT", 8080))
    # Single origin allowed to read responses cross-origin
    ALLOWED_ORIGIN: str = os.environ.get("ALLOWED_ORIGIN", "https://sotsuken-odai.pages.dev")
    # Pause between streamed characters on /v1/chat/completions
    STREAM_CHAR_DELAY_MS: int = int(os.environ.get("STREAM_CHAR_DELAY_MS", 10))
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()


settings = Settings()
