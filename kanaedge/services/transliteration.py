import logging
import time
from typing import Callable, Optional

from kanaedge.adapters.kakasi import KakasiAdapter
from kanaedge.core.errors import ConversionError, InitError


class TransliterationService:
    """
    Owns the process-wide transliteration engine.

    The engine is built on first use and kept for the life of the process.
    A failed initialization leaves nothing behind, so the next request
    starts over. Concurrent cold requests are not serialized and may both
    initialize; the later one wins and the other handle is dropped.
    """

    def __init__(self, engine_factory: Callable[[], KakasiAdapter] = KakasiAdapter):
        self.engine_factory = engine_factory
        self.engine: Optional[KakasiAdapter] = None

    @property
    def ready(self) -> bool:
        return self.engine is not None

    async def ensure_ready(self, request_id: str = "n/a") -> None:
        if self.engine is not None:
            return
        start = time.perf_counter()
        try:
            engine = self.engine_factory()
            await engine.init()
        except Exception as e:
            logging.error("engine_init_failure request_id=%s error=%s", request_id, e)
            raise InitError(str(e)) from e
        self.engine = engine
        logging.info(
            "engine_init_success request_id=%s latency_ms=%.2f",
            request_id,
            (time.perf_counter() - start) * 1000,
        )

    async def convert(self, text: str, to: str, mode: str, request_id: str = "n/a") -> str:
        if self.engine is None:
            raise ConversionError("Engine is not initialized.")
        try:
            return await self.engine.convert(text, to=to, mode=mode)
        except ConversionError as e:
            logging.warning("conversion_failure request_id=%s to=%s mode=%s error=%s", request_id, to, mode, e)
            raise
        except Exception as e:
            logging.exception("conversion_failure request_id=%s to=%s mode=%s", request_id, to, mode)
            raise ConversionError(str(e)) from e
