import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        rid = getattr(request.state, "request_id", "n/a")
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        except Exception:
            logging.exception("[ACCESS] request_id=%s method=%s path=%s error", rid, request.method, request.url.path)
            raise
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            logging.info(
                "[ACCESS] request_id=%s method=%s path=%s status=%s latency_ms=%.2f",
                rid,
                request.method,
                request.url.path,
                status,
                elapsed,
            )
