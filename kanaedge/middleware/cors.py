from starlette.middleware.base import BaseHTTPMiddleware

from kanaedge.core.cors import attach_cors, preflight_response


class CorsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        origin = request.headers.get("Origin")
        # Preflight never reaches the router
        if request.method == "OPTIONS":
            return preflight_response(origin)
        response = await call_next(request)
        return attach_cors(response, origin)
