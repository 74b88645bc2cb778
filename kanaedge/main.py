import logging
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from kanaedge.api.routes import router as api_router, unmatched_route_handler
from kanaedge.core.config import settings
from kanaedge.core.logging import configure_logging
from kanaedge.middleware.access_log import AccessLogMiddleware
from kanaedge.middleware.cors import CorsMiddleware
from kanaedge.middleware.request_id import RequestIDMiddleware


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="kanaedge", version="1.0.0", docs_url=None, redoc_url=None, openapi_url=None)

    # Last added runs first: request id, then access log, then CORS
    app.add_middleware(CorsMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)

    logging.info("cors_policy allowed_origin=%s", settings.ALLOWED_ORIGIN)

    app.include_router(api_router)
    app.add_exception_handler(StarletteHTTPException, unmatched_route_handler)
    return app


app = create_app()


@app.on_event("startup")
async def startup_event():
    logging.info("kanaedge starting port=%s", settings.PORT)
