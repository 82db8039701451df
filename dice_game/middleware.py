import logging

from starlette.middleware.cors import CORSMiddleware

log = logging.getLogger(__name__)


def add_cors_middleware(app):
    return CORSMiddleware(
        app=app,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def add_logging_middleware(app):
    async def middleware(scope, receive, send):
        if scope["type"] == "http":
            log.info("Request: %s %s", scope["method"], scope["path"])
        await app(scope, receive, send)

    return middleware
