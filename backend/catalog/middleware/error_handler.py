"""
Global error handling middleware.

Uses pure ASGI middleware (not BaseHTTPMiddleware) to avoid breaking
async generator dependencies like get_db_session().
"""
import json

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from catalog.core.exceptions import CatalogError
from catalog.core.logging import get_logger

logger = get_logger(__name__)


class ErrorHandlerMiddleware:
    """
    Turns exceptions escaping the app into JSON responses.

    CatalogError subclasses answer with their own status code; anything
    else becomes a 500. HTTPException never gets here: FastAPI answers it
    inside the router.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except CatalogError as e:
            if response_started:
                raise
            logger.info("Request rejected", error=str(e), type=type(e).__name__)
            await self._send_json(send, e.status_code, str(e), type(e).__name__)
        except Exception as e:
            if response_started:
                # Headers already sent, can't change the response
                logger.exception("Unhandled exception after response started", error=str(e))
                raise
            logger.exception("Unhandled exception", error=str(e))
            await self._send_json(send, 500, "Internal server error", type(e).__name__)

    @staticmethod
    async def _send_json(send: Send, status: int, detail: str, error_type: str) -> None:
        body = json.dumps({"detail": detail, "type": error_type}).encode("utf-8")
        await send({
            "type": "http.response.start",
            "status": status,
            "headers": [
                (b"content-type", b"application/json"),
                (b"content-length", str(len(body)).encode()),
            ],
        })
        await send({"type": "http.response.body", "body": body})
