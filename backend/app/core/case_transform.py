"""HTTP integration points for the snake_case/camelCase bridge.

Inbound JSON bodies are rewritten to snake_case before they reach route
handlers, and JSON responses are rewritten to camelCase before they are sent.
Both directions are fail-open: a conversion error is logged and the original
payload is used.
"""

import json
import logging
from typing import Any

from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.utils.model_transformer import transform_request_data, transform_response_data

logger = logging.getLogger(__name__)


class CamelCaseJSONResponse(JSONResponse):
    """JSON response whose keys are converted to camelCase on render."""

    def render(self, content: Any) -> bytes:
        result = transform_response_data(content)
        if result.fell_back:
            logger.error(
                "Error transforming response data",
                exc_info=result.error,
                extra={"context": {"error": str(result.error)}},
            )
        return super().render(result.value)


def _is_json(headers: Headers) -> bool:
    content_type = headers.get("content-type", "").split(";")[0].strip().lower()
    return content_type == "application/json" or content_type.endswith("+json")


class SnakeCaseRequestMiddleware:
    """ASGI middleware converting JSON request bodies to snake_case keys."""

    def __init__(self, app: ASGIApp, exclude_paths: list[str] | None = None) -> None:
        self.app = app
        self.exclude_paths = exclude_paths or []

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not self._should_transform(scope):
            await self.app(scope, receive, send)
            return

        body = b""
        trailing: Message | None = None
        while True:
            message = await receive()
            if message["type"] != "http.request":
                trailing = message
                break
            body += message.get("body", b"")
            if not message.get("more_body", False):
                break

        new_body = self.transform_body(body)
        if new_body is not body:
            scope = dict(scope)
            scope["headers"] = [
                (name, value)
                for name, value in scope["headers"]
                if name.lower() != b"content-length"
            ] + [(b"content-length", str(len(new_body)).encode("latin-1"))]

        replayed = False

        async def replay() -> Message:
            nonlocal replayed, trailing
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": new_body, "more_body": False}
            if trailing is not None:
                message, trailing = trailing, None
                return message
            return await receive()

        await self.app(scope, replay, send)

    def _should_transform(self, scope: Scope) -> bool:
        path = scope.get("path", "")
        if any(path.startswith(p) for p in self.exclude_paths):
            return False
        return _is_json(Headers(scope=scope))

    def transform_body(self, body: bytes) -> bytes:
        """Return the snake_case encoding of a JSON body, or the body itself."""
        if not body:
            return body

        try:
            payload = json.loads(body)
        except ValueError as e:
            logger.warning(
                "Request body is not valid JSON, forwarding unchanged",
                extra={"context": {"error": str(e)}},
            )
            return body

        result = transform_request_data(payload)
        if result.fell_back:
            logger.error(
                "Error transforming request data",
                exc_info=result.error,
                extra={"context": {"error": str(result.error)}},
            )
            return body
        if result.value is payload:
            return body

        try:
            encoded = json.dumps(result.value, separators=(",", ":"), allow_nan=False)
        except ValueError as e:
            logger.warning(
                "Request body has no standard JSON encoding, forwarding unchanged",
                extra={"context": {"error": str(e)}},
            )
            return body
        return encoded.encode("utf-8")
