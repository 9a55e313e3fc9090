"""
Request logging middleware.

Every request gets an id, taken from an incoming ``X-Request-ID`` header or
generated. It is bound to the log records emitted while the request is served
and echoed back on the response.
"""
import time
import uuid
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ..constants import RequestHeaders
from ..utils.logger import get_logger, request_id_var

logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(RequestHeaders.REQUEST_ID) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            response = await self._log_request(request, call_next)
        finally:
            request_id_var.reset(token)

        response.headers[RequestHeaders.REQUEST_ID] = request_id
        return response

    async def _log_request(self, request: Request, call_next) -> Response:
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        # Query strings are left out: they can carry tokens
        logger.info(f"{request.method} {request.url.path} from {client_ip}")

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"{request.method} {request.url.path} failed after "
                f"{time.perf_counter() - start_time:.4f}s: {e}"
            )
            raise

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"in {time.perf_counter() - start_time:.4f}s"
        )
        return response


def add_logging_middleware(app: FastAPI) -> None:
    """Add logging middleware to the application."""
    app.add_middleware(LoggingMiddleware)
