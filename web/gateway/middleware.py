"""Request-scoped middleware for the shop API.

``RequestIdMiddleware`` gives every request a correlation id: the client's
``X-Request-ID`` header when present, a fresh UUID4 otherwise. The id is
stored on the request, published through ``REQUEST_ID_CTX`` so log records
can pick it up, echoed back on the response and written to a one-line
access log entry.

``ApiSizeLimitMiddleware`` rejects oversized bodies sent to ``/api/``
before any view parses them.
"""

import contextvars
import logging
import time
import uuid

from django.conf import settings
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

REQUEST_ID_CTX = contextvars.ContextVar("request_id", default="-")

logger = logging.getLogger(__name__)


class RequestIdMiddleware(MiddlewareMixin):
    """Assign, propagate and log a per-request correlation id."""

    HEADER = "HTTP_X_REQUEST_ID"
    RESPONSE_HEADER = "X-Request-ID"

    def process_request(self, request):
        rid = request.META.get(self.HEADER) or str(uuid.uuid4())
        request.request_id = rid
        request._started_at = time.monotonic()
        REQUEST_ID_CTX.set(rid)

    def process_response(self, request, response):
        rid = getattr(request, "request_id", REQUEST_ID_CTX.get())
        response[self.RESPONSE_HEADER] = rid

        started = getattr(request, "_started_at", None)
        elapsed_ms = round((time.monotonic() - started) * 1000, 2) if started else None
        logger.info(
            "request handled",
            extra={
                "method": request.method,
                "path": request.path,
                "status": response.status_code,
                "elapsed_ms": elapsed_ms,
            },
        )
        return response


class ApiSizeLimitMiddleware(MiddlewareMixin):
    """Answer 413 for ``/api/`` requests whose declared body is too large."""

    def process_request(self, request):
        if not request.path.startswith("/api/"):
            return None
        clen = request.META.get("CONTENT_LENGTH")
        if clen and clen.isdigit() and int(clen) > settings.API_MAX_BYTES:
            logger.warning("payload rejected", extra={"path": request.path, "content_length": int(clen)})
            return JsonResponse({"detail": "PAYLOAD_TOO_LARGE"}, status=413)
        return None
