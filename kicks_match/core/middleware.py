"""FastAPI middleware for trace id propagation and access logging."""
from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from kicks_match.core.trace_context import (
    clear_trace_id,
    generate_trace_id,
    set_trace_id,
)

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Trace-Id"


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Reads or creates ``X-Trace-Id``, echoes it back and writes one ACCESS line per request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Header lookup is case-insensitive in Starlette
        trace_id = request.headers.get(TRACE_HEADER) or generate_trace_id()
        set_trace_id(trace_id)

        start_time = time.time()
        client_ip = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
            latency_ms = int((time.time() - start_time) * 1000)
            response.headers[TRACE_HEADER] = trace_id

            logger.info(
                f"ACCESS {request.method} {request.url.path} "
                f"status={response.status_code} "
                f"latency_ms={latency_ms} "
                f"client_ip={client_ip}"
            )
            return response

        except Exception as e:
            latency_ms = int((time.time() - start_time) * 1000)
            logger.error(
                f"ACCESS {request.method} {request.url.path} "
                f"status=500 "
                f"latency_ms={latency_ms} "
                f"client_ip={client_ip} "
                f"error={str(e)}",
                exc_info=True,
            )
            raise

        finally:
            clear_trace_id()
