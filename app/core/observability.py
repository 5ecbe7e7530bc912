from __future__ import annotations

import logging
import time
import uuid
from typing import Callable, Optional, Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.core.config import settings


logger = logging.getLogger("app.request")


def configure_logging(level: Optional[str] = None) -> None:
	"""Set the root log level and a plain handler once at startup."""
	logging.basicConfig(
		level=(level or settings.LOG_LEVEL).upper(),
		format="%(asctime)s %(levelname)s %(name)s %(message)s",
	)


def generate_correlation_id(existing: Optional[str]) -> str:
	if existing and existing.strip():
		return existing.strip()
	return str(uuid.uuid4())


class RequestLoggingMiddleware(BaseHTTPMiddleware):
	"""Middleware to log inbound HTTP requests with correlation IDs."""

	async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
		correlation_id = generate_correlation_id(request.headers.get("X-Correlation-ID"))
		setattr(request.state, "correlation_id", correlation_id)

		start_ns = time.monotonic_ns()
		status_code: int = 500
		try:
			response = await call_next(request)
			status_code = response.status_code
		finally:
			duration_ms = int((time.monotonic_ns() - start_ns) / 1_000_000)
			if settings.ENABLE_REQUEST_LOGGING:
				logger.info(
					f"{request.method} {request.url.path} {status_code}",
					extra={
						"correlation_id": correlation_id,
						"method": request.method,
						"raw_path": request.url.path,
						"status_code": status_code,
						"duration_ms": duration_ms,
					}
				)

		response.headers["X-Correlation-ID"] = correlation_id
		return response
