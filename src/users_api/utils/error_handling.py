"""
Centralized Error Handling and Request Logging
Translates every failure into a small JSON error envelope and tags each
request with a trace ID for log correlation.
"""

import json
import logging
import time
import traceback
import uuid
from datetime import datetime
from typing import Any, Dict, Optional
from contextvars import ContextVar

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

# Context variable for request tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

logger = logging.getLogger(__name__)

class ErrorHandlingConfig:
    """Centralized configuration for error handling behavior"""

    INCLUDE_TRACE_ID = True
    INCLUDE_TIMESTAMP = True
    DETAILED_VALIDATION_ERRORS = True

class StructuredLogger:
    """Structured logging with consistent format and context"""

    @staticmethod
    def log_error(
        error_type: str,
        message: str,
        request: Optional[Request] = None,
        exception: Optional[Exception] = None,
        extra_context: Optional[Dict] = None,
        include_traceback: bool = True
    ) -> str:
        """Log structured error with full context, returns the trace ID"""
        trace_id = request_id_var.get('') or str(uuid.uuid4())[:8]

        log_entry = {
            "timestamp": datetime.utcnow().isoformat(),
            "trace_id": trace_id,
            "error_type": error_type,
            "message": message,
            "level": "ERROR"
        }

        if request:
            log_entry["request"] = {
                "method": request.method,
                "path": request.url.path,
                "query_params": dict(request.query_params),
                "client_ip": request.client.host if request.client else None,
            }

        if exception:
            log_entry["exception"] = {
                "type": type(exception).__name__,
                "details": str(exception),
            }
            if include_traceback:
                log_entry["exception"]["traceback"] = "".join(
                    traceback.format_exception(type(exception), exception, exception.__traceback__)
                )

        if extra_context:
            log_entry["context"] = extra_context

        logger.error(json.dumps(log_entry, indent=2, default=str))
        return trace_id

class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns a trace ID to each request and logs its outcome"""

    async def dispatch(self, request: Request, call_next):
        trace_id = str(uuid.uuid4())[:8]
        request_id_var.set(trace_id)
        request.state.trace_id = trace_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers["X-Trace-ID"] = trace_id
        logger.info(
            f"[{trace_id}] {request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response

def _error_response(status_code: int, message: str, trace_id: Optional[str] = None,
                    extra: Optional[Dict[str, Any]] = None, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    response_content = {
        "error": f"HTTP {status_code}",
        "message": message,
    }
    if extra:
        response_content.update(extra)

    if ErrorHandlingConfig.INCLUDE_TRACE_ID and trace_id:
        response_content["trace_id"] = trace_id

    if ErrorHandlingConfig.INCLUDE_TIMESTAMP:
        response_content["timestamp"] = datetime.utcnow().isoformat()

    return JSONResponse(status_code=status_code, content=response_content, headers=headers)

# Global Exception Handlers
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions raised by handlers and by the routing layer"""
    status_code = exc.status_code
    message = exc.detail
    headers = getattr(exc, "headers", None)

    # The route table makes no method-not-allowed distinction
    if status_code == 405:
        status_code = 404
        message = "Not Found"
        headers = None

    trace_id = request_id_var.get('')
    logger.warning(f"[{trace_id}] HTTP {status_code} on {request.method} {request.url.path}: {message}")

    return _error_response(status_code, message, trace_id=trace_id, headers=headers)

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors as 400 Bad Request.

    A malformed path ID and an undecodable or incomplete body are both
    client input errors; the message names which part was rejected.
    """
    errors = exc.errors()
    from_path = any((error.get("loc") or ("",))[0] == "path" for error in errors)
    message = "Invalid user ID" if from_path else "Invalid request body"

    extra = None
    if ErrorHandlingConfig.DETAILED_VALIDATION_ERRORS:
        extra = {
            "detail": [
                {
                    "field": " -> ".join(str(loc) for loc in error.get("loc", [])),
                    "message": error.get("msg", "Unknown validation error"),
                    "type": error.get("type", "unknown"),
                }
                for error in errors
            ]
        }

    trace_id = request_id_var.get('')
    logger.warning(f"[{trace_id}] HTTP 400 on {request.method} {request.url.path}: {message} ({len(errors)} errors)")

    return _error_response(400, message, trace_id=trace_id, extra=extra)

async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions"""
    trace_id = StructuredLogger.log_error(
        "internal_server_error",
        f"Unhandled exception: {str(exc)}",
        request=request,
        exception=exc,
        include_traceback=True
    )

    # Don't expose internal details
    return _error_response(500, "An unexpected error occurred", trace_id=trace_id)

def setup_error_handling(app):
    """Setup error handling and request context for a FastAPI app"""

    app.add_middleware(RequestContextMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Centralized error handling initialized")
