"""
API exception handlers.

This module maps every failure onto the response envelope
``{"success": false, "code": ..., "error": ..., "details": ...}``.
"""

import logging
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    DomainException,
    InsufficientStockError,
    ProductNotFoundError,
    ProductValidationError,
    StorageError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred"


def error_envelope(code: str, error: str, details: Any = None) -> Dict[str, Any]:
    """Build the failure envelope."""
    body: Dict[str, Any] = {"success": False, "code": code, "error": error}
    if details is not None:
        body["details"] = details
    return body


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, StorageError):
        response = _handle_unexpected_exception(exc, context, trace_id)
    elif isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, trace_id)
    elif isinstance(exc, APIException):
        response = _handle_api_exception(exc, context)
    elif isinstance(exc, Http404):
        response = Response(
            error_envelope("NOT_FOUND", "Resource not found"),
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        response = _handle_unexpected_exception(exc, context, trace_id)

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", None) or getattr(request, "correlation_id", None)


def _handle_domain_exception(exc: DomainException, trace_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status.HTTP_400_BAD_REQUEST
    details = None
    if isinstance(exc, ProductValidationError):
        details = exc.errors
    elif isinstance(exc, ProductNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, InsufficientStockError):
        status_code = status.HTTP_409_CONFLICT
        details = {"available": exc.available, "requested": exc.requested}

    logger.warning("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    return Response(error_envelope(exc.code, exc.message, details), status=status_code)


def _flatten_errors(detail: Any, prefix: str = "") -> List[str]:
    """Flatten DRF error details into a list of messages."""
    if isinstance(detail, dict):
        messages = []
        for field_name, value in detail.items():
            label = field_name if field_name != "non_field_errors" else ""
            messages.extend(_flatten_errors(value, f"{prefix}{label}: " if label else prefix))
        return messages
    if isinstance(detail, list):
        messages = []
        for item in detail:
            messages.extend(_flatten_errors(item, prefix))
        return messages
    return [f"{prefix}{detail}"]


def _handle_api_exception(exc: APIException, context: Dict[str, Any]) -> Response:
    """Handle DRF exceptions (parse errors, serializer validation, 405...)."""
    response = exception_handler(exc, context)
    code = exc.default_code.upper().replace("-", "_")

    if isinstance(exc, ValidationError):
        response.data = error_envelope(
            "VALIDATION_FAILED", "Validation failed", _flatten_errors(exc.detail)
        )
    else:
        message = response.data.get("detail", exc.default_detail)
        response.data = error_envelope(code, str(message))
    return response


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    details = str(exc) if settings.DEBUG else None
    return Response(
        error_envelope("INTERNAL_ERROR", INTERNAL_ERROR_MESSAGE, details),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
