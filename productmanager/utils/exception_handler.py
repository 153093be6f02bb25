import logging
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework.views import exception_handler
from rest_framework.exceptions import (
    APIException,
    NotFound,
    ValidationError,
)
from rest_framework import status
from rest_framework.serializers import ValidationError as SerializerValidationError
from productmanager.utils.response import (
    not_found_response,
    problem_response,
    server_error_response,
    validation_error_response,
)

logger = logging.getLogger(__name__)

NON_FIELD_ERRORS_KEY = "non_field_errors"


def _error_strings(errors):
    if not isinstance(errors, (list, tuple)):
        errors = [errors]
    return [error.string if hasattr(error, "string") else str(error) for error in errors]


def normalize_validation_errors(error_detail):
    """
    Convert validation error detail into the field -> [messages] mapping
    used by every 400 response.

    Handles:
    - DRF dict format: {'name': [ErrorDetail(...)]} -> {'name': ['Name is required']}
    - Django ValidationError with a message dict
    - List format: [ErrorDetail(...)] -> {'non_field_errors': [...]}
    - String format: "error message" -> {'non_field_errors': ['error message']}
    """
    if isinstance(error_detail, DjangoValidationError):
        if hasattr(error_detail, "error_dict"):
            return {field: list(messages) for field, messages in error_detail.message_dict.items()}
        return {NON_FIELD_ERRORS_KEY: list(error_detail.messages)}

    if isinstance(error_detail, dict):
        return {field: _error_strings(errors) for field, errors in error_detail.items()}

    return {NON_FIELD_ERRORS_KEY: _error_strings(error_detail)}


def format_validation_error(error_detail):
    """
    Convert validation error detail into a readable one-line message.

    {'name': ['Name is required'], 'price': [...]} -> "Name: Name is required. Price: ..."
    """
    messages = []
    for field, errors in normalize_validation_errors(error_detail).items():
        if field == NON_FIELD_ERRORS_KEY:
            messages.append(", ".join(errors))
        else:
            field_name = field.replace('_', ' ').title()
            messages.append(f"{field_name}: {', '.join(errors)}")
    return ". ".join(messages)


def custom_exception_handler(exc, context):
    """
    Custom global exception handler.
    Ensures ALL API errors use the problem_response() format.
    """
    # DRF default handler marks the atomic block for rollback
    exception_handler(exc, context)

    view = context.get('view', None)
    view_name = view.__class__.__name__ if view else 'UnknownView'
    logger.warning("[%s] Exception: %s", view_name, exc)

    # --- Handle Validation Errors ---
    if isinstance(exc, (ValidationError, SerializerValidationError, DjangoValidationError)):
        detail = exc if isinstance(exc, DjangoValidationError) else exc.detail
        return validation_error_response(normalize_validation_errors(detail))

    # --- Handle Not Found ---
    if isinstance(exc, (Http404, NotFound)):
        return not_found_response(str(getattr(exc, "detail", "")) or "Not found.")

    # --- Handle other DRF API Exceptions (like ParseError, MethodNotAllowed, etc.) ---
    if isinstance(exc, APIException):
        status_code = getattr(exc, "status_code", status.HTTP_500_INTERNAL_SERVER_ERROR)
        return problem_response(
            status_code,
            str(getattr(exc, "default_detail", "Request failed.")),
            detail=format_validation_error(exc.detail),
        )

    # --- Handle Unexpected Server Errors ---
    logger.exception("Unhandled Exception", exc_info=exc)
    return server_error_response()
