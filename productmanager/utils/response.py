# utils/response.py
from rest_framework import status
from rest_framework.response import Response

VALIDATION_ERROR_TITLE = "One or more validation errors occurred."


def api_response(status_code=status.HTTP_200_OK, data=None, headers=None):
    """
    Standardized API response.

    Success bodies are sent as-is so the JSON shape matches the transfer
    shape of the resource (or is empty for 204).
    """
    return Response(data, status=status_code, headers=headers)


def problem_response(status_code, title, detail=None, errors=None):
    """
    Error response body shared by every failing API call:

        {"title": ..., "status": <http status>, "detail": ..., "errors": {...}}

    ``detail`` and ``errors`` are only present when given.
    """
    body = {"title": title, "status": status_code}
    if detail:
        body["detail"] = detail
    if errors is not None:
        body["errors"] = errors
    return Response(body, status=status_code)


def validation_error_response(errors):
    return problem_response(
        status.HTTP_400_BAD_REQUEST,
        VALIDATION_ERROR_TITLE,
        errors=errors,
    )


def not_found_response(detail="Not found."):
    return problem_response(status.HTTP_404_NOT_FOUND, "Not Found", detail=detail)


def server_error_response(detail="An unexpected error occurred. Please try again later."):
    return problem_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        detail=detail,
    )
