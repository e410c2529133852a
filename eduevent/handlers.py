"""Shared HTTP handler plumbing.

Views subclass DomainAPIView and declare how their domain error codes map to
HTTP statuses. Only the code and the user-safe message reach the client.
"""

from collections.abc import Mapping
from enum import Enum

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from eduevent.errors import DomainError


def domain_error_response(error: DomainError, status_code: int) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=status_code,
    )


class DomainAPIView(APIView):
    """APIView that renders DomainError as a JSON error body."""

    error_statuses: Mapping[Enum, int] = {}

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            status_code = self.error_statuses.get(exc.code, status.HTTP_400_BAD_REQUEST)
            return domain_error_response(exc, status_code)
        return super().handle_exception(exc)
