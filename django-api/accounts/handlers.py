"""HTTP handlers for signup and login."""

from collections.abc import Mapping
from typing import Any

from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.errors import AccountError, AccountErrorCode, AccountValidationError
from accounts.services import AccountService
from events.handlers.exceptions import error_body

_STATUS_BY_CODE = {
    AccountErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    AccountErrorCode.EMAIL_TAKEN: status.HTTP_409_CONFLICT,
    AccountErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    AccountErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
}


class AccountSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    email = serializers.EmailField()
    name = serializers.CharField(allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at")


def _error_response(exc: AccountError) -> Response:
    return Response(
        error_body(exc.code.value, exc.message, getattr(exc, "errors", None)),
        status=_STATUS_BY_CODE[exc.code],
    )


def _payload(request: Request) -> Mapping[str, Any]:
    if not isinstance(request.data, Mapping):
        raise AccountValidationError(["Request body must be a JSON object or form data"])
    return request.data


class SignupView(APIView):
    """Handler for POST /api/users/signup"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        try:
            data = _payload(request)
            account, token = AccountService().signup(
                data.get("email"), data.get("password"), data.get("name")
            )
        except AccountError as exc:
            return _error_response(exc)
        return Response(
            {
                "success": True,
                "message": "User registered successfully",
                "user": AccountSerializer(account).data,
                "token": token,
            },
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """Handler for POST /api/users/login"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        try:
            data = _payload(request)
            account, token = AccountService().login(data.get("email"), data.get("password"))
        except AccountError as exc:
            return _error_response(exc)
        return Response(
            {
                "success": True,
                "message": "Login successful",
                "user": AccountSerializer(account).data,
                "token": token,
            },
            status=status.HTTP_200_OK,
        )
