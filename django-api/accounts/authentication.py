"""DRF authentication backed by the token service."""

from rest_framework import authentication, exceptions

from accounts.errors import InvalidTokenError
from accounts.tokens import verify_token


class BearerTokenAuthentication(authentication.BaseAuthentication):
    """Reads ``Authorization: Bearer <token>``.

    A missing header leaves the request anonymous; the service decides whether
    the operation needs an identity. A bad token is rejected outright.
    """

    keyword = "Bearer"

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].lower() != self.keyword.lower().encode():
            return None
        if len(header) != 2:
            raise exceptions.AuthenticationFailed("Invalid authorization header")

        try:
            token = header[1].decode()
        except UnicodeError as exc:
            raise exceptions.AuthenticationFailed("Invalid authorization header") from exc

        try:
            identity = verify_token(token)
        except InvalidTokenError as exc:
            raise exceptions.AuthenticationFailed(exc.message) from exc
        return identity, token

    def authenticate_header(self, request):
        return self.keyword
