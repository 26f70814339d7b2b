"""FastAPI dependencies shared by the storefront routers."""

from fastapi import Header

from storefront.api.errors import InvalidTokenError, NoTokenError
from storefront.auth import get_authenticator
from storefront.auth.port import AuthenticatedUser
from storefront.utils.logging import add_context

_BEARER_PREFIX = "Bearer "


async def require_user(authorization: str | None = Header(default=None)) -> AuthenticatedUser:
    """Resolve the bearer token on the request to the authenticated user."""
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        raise NoTokenError()

    token = authorization[len(_BEARER_PREFIX) :].strip()
    if not token:
        raise NoTokenError()

    user = get_authenticator().authenticate(token)
    if user is None:
        raise InvalidTokenError()

    add_context(user_id=user.user_id)
    return user
