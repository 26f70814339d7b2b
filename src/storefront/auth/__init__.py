"""Authenticator factory.

Provides get_authenticator() / set_authenticator() to swap implementations:
- FakeAuthenticator for development and testing
- a token-verifying adapter for production
"""

from storefront.auth.fake_adapter import FakeAuthenticator
from storefront.auth.port import Authenticator

_current_authenticator: Authenticator | None = None


def get_authenticator() -> Authenticator:
    """Return the current authenticator. Defaults to FakeAuthenticator."""
    global _current_authenticator
    if _current_authenticator is None:
        _current_authenticator = FakeAuthenticator()
    return _current_authenticator


def set_authenticator(authenticator: Authenticator) -> None:
    """Override the active authenticator (useful for tests)."""
    global _current_authenticator
    _current_authenticator = authenticator


def reset_authenticator() -> None:
    """Reset to default authenticator."""
    global _current_authenticator
    _current_authenticator = None
