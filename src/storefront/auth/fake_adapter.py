"""In-memory authenticator for development and testing.

Tokens are opaque random strings issued on demand and kept in a dict.
Revoking a token is the equivalent of a logout on a real identity provider.
"""

from uuid import uuid4

from storefront.auth.port import AuthenticatedUser, Authenticator


class FakeAuthenticator(Authenticator):
    """Token registry backed by a dict."""

    def __init__(self) -> None:
        self._tokens: dict[str, AuthenticatedUser] = {}
        self.calls: list[str] = []

    def issue_token(self, user_id: str | None = None, name: str | None = None, email: str | None = None) -> str:
        """Issue a token for a user, generating a user id if none is given."""
        token = f"fake_tok_{uuid4().hex}"
        self._tokens[token] = AuthenticatedUser(
            user_id=user_id or str(uuid4()),
            name=name,
            email=email,
        )
        return token

    def revoke(self, token: str) -> None:
        self._tokens.pop(token, None)

    def authenticate(self, token: str) -> AuthenticatedUser | None:
        self.calls.append(token)
        return self._tokens.get(token)
