"""Authenticator port (abstract interface).

Turns a bearer credential into the identity of the user making a request.
Bookings only need the user's id; name and email ride along for logging and
for clients that cache the profile.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity resolved from a bearer token."""

    user_id: str
    name: str | None = None
    email: str | None = None


class Authenticator(ABC):
    """Abstract authenticator interface."""

    @abstractmethod
    def authenticate(self, token: str) -> AuthenticatedUser | None:
        """Resolve ``token`` to a user, or return None if it is not valid."""
        ...
