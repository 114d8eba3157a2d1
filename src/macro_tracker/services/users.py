"""Identity resolution for API requests."""

from dataclasses import dataclass
from typing import Protocol

from macro_tracker.domain.models import UserRecord


class IdentityProvider(Protocol):
    """Resolves an access token to the authenticated user."""

    def current_user(self, access_token: str) -> UserRecord | None:
        """Return the user for a token, or None when it is not valid."""


@dataclass
class UserService:
    """Application service for the current session's user."""

    identity_provider: IdentityProvider

    def authenticate(self, access_token: str | None) -> UserRecord | None:
        """Return the user behind a token; blank tokens are anonymous."""
        if not access_token or not access_token.strip():
            return None
        return self.identity_provider.current_user(access_token.strip())
