"""Supabase Auth identity provider."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from macro_tracker.domain.models import UserRecord
from macro_tracker.services.users import IdentityProvider

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Resolves Supabase access tokens to users."""

    client: Client

    def current_user(self, access_token: str) -> UserRecord | None:
        """Return the user for a Supabase JWT, or None when it is rejected."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.warning("Access token rejected: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return UserRecord(id=UUID(str(response.user.id)), email=response.user.email)
