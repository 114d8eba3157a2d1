"""Tests for user service."""

from uuid import uuid4

from macro_tracker.domain.models import UserRecord
from macro_tracker.services.users import UserService
from tests.conftest import FakeIdentityProvider


def test_authenticate_resolves_token() -> None:
    user = UserRecord(id=uuid4())
    service = UserService(FakeIdentityProvider({"token": user}))

    assert service.authenticate(" token ") == user
    assert service.authenticate("other") is None


def test_authenticate_blank_token_is_anonymous() -> None:
    service = UserService(FakeIdentityProvider())

    assert service.authenticate(None) is None
    assert service.authenticate("   ") is None
