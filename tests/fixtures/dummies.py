from __future__ import annotations

import pytest

from user_lookup.core.entities.user import User


class FakeUserRepository:
    """In-memory stand-in for ``UserRepository`` that records its calls."""

    def __init__(self, users: list[User] | None = None) -> None:
        self.users = {user.id: user for user in users or []}
        self.calls: list[int] = []
        self.error: Exception | None = None

    def find_by_id(self, user_id: int) -> User | None:
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        return self.users.get(user_id)


@pytest.fixture
def fake_repository() -> FakeUserRepository:
    return FakeUserRepository()
