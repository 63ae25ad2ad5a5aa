from __future__ import annotations

from uuid import uuid4

from dating_app.api.deps import CurrentUser, get_current_user
from dating_app.main import app


class FakeSession:
    async def __aenter__(self) -> FakeSession:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False


class FakeSessionFactory:
    """Stands in for SessionLocal: supports both `SessionLocal()` and `SessionLocal.begin()`."""

    def __call__(self) -> FakeSession:
        return FakeSession()

    def begin(self) -> FakeSession:
        return FakeSession()


def authenticate_as(user: CurrentUser | None = None) -> CurrentUser:
    current_user = user or CurrentUser(id=uuid4(), email="ana@example.com", is_premium=False)

    async def _current_user() -> CurrentUser:
        return current_user

    app.dependency_overrides[get_current_user] = _current_user
    return current_user
