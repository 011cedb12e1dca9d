from sqlmodel import Session

from user_lookup.core.entities.user import User
from user_lookup.core.rows.user_row import UserRow


class UserRepository:
    """Data-access layer for users.

    Storage errors raised by SQLAlchemy are not caught here; a missing user
    is reported as ``None``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_id(self, user_id: int) -> User | None:
        row = self._session.get(UserRow, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def create(self, user: User) -> User:
        """Insert ``user`` and return it with the id assigned by storage.

        Any id already set on ``user`` is ignored. The caller commits.
        """
        row = UserRow(**user.model_dump(exclude={"id"}))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)
