"""User repository for data access operations."""

from collections.abc import Iterable

from sqlmodel import Session, select

from contact_api.entities.role import RoleName, RoleTable

from .entity import User
from .table import UserRoleLink, UserTable


class UserRepository:
    """Data-access layer for users and their role links."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: UserTable) -> User:
        return User(
            id=row.id,
            username=row.username,
            password_hash=row.password_hash,
            roles=frozenset(self.roles_for(row.id)),
        )

    def roles_for(self, user_id: int) -> list[RoleName]:
        statement = (
            select(RoleTable.name)
            .join(UserRoleLink, UserRoleLink.role_id == RoleTable.id)
            .where(UserRoleLink.user_id == user_id)
        )
        return [RoleName(name) for name in self._session.exec(statement).all()]

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return self._to_entity(row)

    def get_by_username(self, username: str) -> User | None:
        statement = select(UserTable).where(UserTable.username == username)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def exists_by_username(self, username: str) -> bool:
        statement = select(UserTable.id).where(UserTable.username == username)
        return self._session.exec(statement).first() is not None

    def create(self, username: str, password_hash: str, role_ids: Iterable[int]) -> User:
        row = UserTable(username=username, password_hash=password_hash)
        self._session.add(row)
        self._session.flush()
        for role_id in role_ids:
            self._session.add(UserRoleLink(user_id=row.id, role_id=role_id))
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, user_id: int, username: str, password_hash: str) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        row.username = username
        row.password_hash = password_hash
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, user_id: int) -> bool:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return False
        links = self._session.exec(
            select(UserRoleLink).where(UserRoleLink.user_id == user_id)
        ).all()
        for link in links:
            self._session.delete(link)
        self._session.flush()
        self._session.delete(row)
        self._session.flush()
        return True

    def list_all(self) -> list[User]:
        rows = self._session.exec(select(UserTable).order_by(UserTable.id)).all()
        return [self._to_entity(row) for row in rows]
