"""Role repository for data access operations."""

from sqlmodel import Session, select

from .entity import Role, RoleName
from .table import RoleTable


class RoleRepository:
    """Data-access layer for roles."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_name(self, name: RoleName) -> Role | None:
        statement = select(RoleTable).where(RoleTable.name == name.value)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return Role.model_validate(row, from_attributes=True)

    def exists(self, name: RoleName) -> bool:
        return self.get_by_name(name) is not None

    def create(self, name: RoleName) -> Role:
        row = RoleTable(name=name.value)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Role.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Role]:
        rows = self._session.exec(select(RoleTable).order_by(RoleTable.id)).all()
        return [Role.model_validate(row, from_attributes=True) for row in rows]
