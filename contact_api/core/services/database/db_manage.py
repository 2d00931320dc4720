"""Schema management for the application database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        # table models must be imported so they register on SQLModel.metadata
        from contact_api.entities.contact import ContactTable, DuplicateContactTable  # noqa: F401
        from contact_api.entities.role import RoleTable  # noqa: F401
        from contact_api.entities.user import UserRoleLink, UserTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")
