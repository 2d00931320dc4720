from loguru import logger
from sqlmodel import Session

from contact_api.entities.role import RoleName, RoleRepository


def seed_roles(session: Session) -> list[RoleName]:
    """Insert every missing role; returns the names that were created."""
    repository = RoleRepository(session)
    created = []
    for name in RoleName:
        if not repository.exists(name):
            repository.create(name)
            created.append(name)
    if created:
        logger.info("Seeded roles: {}", ", ".join(created))
    return created
