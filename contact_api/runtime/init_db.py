"""Create the schema and seed the built-in roles."""

from loguru import logger

from contact_api.core.services.database import DbManageService, DbSessionService
from contact_api.core.services.user import seed_roles
from contact_api.runtime.config.config_data import ConfigData
from contact_api.runtime.context import get_config


def init_db(config: ConfigData | None = None, db_service: DbSessionService | None = None) -> None:
    """Idempotently create all tables and insert missing roles."""
    config = config or get_config()
    db_service = db_service or DbSessionService(config.database, config.app.environment)

    DbManageService(db_service.engine).create_all()
    with db_service.session_scope() as session:
        created = seed_roles(session)
    logger.info("Database ready ({} roles created)", len(created))
