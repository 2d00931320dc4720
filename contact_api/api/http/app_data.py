from dataclasses import dataclass

from contact_api.core.services.database import DbSessionService
from contact_api.core.services.jwt import JwtGeneratorService, JwtVerificationService
from contact_api.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    config: ConfigData
    jwt_verify_service: JwtVerificationService
    jwt_generation_service: JwtGeneratorService
    database_service: DbSessionService

    @classmethod
    def from_config(cls, config: ConfigData) -> "ApplicationDependencies":
        return cls(
            config=config,
            jwt_verify_service=JwtVerificationService(config.jwt),
            jwt_generation_service=JwtGeneratorService(config.jwt),
            database_service=DbSessionService(config.database, config.app.environment),
        )
