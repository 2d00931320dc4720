import time
from collections.abc import Iterable

from authlib.jose import JoseError, JsonWebToken
from loguru import logger

from contact_api.core.errors import ConfigurationError
from contact_api.core.services.jwt.jwt_utils import decode_signing_key
from contact_api.runtime.config.config_data import JWTConfig


class JwtGeneratorService:
    """Service for issuing signed bearer tokens."""

    def __init__(self, jwt_config: JWTConfig):
        """Decode the signing key up front so a bad secret fails at startup.

        Raises:
            ConfigurationError: If the configured secret is missing or malformed
        """
        self._config = jwt_config
        self._key = decode_signing_key(jwt_config.secret_key)
        self._jwt = JsonWebToken([jwt_config.algorithm])

    @property
    def expiration_time(self) -> int:
        """Configured token lifetime in milliseconds."""
        return self._config.expiration_time_ms

    def issue(
        self,
        subject: str,
        roles: Iterable[str],
        expires_in_ms: int | None = None,
    ) -> str:
        """Generate a signed JWT for ``subject`` carrying its role names.

        Args:
            subject: Subject (sub) claim - the username
            roles: Role names placed in the ``roles`` claim
            expires_in_ms: Token lifetime override; defaults to the configured TTL

        Returns:
            Signed JWT token string
        """
        ttl_ms = self._config.expiration_time_ms if expires_in_ms is None else expires_in_ms
        now = time.time()

        payload = {
            "sub": subject,
            "roles": list(roles),
            "iat": int(now),
            "exp": int(now + ttl_ms / 1000),
        }
        header = {"alg": self._config.algorithm, "typ": "JWT"}

        try:
            token = self._jwt.encode(header, payload, self._key)
        except JoseError as e:
            raise ConfigurationError(f"JWT encoding failed: {e}") from e

        logger.debug("Issued token for {} expiring at {}", subject, payload["exp"])
        # authlib returns bytes, decode to string
        return token.decode() if isinstance(token, bytes) else token
