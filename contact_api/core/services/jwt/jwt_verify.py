"""JWT verification service."""

from authlib.jose import JsonWebToken
from authlib.jose.errors import (
    BadSignatureError,
    JoseError,
    UnsupportedAlgorithmError,
)
from loguru import logger

from contact_api.core.errors import (
    ExpiredTokenError,
    InvalidSignatureError,
    MalformedTokenError,
    TokenError,
)
from contact_api.core.models.auth import TokenClaims
from contact_api.core.services.jwt.jwt_utils import (
    decode_signing_key,
    extract_roles,
    preview_jwt,
)
from contact_api.runtime.config.config_data import JWTConfig


class JwtVerificationService:
    def __init__(self, jwt_config: JWTConfig):
        self._config = jwt_config
        self._key = decode_signing_key(jwt_config.secret_key)
        self._jwt = JsonWebToken([jwt_config.algorithm])

    def read_claims(self, token: str) -> TokenClaims:
        """Parse the token and verify its signature.

        Expiry is reported through ``TokenClaims.expired`` rather than raised.

        Raises:
            MalformedTokenError: If the token is structurally unparsable
            InvalidSignatureError: If the signature check fails
        """
        pv = preview_jwt(token)

        if pv.alg != self._config.algorithm:
            raise InvalidSignatureError(f"Disallowed JWT algorithm: {pv.alg}")

        try:
            claims = self._jwt.decode(token, self._key)
        except BadSignatureError as exc:
            raise InvalidSignatureError(
                "JWT signature does not match locally computed signature"
            ) from exc
        except UnsupportedAlgorithmError as exc:
            raise InvalidSignatureError(f"Disallowed JWT algorithm: {pv.alg}") from exc
        except (JoseError, ValueError) as exc:
            raise MalformedTokenError(f"JWT error: {exc}") from exc

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise MalformedTokenError("Missing sub claim")
        for k in ("iat", "exp"):
            if not isinstance(claims.get(k), int):
                raise MalformedTokenError(f"Missing or non-numeric {k} claim")

        return TokenClaims(
            raw_token=token,
            subject=subject,
            roles=extract_roles(claims),
            issued_at=claims["iat"],
            expires_at=claims["exp"],
        )

    def validate(self, token: str) -> TokenClaims:
        """Verify the token and reject it once expired.

        Raises:
            MalformedTokenError, InvalidSignatureError, ExpiredTokenError
        """
        claims = self.read_claims(token)
        if claims.is_expired(leeway=self._config.clock_skew):
            raise ExpiredTokenError(
                f"JWT expired at {claims.expires_at_datetime.isoformat()}"
            )
        return claims

    def extract_subject(self, token: str) -> str:
        """Return the username carried by a valid, unexpired token."""
        return self.validate(token).subject

    def is_valid(self, token: str, expected_subject: str) -> bool:
        """True iff the token belongs to ``expected_subject`` and has not expired."""
        try:
            claims = self.validate(token)
        except TokenError as exc:
            logger.debug("Token rejected: {}", exc)
            return False
        return claims.subject == expected_subject
