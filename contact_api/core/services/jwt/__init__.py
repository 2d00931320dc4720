"""JWT service package."""

from .jwt_gen import JwtGeneratorService
from .jwt_utils import decode_signing_key, preview_jwt
from .jwt_verify import JwtVerificationService

__all__ = [
    "JwtGeneratorService",
    "JwtVerificationService",
    "decode_signing_key",
    "preview_jwt",
]
