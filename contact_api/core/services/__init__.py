"""Core services exports."""

# Contact Services
from .contact.contact_service import ContactService
from .contact.merge import DuplicateContactService, MergeResult, merge_duplicates

# Database Services
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

# JWT Services
from .jwt.jwt_gen import JwtGeneratorService
from .jwt.jwt_verify import JwtVerificationService

# User Services
from .user.role_seeding import seed_roles
from .user.user_management import UserService

__all__ = [
    # Contact Services
    "ContactService",
    "DuplicateContactService",
    "MergeResult",
    "merge_duplicates",
    # Database Services
    "DbManageService",
    "DbSessionService",
    # JWT Services
    "JwtGeneratorService",
    "JwtVerificationService",
    # User Services
    "UserService",
    "seed_roles",
]
