from .role_seeding import seed_roles
from .user_management import UserService

__all__ = ["UserService", "seed_roles"]
