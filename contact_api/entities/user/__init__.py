"""User entity module.

- User: domain entity (with its granted roles)
- UserTable / UserRoleLink: database persistence models
- UserRepository: data access layer
"""

from .entity import User, UserCredentials, UserRead
from .repository import UserRepository
from .table import UserRoleLink, UserTable

__all__ = [
    "User",
    "UserCredentials",
    "UserRead",
    "UserRepository",
    "UserRoleLink",
    "UserTable",
]
