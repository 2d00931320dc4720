"""Role entity module."""

from .entity import Role, RoleName
from .repository import RoleRepository
from .table import RoleTable

__all__ = ["Role", "RoleName", "RoleTable", "RoleRepository"]
