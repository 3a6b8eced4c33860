"""
Inventory Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user; the only authorization dimension"""

    super_admin = "super_admin"
    admin = "admin"
    staff = "staff"


class UserAction(str, Enum):
    """User-management operation checked by the role hierarchy"""

    create = "create"
    update = "update"
    delete = "delete"
