from typing import Optional

from src.domain.entities import UserRole

VALID_ROLES = ", ".join(role.value for role in UserRole)


def parse_role(value: str) -> Optional[UserRole]:
    """Map an external role string onto UserRole, or None if unknown."""
    try:
        return UserRole(value)
    except ValueError:
        return None
