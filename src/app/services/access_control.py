"""
Access Control

Allow-list decision for a route group, made on the role attached by
authentication.
"""

from typing import AbstractSet, Optional

from libs.result import Error, Result, Return
from src.app.use_cases.auth.dtos import AuthenticatedIdentity
from src.domain.entities import UserRole


def authorize(
    identity: Optional[AuthenticatedIdentity], allowed_roles: AbstractSet[UserRole]
) -> Result[AuthenticatedIdentity]:
    """
    Check the attached role against an allow-list.

    Returns:
        Result with the identity if allowed; UNAUTHORIZED Error when no identity
        is attached, FORBIDDEN Error when the role is not in the allow-list
    """
    if identity is None:
        return Return.err(Error("UNAUTHORIZED", "Unauthorized access"))

    if identity.role not in allowed_roles:
        return Return.err(
            Error("FORBIDDEN", "You don't have permission to access this resource")
        )

    return Return.ok(identity)
