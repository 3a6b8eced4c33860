"""
Role Hierarchy Policy

Decides whether a requester may create, update or delete a user, given the
target's current role (read fresh from storage by the caller) and the role
being assigned. Rules are checked in order; the first match rejects.
"""

from typing import Optional

from libs.result import Error, Result, Return
from src.domain.entities import UserAction, UserRole


def _forbidden(message: str) -> Result[None]:
    return Return.err(Error("FORBIDDEN", message))


def check_role_hierarchy(
    requester_role: UserRole,
    action: UserAction,
    target_role: Optional[UserRole] = None,
    new_role: Optional[UserRole] = None,
) -> Result[None]:
    """
    Check a user-management action against the role hierarchy.

    Args:
        requester_role: Role attached to the authenticated request
        action: create, update or delete
        target_role: Current role of the existing target (update/delete)
        new_role: Role being assigned (create/update)

    Returns:
        Result with None if allowed, or FORBIDDEN Error
    """
    if requester_role == UserRole.super_admin:
        return Return.ok()

    if requester_role == UserRole.admin:
        if action == UserAction.create and new_role == UserRole.super_admin:
            return _forbidden("forbidden: admin cannot create a super_admin")

        if (
            action == UserAction.update
            and new_role == UserRole.super_admin
            and target_role != UserRole.super_admin
        ):
            return _forbidden("forbidden: admin cannot promote a user to super_admin")

        if target_role == UserRole.super_admin:
            if action == UserAction.update:
                return _forbidden("forbidden: admin cannot modify a super_admin")
            if action == UserAction.delete:
                return _forbidden("forbidden: admin cannot delete a super_admin")

        return Return.ok()

    # Staff is stopped by the /users allow-list before reaching here
    return _forbidden("forbidden: staff cannot manage users")
