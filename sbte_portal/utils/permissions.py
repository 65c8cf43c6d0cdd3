"""Authorization checks applied to session principals."""

import logging
from typing import Optional

from sbte_portal.exceptions import PermissionDeniedError
from sbte_portal.utils.session import SessionUser, UserRole

logger = logging.getLogger(__name__)


def require_session(principal: Optional[SessionUser]) -> SessionUser:
    """Return the principal or raise if the request is anonymous."""
    if principal is None:
        logger.warning("Anonymous request rejected")
        raise PermissionDeniedError("Unauthorized")
    return principal


def require_role(
    principal: Optional[SessionUser],
    role: UserRole,
    message: str = "Unauthorized",
) -> SessionUser:
    """Ensure the caller is signed in with ``role``.

    Raises:
        PermissionDeniedError: If there is no session or the role differs.
    """
    principal = require_session(principal)
    if not principal.has_role(role):
        logger.warning(
            "Role check failed",
            extra={
                "user_id": principal.user_id,
                "role": principal.role,
                "required_role": role.value,
            },
        )
        raise PermissionDeniedError(message)
    return principal


def require_department(
    principal: SessionUser,
    department_id: str,
    message: str = "Unauthorized",
) -> SessionUser:
    """Ensure the caller belongs to ``department_id``.

    Raises:
        PermissionDeniedError: If the principal's department differs.
    """
    if principal.department_id != department_id:
        logger.warning(
            "Department check failed",
            extra={
                "user_id": principal.user_id,
                "department_id": principal.department_id,
                "target_department_id": department_id,
            },
        )
        raise PermissionDeniedError(message)
    return principal
