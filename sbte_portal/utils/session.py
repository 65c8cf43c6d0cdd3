"""Session token verification for requests made by signed-in users.

Sessions are issued by the external sign-in service as HS256 JWTs keyed with
``SECRET_KEY``. The claims are the camelCase principal fields (``userId``,
``role``, ``departmentId``) plus an optional ``exp``. This module only reads
and verifies tokens; ``generate_session_token`` mirrors the issuer so tokens
can be minted for tests and tooling.
"""

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from sbte_portal.config import get_settings

logger = logging.getLogger(__name__)

COOKIE_NAME = "sbte_session"
JWT_ALGORITHM = "HS256"

# Missing or non-bearer Authorization headers fall through to the cookie
bearer_scheme = HTTPBearer(auto_error=False)


class UserRole(str, Enum):
    """Roles a session principal can carry."""

    SBTE_ADMIN = "SBTE_ADMIN"
    HOD = "HOD"
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"


class SessionUser(BaseModel):
    """Authenticated principal attached to a request.

    ``role`` is kept as a plain string so tokens carrying roles unknown to
    this service still parse; they simply match no permission.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str = Field(..., min_length=1)
    role: str
    department_id: Optional[str] = None

    def has_role(self, role: UserRole) -> bool:
        """Return True if the principal carries ``role``."""
        return self.role == role.value


def generate_session_token(
    principal: SessionUser,
    secret: str,
    expires_in: Optional[timedelta] = None,
) -> str:
    """Encode a session principal as a signed JWT.

    Args:
        principal: Session principal to encode.
        secret: Signing key.
        expires_in: Lifetime of the token. Tokens without one never expire.

    Returns:
        Encoded JWT.
    """
    claims: Dict[str, Any] = principal.model_dump(by_alias=True)
    if expires_in is not None:
        claims["exp"] = datetime.now(timezone.utc) + expires_in
    return jwt.encode(claims, secret, algorithm=JWT_ALGORITHM)


def verify_session_token(token: str, secret: str) -> Optional[SessionUser]:
    """Verify a session token and return its principal.

    Args:
        token: Token to verify.
        secret: Signing key.

    Returns:
        SessionUser if the signature and expiry check out and the claims
        describe a principal, None otherwise.
    """
    try:
        claims = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Expired session token")
        return None
    except jwt.InvalidTokenError:
        return None

    try:
        return SessionUser.model_validate(claims)
    except PydanticValidationError:
        logger.warning("Signed session token carried malformed claims")
        return None


def extract_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Pick the bearer credentials if present, else the session cookie."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(COOKIE_NAME) or None


async def get_session_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[SessionUser]:
    """FastAPI dependency resolving the caller's session.

    Returns None when there is no token or it does not verify; handlers
    decide how to answer an anonymous caller.
    """
    token = extract_session_token(request, credentials)
    if token is None:
        return None
    principal = verify_session_token(token, get_settings().SECRET_KEY)
    if principal is None:
        logger.warning("Rejected session token")
    return principal
