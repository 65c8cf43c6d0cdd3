"""Unit tests for session token verification."""

from datetime import timedelta
from typing import Optional

import jwt
import pytest
from starlette.requests import Request

from sbte_portal.utils.session import (
    COOKIE_NAME,
    JWT_ALGORITHM,
    SessionUser,
    UserRole,
    bearer_scheme,
    extract_session_token,
    generate_session_token,
    get_session_user,
    verify_session_token,
)

SECRET = "unit-test-secret-key-for-hs256-0001"


def _principal(**overrides) -> SessionUser:
    data = {"user_id": "u1", "role": "HOD", "department_id": "d1"}
    data.update(overrides)
    return SessionUser(**data)


def _request(headers: dict[str, str]) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/api/subjects",
        "query_string": b"",
        "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
    }
    return Request(scope)


async def _resolve(headers: dict[str, str]) -> Optional[SessionUser]:
    request = _request(headers)
    return await get_session_user(request, await bearer_scheme(request))


class TestSessionToken:
    """Tests for token generation and verification."""

    def test_token_carries_camel_case_claims(self):
        token = generate_session_token(_principal(), SECRET)

        claims = jwt.decode(token, SECRET, algorithms=[JWT_ALGORITHM])

        assert claims == {"userId": "u1", "role": "HOD", "departmentId": "d1"}

    def test_valid_token_yields_principal(self):
        token = generate_session_token(_principal(), SECRET)

        principal = verify_session_token(token, SECRET)

        assert principal == _principal()
        assert principal.has_role(UserRole.HOD)

    def test_wrong_secret_is_rejected(self):
        token = generate_session_token(_principal(), "another-secret-key-for-hs256-0002")

        assert verify_session_token(token, SECRET) is None

    def test_tampered_claims_are_rejected(self):
        header, _, signature = generate_session_token(_principal(), SECRET).split(".")
        forged = generate_session_token(
            _principal(role="SBTE_ADMIN"), "attacker-key-long-enough-for-hs256"
        ).split(".")[1]

        assert verify_session_token(f"{header}.{forged}.{signature}", SECRET) is None

    def test_unsigned_token_is_rejected(self):
        token = jwt.encode(
            {"userId": "u1", "role": "SBTE_ADMIN"}, None, algorithm="none"
        )

        assert verify_session_token(token, SECRET) is None

    @pytest.mark.parametrize("token", ["", "no-dots", "a.b", "a.b.c"])
    def test_malformed_token_is_rejected(self, token):
        assert verify_session_token(token, SECRET) is None

    def test_signed_claims_without_user_id_are_rejected(self):
        token = jwt.encode({"role": "HOD"}, SECRET, algorithm=JWT_ALGORITHM)

        assert verify_session_token(token, SECRET) is None

    def test_expired_token_is_rejected(self):
        token = generate_session_token(
            _principal(), SECRET, expires_in=timedelta(seconds=-1)
        )

        assert verify_session_token(token, SECRET) is None

    def test_unexpired_token_is_accepted(self):
        token = generate_session_token(
            _principal(), SECRET, expires_in=timedelta(hours=1)
        )

        assert verify_session_token(token, SECRET) == _principal()

    def test_unknown_role_parses_but_matches_nothing(self):
        token = generate_session_token(_principal(role="PRINCIPAL"), SECRET)

        principal = verify_session_token(token, SECRET)

        assert principal is not None
        assert not any(principal.has_role(role) for role in UserRole)


class TestExtractSessionToken:
    """Tests for reading tokens from requests."""

    @pytest.mark.asyncio
    async def test_bearer_header(self):
        request = _request({"Authorization": "Bearer abc.def.ghi"})

        token = extract_session_token(request, await bearer_scheme(request))

        assert token == "abc.def.ghi"

    @pytest.mark.asyncio
    async def test_cookie(self):
        request = _request({"Cookie": f"{COOKIE_NAME}=abc.def.ghi"})

        token = extract_session_token(request, await bearer_scheme(request))

        assert token == "abc.def.ghi"

    @pytest.mark.asyncio
    async def test_header_wins_over_cookie(self):
        request = _request(
            {"Authorization": "Bearer from-header", "Cookie": f"{COOKIE_NAME}=c"}
        )

        token = extract_session_token(request, await bearer_scheme(request))

        assert token == "from-header"

    @pytest.mark.asyncio
    async def test_non_bearer_authorization_is_ignored(self):
        request = _request({"Authorization": "Basic dXNlcjpwYXNz"})

        assert await bearer_scheme(request) is None
        assert extract_session_token(request, None) is None


class TestGetSessionUser:
    """Tests for the FastAPI session dependency."""

    @pytest.mark.asyncio
    async def test_anonymous_request(self):
        assert await _resolve({}) is None

    @pytest.mark.asyncio
    async def test_valid_bearer_token(self, settings):
        token = generate_session_token(_principal(), settings.SECRET_KEY)

        principal = await _resolve({"Authorization": f"Bearer {token}"})

        assert principal is not None
        assert principal.department_id == "d1"

    @pytest.mark.asyncio
    async def test_valid_cookie(self, settings):
        token = generate_session_token(_principal(), settings.SECRET_KEY)

        principal = await _resolve({"Cookie": f"{COOKIE_NAME}={token}"})

        assert principal == _principal()

    @pytest.mark.asyncio
    async def test_invalid_token(self):
        assert await _resolve({"Authorization": "Bearer abc.def.ghi"}) is None
