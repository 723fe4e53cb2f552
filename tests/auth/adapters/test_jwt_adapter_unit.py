"""Unit tests for JWT authentication adapter."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from clientdesk.auth.adapters.base import AuthenticationError
from clientdesk.auth.adapters.jwt import JWTAuthAdapter


@pytest.fixture
def secret_key():
    return "test-secret-key-for-testing-only"


@pytest.fixture
def jwt_adapter(secret_key):
    return JWTAuthAdapter(
        secret_key=secret_key,
        algorithm="HS256",
        issuer="test-clientdesk",
        audience="test-api",
    )


@pytest.fixture
def valid_token(secret_key):
    now = datetime.now(UTC)
    payload = {
        "iss": "test-clientdesk",
        "aud": "test-api",
        "sub": "test-user-123",
        "email": "test@example.com",
        "role": "admin",
        "iat": now,
        "nbf": now,
        "exp": now + timedelta(hours=1),
    }
    return jwt.encode(payload, secret_key, algorithm="HS256")


class TestJWTAdapter:
    """Test JWT authentication adapter."""

    @pytest.mark.asyncio
    async def test_verify_valid_token(self, jwt_adapter, valid_token):
        principal = await jwt_adapter.verify_token(valid_token)

        assert principal["provider"] == "jwt"
        assert principal["subject"] == "test-user-123"
        assert principal["email"] == "test@example.com"
        assert principal["role"] == "admin"
        assert principal["claims"]["sub"] == "test-user-123"

    @pytest.mark.asyncio
    async def test_verify_expired_token(self, jwt_adapter, secret_key):
        past_time = datetime.now(UTC) - timedelta(hours=2)
        payload = {
            "iss": "test-clientdesk",
            "aud": "test-api",
            "sub": "test-user-123",
            "exp": past_time + timedelta(minutes=30),
        }
        expired_token = jwt.encode(payload, secret_key, algorithm="HS256")

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token(expired_token)

    @pytest.mark.asyncio
    async def test_verify_wrong_secret(self, jwt_adapter):
        token = jwt.encode(
            {"iss": "test-clientdesk", "aud": "test-api", "sub": "u1"},
            "some-other-secret",
            algorithm="HS256",
        )

        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_verify_wrong_audience(self, jwt_adapter, secret_key):
        token = jwt.encode(
            {"iss": "test-clientdesk", "aud": "another-api", "sub": "u1"},
            secret_key,
            algorithm="HS256",
        )

        with pytest.raises(AuthenticationError):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_verify_missing_subject(self, jwt_adapter, secret_key):
        token = jwt.encode(
            {"iss": "test-clientdesk", "aud": "test-api", "role": "admin"},
            secret_key,
            algorithm="HS256",
        )

        with pytest.raises(AuthenticationError, match="Missing 'sub' claim"):
            await jwt_adapter.verify_token(token)

    @pytest.mark.asyncio
    async def test_verify_malformed_token(self, jwt_adapter):
        with pytest.raises(AuthenticationError, match="Invalid token"):
            await jwt_adapter.verify_token("not-a-jwt")

    @pytest.mark.asyncio
    async def test_token_without_role(self, secret_key):
        adapter = JWTAuthAdapter(secret_key=secret_key)
        token = jwt.encode({"sub": "u1"}, secret_key, algorithm="HS256")

        principal = await adapter.verify_token(token)

        assert "role" not in principal

    @pytest.mark.asyncio
    async def test_custom_role_claim(self, secret_key):
        adapter = JWTAuthAdapter(secret_key=secret_key, role_claim="https://clientdesk/role")
        token = jwt.encode(
            {"sub": "u1", "https://clientdesk/role": "admin", "role": "viewer"},
            secret_key,
            algorithm="HS256",
        )

        principal = await adapter.verify_token(token)

        assert principal["role"] == "admin"

    @pytest.mark.asyncio
    async def test_issue_token(self, jwt_adapter, secret_key):
        token = await jwt_adapter.issue_token("user-42", role="admin", claims={"org": "acme"})

        payload = jwt.decode(
            token,
            secret_key,
            algorithms=["HS256"],
            audience="test-api",
            issuer="test-clientdesk",
        )
        assert payload["sub"] == "user-42"
        assert payload["role"] == "admin"
        assert payload["org"] == "acme"
        assert payload["exp"] > payload["iat"]

    @pytest.mark.asyncio
    async def test_issued_token_verifies(self, jwt_adapter):
        token = await jwt_adapter.issue_token("user-42", role="admin")

        principal = await jwt_adapter.verify_token(token)

        assert principal["subject"] == "user-42"
        assert principal["role"] == "admin"
