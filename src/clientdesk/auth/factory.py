"""Factory for creating the auth adapter from configuration."""

from __future__ import annotations

from ..config import Settings, settings
from .adapters.base import AuthAdapter
from .adapters.jwt import JWTAuthAdapter


def get_auth_adapter(config: Settings | None = None) -> AuthAdapter:
    """Create and return the configured auth adapter."""
    config = config or settings

    if not config.jwt_secret:
        raise ValueError("JWT secret key is required. Set CLIENTDESK_JWT_SECRET.")

    return JWTAuthAdapter(
        secret_key=config.jwt_secret,
        algorithm=config.jwt_algorithm,
        issuer=config.jwt_issuer,
        audience=config.jwt_audience,
        role_claim=config.jwt_role_claim,
    )
