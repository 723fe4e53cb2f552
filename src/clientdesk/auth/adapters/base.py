"""Base authentication adapter interface and types."""

from __future__ import annotations

from typing import Literal, NotRequired, Protocol, TypedDict


class Principal(TypedDict):
    """Identity extracted from an incoming token."""

    provider: Literal["jwt"]
    subject: str  # token subject (sub)
    role: NotRequired[str]
    email: NotRequired[str]
    claims: NotRequired[dict]


class AuthAdapter(Protocol):
    """Provider-agnostic authentication adapter interface."""

    async def verify_token(self, token: str) -> Principal:
        """
        Verify a token and return the principal identity.

        Args:
            token: The authentication token to verify

        Returns:
            Principal containing identity information

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        ...

    async def issue_token(
        self, subject: str, role: str | None = None, claims: dict | None = None
    ) -> str:
        """
        Issue a new token.

        Args:
            subject: Subject to put in the `sub` claim
            role: Role to put in the role claim
            claims: Optional additional claims to include

        Returns:
            Signed token string
        """
        ...


class AuthenticationError(Exception):
    """Raised when authentication fails."""

    pass
