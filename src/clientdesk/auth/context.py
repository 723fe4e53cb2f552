"""Authenticated user for request handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .adapters.base import Principal


@dataclass(frozen=True)
class AuthUser:
    """The caller a verified token identifies."""

    subject: str
    role: str | None = None
    claims: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_principal(cls, principal: Principal) -> AuthUser:
        return cls(
            subject=principal["subject"],
            role=principal.get("role"),
            claims=dict(principal.get("claims", {})),
        )

    def has_role(self, role: str) -> bool:
        return self.role == role
