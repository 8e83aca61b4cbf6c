"""Port for authorising callers before a sync run starts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Principal:
    email: str
    role: str


@dataclass(frozen=True, slots=True)
class AuthResult:
    authorized: bool
    principal: Principal | None = None
    reason: str | None = None

    @classmethod
    def granted(cls, principal: Principal) -> AuthResult:
        return cls(authorized=True, principal=principal)

    @classmethod
    def denied(cls, reason: str) -> AuthResult:
        return cls(authorized=False, reason=reason)


@runtime_checkable
class Authorizer(Protocol):
    """Verify request credentials (an ``Authorization`` header value)."""

    def verify(self, authorization: str | None) -> AuthResult: ...
