"""
console_auth.auth.models

Console identity models.

Responsibilities:
- Define the normalized user record (`ConsoleUser`) returned by session lookups.
- Normalize the `user` object of a session payload into that record.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

ADMIN_ROLES = frozenset({"admin", "administrator"})


class InvalidSessionUser(ValueError):
    """The session payload has a `user` entry that cannot form a complete record."""


@dataclass(frozen=True, slots=True)
class ConsoleUser:
    """
    Authenticated console user as reported by the session endpoint.
    """

    uuid: str
    email: str
    roles: tuple[str, ...]
    is_admin: bool

    @classmethod
    def from_session_user(cls, user: Any) -> ConsoleUser:
        if not isinstance(user, Mapping):
            raise InvalidSessionUser(f"user must be an object, got {type(user).__name__}")

        # `uuid` wins; legacy sessions only carry `id`.
        identifier = user.get("uuid") or user.get("id")
        if not identifier:
            raise InvalidSessionUser("user has neither uuid nor id")

        email = user.get("email")
        if email is None:
            raise InvalidSessionUser("user has no email")

        role = user.get("role")
        # Role match is case-sensitive; a truthy isAdmin flag also grants admin.
        is_admin = (isinstance(role, str) and role in ADMIN_ROLES) or bool(user.get("isAdmin"))

        return cls(
            uuid=str(identifier),
            email=str(email),
            roles=(str(role),) if role else (),
            is_admin=is_admin,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "email": self.email,
            "roles": list(self.roles),
            "isAdmin": self.is_admin,
        }


# --- Module Notes -----------------------------------------------------------
# `to_dict` keeps the camelCase keys the console front-end already consumes.
