"""
tests.test_models

Normalization of session `user` objects into `ConsoleUser`.
"""

from __future__ import annotations

import pytest

from console_auth.auth.models import ConsoleUser, InvalidSessionUser


def test_id_is_used_when_uuid_missing() -> None:
    user = ConsoleUser.from_session_user({"id": "u1", "email": "a@b.com", "role": "admin"})
    assert user == ConsoleUser(uuid="u1", email="a@b.com", roles=("admin",), is_admin=True)


def test_uuid_preferred_over_id() -> None:
    user = ConsoleUser.from_session_user(
        {"uuid": "u2", "id": "legacy", "email": "c@d.com", "role": "operator"}
    )
    assert user == ConsoleUser(uuid="u2", email="c@d.com", roles=("operator",), is_admin=False)


def test_empty_uuid_falls_back_to_id() -> None:
    user = ConsoleUser.from_session_user({"uuid": "", "id": 42, "email": "x@y.z"})
    assert user.uuid == "42"


@pytest.mark.parametrize("role", ["admin", "administrator"])
def test_admin_roles(role: str) -> None:
    user = ConsoleUser.from_session_user({"uuid": "u", "email": "e", "role": role})
    assert user.is_admin is True
    assert user.roles == (role,)


@pytest.mark.parametrize("role", ["Admin", "ADMINISTRATOR", "admins", "operator"])
def test_admin_role_match_is_case_sensitive(role: str) -> None:
    user = ConsoleUser.from_session_user({"uuid": "u", "email": "e", "role": role})
    assert user.is_admin is False


def test_admin_flag_grants_admin_with_unrecognized_role() -> None:
    user = ConsoleUser.from_session_user(
        {"uuid": "u", "email": "e", "role": "viewer", "isAdmin": True}
    )
    assert user.is_admin is True
    assert user.roles == ("viewer",)


def test_no_role_and_no_flag() -> None:
    user = ConsoleUser.from_session_user({"uuid": "u", "email": "e", "isAdmin": False})
    assert user.is_admin is False
    assert user.roles == ()


def test_email_is_not_validated() -> None:
    user = ConsoleUser.from_session_user({"uuid": "u", "email": "not-an-email"})
    assert user.email == "not-an-email"


@pytest.mark.parametrize(
    "payload",
    [
        "alice",
        ["u1"],
        {"email": "a@b.com"},
        {"uuid": "", "id": None, "email": "a@b.com"},
        {"uuid": "u1"},
    ],
)
def test_incomplete_user_is_rejected(payload: object) -> None:
    with pytest.raises(InvalidSessionUser):
        ConsoleUser.from_session_user(payload)


def test_user_is_immutable() -> None:
    user = ConsoleUser(uuid="u", email="e", roles=(), is_admin=False)
    with pytest.raises(AttributeError):
        user.is_admin = True  # type: ignore[misc]


def test_to_dict_uses_wire_keys() -> None:
    user = ConsoleUser(uuid="u1", email="a@b.com", roles=("admin",), is_admin=True)
    assert user.to_dict() == {
        "uuid": "u1",
        "email": "a@b.com",
        "roles": ["admin"],
        "isAdmin": True,
    }
