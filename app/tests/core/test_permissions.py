"""Tests for the role-based permissions."""
from types import SimpleNamespace
import pytest
from fastapi import HTTPException

from app.core.permissions import has_permission


def _author(author_id: int, *roles: str):
    return SimpleNamespace(id=author_id, role_names=list(roles))


ADMIN = _author(1, "admin", "user")
ALICE = _author(2, "user")
BOB = _author(3, "user")


@pytest.mark.parametrize("author, resource, action, data, expected", [
    (ADMIN, "heading", "create", None, True),
    (ADMIN, "announcement", "purge", None, True),
    (ADMIN, "author", "delete", BOB, True),
    (ADMIN, "suitable_ad", "delete", SimpleNamespace(author_id=BOB.id), True),
    (ALICE, "heading", "create", None, False),
    (ALICE, "announcement", "purge", None, False),
    (ALICE, "announcement", "create", None, True),
    (ALICE, "announcement", "update", SimpleNamespace(author_id=ALICE.id), True),
    (ALICE, "announcement", "delete", SimpleNamespace(author_id=BOB.id), False),
    (ALICE, "author", "update", ALICE, True),
    (ALICE, "author", "update", BOB, False),
    (ALICE, "author", "update", None, False),
    (ALICE, "suitable_ad", "delete", SimpleNamespace(author_id=ALICE.id), True),
    (_author(4), "announcement", "create", None, False),
    (_author(5, "unknown"), "announcement", "create", None, False),
])
def test_has_permission(author, resource, action, data, expected):
    """Check the permission table for the admins and the regular authors."""
    assert has_permission(author, resource, action, data, raise_error=False) is expected


def test_has_permission_raises_forbidden():
    """A refused permission raises a 403 by default."""
    with pytest.raises(HTTPException) as exc_info:
        has_permission(ALICE, "heading", "delete")
    assert exc_info.value.status_code == 403
