"""
Module to handle permissions for the API.

The permissions are defined as a dictionary with the role name as the key,
then the resource, then the action. The value is either a boolean or a
function taking the author making the request and the targeted object,
returning whether the action is allowed.

The roles are:

- admin: the administrator role.
- user: the role every registered author gets.
"""
from typing import Callable, Literal, Union

from fastapi import HTTPException

from app.db_objects.db_models import Announcement, Author, SuitableAd

# ----- PERMISSIONS ----- #
AuthorRole = Literal["user", "admin"]

PermissionCheck = Union[bool, Callable[[
    Author, Union[Author, Announcement, SuitableAd]], bool]]

RolesWithPermissions = dict[
    AuthorRole,
    dict[str, dict[str, PermissionCheck]]
]

ROLES: RolesWithPermissions = {
    "admin": {
        "author": {
            "update": True,
            "delete": True,
        },
        "announcement": {
            "create": True,
            "update": True,
            "delete": True,
            "purge": True,
        },
        "heading": {
            "create": True,
            "update": True,
            "delete": True,
        },
        "suitable_ad": {
            "create": True,
            "delete": True,
        },
    },
    "user": {
        "author": {
            "update": lambda author, other_author: author.id == other_author.id,
            "delete": lambda author, other_author: author.id == other_author.id,
        },
        "announcement": {
            "create": True,
            "update": lambda author, announcement: author.id == announcement.author_id,
            "delete": lambda author, announcement: author.id == announcement.author_id,
        },
        "suitable_ad": {
            "create": True,
            "delete": lambda author, suitable_ad: author.id == suitable_ad.author_id,
        },
    },
}


def has_permission(author: Author, resource: str, action: str, data=None, raise_error: bool = True) -> bool:
    """
    Checks if an author has permission to perform an action on a resource.

    :param Author author: The author to check the permission for.
    :param str resource: The resource to check the permission for.
    :param str action: The action to check the permission for.
    :param object data: The data to pass to the permission function.
    :param bool raise_error: Whether to raise a 403 instead of returning False.
    :return bool: True if the author has permission, False otherwise.

    Notes
    -----
    The function checks the permission for each role the author has, the
    next role being checked if the previous one does not grant the access.
    """
    for role in author.role_names:
        permission = ROLES.get(role, {}).get(resource, {}).get(action)
        if permission is None:
            continue
        has_access = False
        if isinstance(permission, bool):
            has_access = permission
        elif callable(permission) and data is not None:
            has_access = permission(author, data)
        if has_access:
            return has_access
    if raise_error:
        raise HTTPException(status_code=403, detail="Forbidden")
    return False
