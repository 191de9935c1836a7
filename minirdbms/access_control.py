"""Users, roles and password authentication."""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    """Permission level of a user."""

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"


@dataclass
class User:
    """An account with a password and a role."""

    username: str = ""
    password: str = ""
    role: Role = Role.GUEST

    def check_password(self, password: str) -> bool:
        """Return whether ``password`` matches this user's password."""
        return hmac.compare_digest(password.encode(), self.password.encode())


class AccessControl:
    """A registry of users that authenticates logins."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def add_user(self, username: str, password: str, role: Role) -> bool:
        """Register a user; return False if the name is already taken."""
        if username in self._users:
            return False
        self._users[username] = User(username, password, role)
        return True

    def authenticate(self, username: str, password: str) -> bool:
        """Return whether the user exists and the password is right."""
        user = self._users.get(username)
        return user is not None and user.check_password(password)

    def user_role(self, username: str) -> Role:
        """Return the user's role, or GUEST for unknown users."""
        user = self._users.get(username)
        return user.role if user is not None else Role.GUEST