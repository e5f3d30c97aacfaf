"""User accounts and password checking."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Optional

from vbbs import log
from vbbs.sha1 import sha1

MAX_USERNAME_LENGTH = 20
MAX_EMAIL_LENGTH = 40
MIN_PASSWORD_LENGTH = 8


class UserType(enum.IntEnum):
    """Privilege level of an account."""

    REGULAR = 0
    ADMIN = 1


class PasswordTooShortError(ValueError):
    """Raised when a new password is shorter than the minimum length."""


def hash_password(password: str) -> str:
    """Return the upper-case hexadecimal SHA-1 of the UTF-8 password."""
    return sha1(password.encode("utf-8")).hex().upper()


@dataclass
class User:
    """A registered account."""

    user_id: int = 0
    username: str = ""
    pw_hash: str = ""
    email: str = ""
    user_type: UserType = UserType.REGULAR
    last_seen: int = 0

    def copy(self) -> "User":
        """Return an independent copy of this user."""
        return dataclasses.replace(self)

    def authenticate(self, username: Optional[str], password: Optional[str]) -> bool:
        """True when username matches and password hashes to the stored hash."""
        log.debug("Authenticating user: '%s'", username)
        if username is None or password is None:
            return False
        hashed = hash_password(password)
        log.debug("Hash: %s", hashed)
        return self.username == username and self.pw_hash == hashed

    def change_password(self, new_password: str) -> None:
        """Store the hash of a new password of at least eight bytes."""
        if len(new_password.encode("utf-8")) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
            )
        self.pw_hash = hash_password(new_password)
        log.info("Password changed successfully.")