"""User domain entity — account data, role, lifecycle state and API key."""

import hashlib
import secrets
import string
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import TYPE_CHECKING

from shop_api.domain.exceptions import InvalidArgumentError

from .change_tracked import ChangeTracked

if TYPE_CHECKING:
    from shop_api.application.interfaces.password_hasher import PasswordHasher

ROLE_ADMIN = "admin"
ROLE_USER = "user"
ROLES = (ROLE_ADMIN, ROLE_USER)

APIKEY_LENGTH = 100
_APIKEY_ALPHABET = string.digits + string.ascii_lowercase


class UserState(IntEnum):
    """Account lifecycle states, stored as integers."""

    FRESH = 1
    ACTIVATED = 2
    BLOCKED = 3


def generate_apikey(length: int = APIKEY_LENGTH) -> str:
    return "".join(secrets.choice(_APIKEY_ALPHABET) for _ in range(length))


@dataclass
class User(ChangeTracked):
    """Core domain entity for an API user.

    ``password_hash`` always holds the output of a PasswordHasher; plaintext
    passwords only ever pass through ``change_password``.
    """

    name: str
    surname: str
    email: str
    username: str
    password_hash: str
    id: int | None = None
    role: str = ROLE_USER
    state: UserState = UserState.FRESH
    apikey: str = field(default_factory=generate_apikey, repr=False)
    last_logged_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # ── Read helpers ─────────────────────────────────────────────────

    @property
    def fullname(self) -> str:
        return f"{self.name} {self.surname}"

    @property
    def gravatar(self) -> str:
        digest = hashlib.md5(self.email.encode("utf-8")).hexdigest()
        return f"https://www.gravatar.com/avatar/{digest}"

    @property
    def is_activated(self) -> bool:
        return self.state == UserState.ACTIVATED

    def password_matches(self, plaintext: str, hasher: "PasswordHasher") -> bool:
        return hasher.verify(plaintext, self.password_hash)

    # ── Mutators ─────────────────────────────────────────────────────

    def set_name(self, name: str) -> None:
        self.name = name
        self._mark_changed("name")

    def set_surname(self, surname: str) -> None:
        self.surname = surname
        self._mark_changed("surname")

    def set_email(self, email: str) -> None:
        self.email = email
        self._mark_changed("email")

    def set_username(self, username: str) -> None:
        self.username = username
        self._mark_changed("username")

    def change_password(self, plaintext: str, hasher: "PasswordHasher") -> None:
        """Hash ``plaintext`` and store only the hash."""
        self.password_hash = hasher.hash(plaintext)
        self._mark_changed("password")

    def set_role(self, role: str) -> None:
        self.role = role
        self._mark_changed("role")

    def set_apikey(self, apikey: str) -> None:
        self.apikey = apikey
        self._mark_changed("apikey")

    def set_state(self, state: int) -> None:
        """Move the account to ``state``.

        Raises:
            InvalidArgumentError: if ``state`` is not a UserState value.
        """
        if isinstance(state, bool) or not isinstance(state, int):
            raise InvalidArgumentError(f"Unsupported state {state!r}")
        try:
            new_state = UserState(state)
        except ValueError:
            raise InvalidArgumentError(f"Unsupported state {state}") from None
        self.state = new_state
        self._mark_changed("state")

    def block(self) -> None:
        self.set_state(UserState.BLOCKED)

    def activate(self) -> None:
        self.set_state(UserState.ACTIVATED)

    def change_logged_at(self) -> None:
        self.last_logged_at = datetime.now(timezone.utc)
