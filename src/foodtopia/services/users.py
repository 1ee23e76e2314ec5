"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from foodtopia.domain.errors import UsernameTakenError
from foodtopia.domain.models import Goals, NewUser, UserRecord

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id, if present."""

    def get_user_by_username(self, username: str) -> UserRecord | None:
        """Return the user with a username, if present."""

    def create_user(self, payload: NewUser) -> UserRecord:
        """Create and return a new user record."""

    def update_user_goals(self, user_id: int, goals: Goals) -> UserRecord | None:
        """Replace a user's goals and return the updated record."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def register(self, payload: NewUser) -> UserRecord:
        """Create a user, rejecting duplicate usernames."""
        if self.repository.get_user_by_username(payload.username) is not None:
            raise UsernameTakenError(payload.username)
        user = self.repository.create_user(payload)
        _logger.info("User registered: id=%s", user.id)
        return user

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return a user by id."""
        return self.repository.get_user(user_id)

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return a user by username."""
        return self.repository.get_user_by_username(username)

    def update_goals(self, user_id: int, goals: Goals) -> UserRecord | None:
        """Persist new daily goals for a user."""
        return self.repository.update_user_goals(user_id, goals)
