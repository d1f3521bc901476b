"""User profile settings service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fithood.domain.entries import UserProfile


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile, if any."""

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Create or replace the stored profile."""


@dataclass
class ProfileService:
    """Service for profile settings."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> UserProfile:
        """Return the user's profile or the defaults when unset."""
        return self.repository.get_profile(user_id) or UserProfile()

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Persist the user's profile."""
        self.repository.save_profile(user_id, profile)

    def is_profile_set(self, user_id: UUID) -> bool:
        """Return True when the user saved a profile."""
        return self.repository.get_profile(user_id) is not None
