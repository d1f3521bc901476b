"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fithood.domain.entries import UserProfile
from fithood.services.profile import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for user profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile, if any."""
        response = (
            self.client.table("user_profiles")
            .select("height, age, gender, activity_level, goal_weight, weekly_goal")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        defaults = UserProfile()
        goal_weight = row.get("goal_weight")
        weekly_goal = row.get("weekly_goal")
        return UserProfile(
            height=float(row.get("height") or defaults.height),
            age=int(row.get("age") or defaults.age),
            gender=row.get("gender") or defaults.gender,
            activity_level=row.get("activity_level") or defaults.activity_level,
            goal_weight=float(goal_weight) if goal_weight is not None else None,
            weekly_goal=float(weekly_goal) if weekly_goal is not None else None,
        )

    def save_profile(self, user_id: UUID, profile: UserProfile) -> None:
        """Create or replace the stored profile."""
        self.client.table("user_profiles").upsert(
            {
                "user_id": str(user_id),
                "height": profile.height,
                "age": profile.age,
                "gender": profile.gender,
                "activity_level": profile.activity_level,
                "goal_weight": profile.goal_weight,
                "weekly_goal": profile.weekly_goal,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
