"""
Test helpers: profile factory and an in-memory profile store.
"""

from typing import Optional

from shared.models import Profile


class InMemoryStore:
    """Profile store backed by a dict, for service and API tests."""

    def __init__(self, profiles: Optional[list[Profile]] = None):
        self.profiles: dict[str, Profile] = {p.id: p for p in profiles or []}

    async def get_profile(self, profile_id: str) -> Optional[Profile]:
        return self.profiles.get(profile_id)

    async def list_other_profiles(self, exclude_id: str) -> list[Profile]:
        return [p for p in self.profiles.values() if p.id != exclude_id]

    async def upsert_profile(self, profile: Profile) -> bool:
        inserted = profile.id not in self.profiles
        self.profiles[profile.id] = profile
        return inserted


def make_profile(profile_id: str, **fields) -> Profile:
    """Profile with distinct major/year unless given, so no accidental bonuses."""
    fields.setdefault("major", f"major-{profile_id}")
    fields.setdefault("year", f"year-{profile_id}")
    return Profile(id=profile_id, **fields)
