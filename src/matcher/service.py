"""
Match service: resolves profiles from the store and ranks them.
"""

from typing import Optional, Protocol

from loguru import logger

from shared.errors import InvalidRequest, NotFound, UpstreamFailure
from shared.models import MatchResult, Profile

from .intent import IntentAnalyzer
from .ranker import rank


class ProfileStore(Protocol):
    """Read side of the profile store used for matching."""

    async def get_profile(self, profile_id: str) -> Optional[Profile]: ...

    async def list_other_profiles(self, exclude_id: str) -> list[Profile]: ...


def require_user_id(user_id: Optional[str]) -> str:
    """Return the user ID, or raise InvalidRequest if it is missing or blank."""
    if not user_id or not user_id.strip():
        raise InvalidRequest("userId is required")
    return user_id


async def find_matches(
    store: ProfileStore,
    user_id: Optional[str],
    user_intent: Optional[str] = None,
    analyzer: Optional[IntentAnalyzer] = None,
) -> list[MatchResult]:
    """
    Find matches for a user.

    Raises:
        InvalidRequest: user_id is missing
        NotFound: the requester profile cannot be resolved
        UpstreamFailure: candidate profiles could not be listed
    """
    user_id = require_user_id(user_id)

    try:
        requester = await store.get_profile(user_id)
    except Exception as e:
        logger.error(f"Error fetching current user {user_id}: {e}")
        raise NotFound("User not found") from e

    if requester is None:
        logger.warning(f"User not found: {user_id}")
        raise NotFound("User not found")

    try:
        candidates = await store.list_other_profiles(user_id)
    except Exception as e:
        logger.error(f"Error fetching other users: {e}")
        raise UpstreamFailure("Failed to fetch users") from e

    if not candidates:
        logger.info(f"No other users to match for user {user_id}")
        return []

    matches = rank(requester, candidates, user_intent, analyzer=analyzer)

    intent_note = f' with intent: "{user_intent}"' if user_intent else ""
    logger.info(f"Found {len(matches)} matches for user {user_id}{intent_note}")
    return matches
