# Shared module for common utilities, models, and configuration
from .config import Settings, get_settings
from .database import Database, close_database, get_database
from .errors import InvalidRequest, MatchError, NotFound, UpstreamFailure
from .models import MatchRequest, MatchResponse, MatchResult, Profile

__all__ = [
    "Settings",
    "get_settings",
    "Database",
    "get_database",
    "close_database",
    "MatchError",
    "InvalidRequest",
    "NotFound",
    "UpstreamFailure",
    "Profile",
    "MatchResult",
    "MatchRequest",
    "MatchResponse",
]
