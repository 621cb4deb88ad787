"""
Error types raised while resolving a match request.
"""


class MatchError(Exception):
    """Base error for match requests. Carries the HTTP status to report."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(MatchError):
    """A required request field is missing."""

    status_code = 400


class NotFound(MatchError):
    """The requester profile could not be resolved."""

    status_code = 404


class UpstreamFailure(MatchError):
    """The profile store failed while listing candidates."""

    status_code = 500
