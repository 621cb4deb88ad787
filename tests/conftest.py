"""
Pytest fixtures shared across the test suite.
"""

import pytest

from tests.helpers import InMemoryStore, make_profile


@pytest.fixture
def requester():
    """CS student interested in AI and hackathons."""
    return make_profile(
        "req",
        name="Requester",
        major="Computer Science",
        year="Junior",
        tags=["AI", "Hackathon"],
    )


@pytest.fixture
def candidate_a():
    """Shares both of the requester's tags and the major."""
    return make_profile(
        "a",
        name="Candidate A",
        major="Computer Science",
        year="Senior",
        tags=["AI", "Hackathon", "Python"],
    )


@pytest.fixture
def candidate_b():
    """Nothing in common with the requester."""
    return make_profile(
        "b",
        name="Candidate B",
        major="Biology",
        year="Senior",
        tags=["Gym"],
    )


@pytest.fixture
def store(requester, candidate_a, candidate_b):
    return InMemoryStore([requester, candidate_a, candidate_b])
