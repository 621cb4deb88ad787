"""
Tests for the campus-match command line.
"""

import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from matcher.main import cli, format_match
from shared.errors import NotFound
from shared.models import MatchResult, Profile


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("matcher.main.setup_logging"):
        yield


@pytest.fixture
def sample_match():
    profile = Profile(id="u2", name="Alex Chen", major="Computer Science", year="Junior")
    return MatchResult.from_profile(profile, 87.5, ["AI", "Python"])


class TestMatchCommand:

    def test_prints_matches(self, runner, sample_match):
        with patch("matcher.main.run_match", AsyncMock(return_value=[sample_match])) as run:
            result = runner.invoke(cli, ["match", "u1", "--intent", "hackathon teammates"])

        assert result.exit_code == 0
        run.assert_awaited_once_with("u1", "hackathon teammates")
        assert "Found 1 matches" in result.output
        assert "Alex Chen" in result.output
        assert "score=87.5" in result.output

    def test_json_output(self, runner, sample_match):
        with patch("matcher.main.run_match", AsyncMock(return_value=[sample_match])):
            result = runner.invoke(cli, ["match", "u1", "--json"])

        assert result.exit_code == 0
        body = json.loads(result.output)
        assert body["matches"][0]["matchScore"] == 87.5
        assert body["matches"][0]["commonTags"] == ["AI", "Python"]

    def test_no_matches(self, runner):
        with patch("matcher.main.run_match", AsyncMock(return_value=[])):
            result = runner.invoke(cli, ["match", "u1"])

        assert result.exit_code == 0
        assert "No matches found." in result.output

    def test_match_error(self, runner):
        with patch("matcher.main.run_match", AsyncMock(side_effect=NotFound("User not found"))):
            result = runner.invoke(cli, ["match", "nobody"])

        assert result.exit_code == 1
        assert "User not found" in result.output


class TestSeedCommand:

    def test_seed(self, runner):
        with patch("matcher.main.run_seed", AsyncMock(return_value=10)):
            result = runner.invoke(cli, ["seed"])

        assert result.exit_code == 0
        assert "Seeded 10 profiles" in result.output


def test_format_match(sample_match):
    line = format_match(1, sample_match)
    assert line == " 1. Alex Chen (Computer Science, Junior) score=87.5 shared=[AI, Python]"
