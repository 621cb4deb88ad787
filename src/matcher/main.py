"""
Matcher Service - Main entry point.
Runs a match for a user against the profile store, or seeds demo profiles.

Usage:
    # Match a user with an intent
    campus-match match seed-alex-chen --intent "looking for hackathon teammates"

    # Seed the sample profiles
    campus-match seed
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import click
from loguru import logger

from shared.config import get_settings
from shared.database import Database
from shared.errors import MatchError
from shared.log import setup_logging
from shared.models import MatchResult

from .fixtures import seed_profiles
from .intent import IntentAnalyzer
from .service import find_matches


async def run_match(user_id: str, intent: Optional[str]) -> list[MatchResult]:
    """Connect to the store and rank matches for one user."""
    settings = get_settings()

    db = Database()
    await db.connect()

    analyzer = IntentAnalyzer(rules_path=settings.intent_rules_path)

    try:
        return await find_matches(db, user_id, intent, analyzer=analyzer)
    finally:
        await db.disconnect()


async def run_seed() -> int:
    """Connect to the store and upsert the sample profiles."""
    db = Database()
    await db.connect()

    try:
        await db.ensure_indexes()
        return await seed_profiles(db)
    finally:
        await db.disconnect()


def format_match(position: int, match: MatchResult) -> str:
    """One-line summary of a match for terminal output."""
    shared = ", ".join(match.common_tags) or "-"
    return (
        f"{position:>2}. {match.name or match.id} ({match.major}, {match.year}) "
        f"score={match.match_score:.1f} shared=[{shared}]"
    )


@click.group()
def cli():
    """Campus Match - find compatible students."""
    setup_logging()


@cli.command()
@click.argument("user_id")
@click.option(
    "--intent",
    "-i",
    default=None,
    help='What the user is looking for, e.g. "hackathon teammates"',
)
@click.option(
    "--limit",
    "-l",
    type=int,
    default=10,
    help="Maximum matches to print",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the full match list as JSON",
)
def match(user_id: str, intent: Optional[str], limit: int, as_json: bool):
    """Rank other users for USER_ID."""
    try:
        matches = asyncio.run(run_match(user_id, intent))
    except MatchError as e:
        logger.error(f"Match failed: {e.message}")
        raise click.ClickException(e.message) from e

    if as_json:
        click.echo(json.dumps({"matches": [m.to_response() for m in matches]}, indent=2))
        return

    if not matches:
        click.echo("No matches found.")
        return

    click.echo(f"Found {len(matches)} matches")
    for position, result in enumerate(matches[:limit], start=1):
        click.echo(format_match(position, result))


@cli.command()
def seed():
    """Upsert the sample student profiles."""
    count = asyncio.run(run_seed())
    click.echo(f"Seeded {count} profiles")


if __name__ == "__main__":
    cli()
