"""
API Service - Main entry point.
Serves the match endpoint with uvicorn.

Usage:
    campus-match-api --port 8000
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import click
import uvicorn
from loguru import logger

from shared.config import get_settings
from shared.log import setup_logging


@click.command()
@click.option("--host", "-h", default=None, help="Bind address (default from settings)")
@click.option("--port", "-p", type=int, default=None, help="Port (default from settings)")
@click.option("--reload", is_flag=True, help="Reload on code changes (development)")
def main(host: str, port: int, reload: bool):
    """Campus Match API - serve POST /match-users."""
    setup_logging()
    settings = get_settings()

    host = host or settings.api_host
    port = port or settings.api_port

    logger.info(f"Starting API on {host}:{port}")
    uvicorn.run(
        "api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
