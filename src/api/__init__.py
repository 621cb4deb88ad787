"""
API Service - HTTP surface for matching.
"""

from .app import app

__all__ = ["app"]
