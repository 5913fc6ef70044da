"""Utility helpers for idshuffle."""

from .logging import configure_logging

__all__ = ["configure_logging"]
