"""Filtering, lookup and statistics over draw snapshots."""

from .engine import QueryEngine

__all__ = ["QueryEngine"]
