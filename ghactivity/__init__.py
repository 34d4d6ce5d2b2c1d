"""Fetch a GitHub user's recent public activity and render it as text."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
