"""
CLI interface module for tubesearch.

Provides a Typer-based command-line interface for running searches and
managing the local result cache.
"""

from __future__ import annotations

__all__: list[str] = []
