"""
Configuration management module for tubesearch.

Handles application settings, environment variables and the InnerTube
client context.
"""

from __future__ import annotations

from tubesearch.config.settings import Settings, get_settings, settings

__all__ = ["Settings", "get_settings", "settings"]
