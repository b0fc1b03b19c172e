"""
tubesearch - typed search client for YouTube's InnerTube API.

Issues search queries against the undocumented InnerTube ``search``
endpoint, turns its nested JSON payload into typed result records and
keeps recent result sets in a bounded local cache.
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "tubesearch"
__email__ = "noreply@tubesearch.dev"
__license__ = "MIT"

__all__ = ["__version__", "__author__", "__email__", "__license__"]
