"""Utility modules for tubesearch."""

from tubesearch.utils.accessors import dig, dig_list

__all__ = ["dig", "dig_list"]
