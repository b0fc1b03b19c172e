"""
Service interfaces (ABCs) for the tubesearch package.

These abstract base classes define the external collaborators of the
search core, enabling dependency injection, testing with fakes and
swappable implementations.
"""

from .key_value_store_interface import KeyValueStoreInterface
from .transport_interface import TransportInterface

__all__ = [
    "KeyValueStoreInterface",
    "TransportInterface",
]
