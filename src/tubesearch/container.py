"""
Dependency Injection Container for tubesearch.

This module wires the search core from application settings:

    settings -> transport -> paginator -+
    settings -> store -> cache ---------+-> search_service

Usage
-----
    >>> from tubesearch.container import container
    >>> results = await container.search_service.search("lofi hip hop")

Design Principles
-----------------
- Services are singletons cached via @cached_property (lazy initialization)
- Stores are created by a factory method so tests can build fresh ones
- Container can be reset for testing isolation
"""

from __future__ import annotations

from functools import cached_property
from typing import Optional

from tubesearch.config.settings import Settings, get_settings
from tubesearch.services.cache import FileStore, LRUCache, MemoryStore
from tubesearch.services.interfaces import KeyValueStoreInterface, TransportInterface
from tubesearch.services.paginator import SearchPaginator
from tubesearch.services.search_service import SearchService
from tubesearch.services.transport import InnerTubeTransport


class Container:
    """
    Dependency injection container for tubesearch.

    Parameters
    ----------
    settings : Settings | None, optional
        Settings to build from; read from the environment when omitted.

    Examples
    --------
    >>> container = Container(Settings(use_cache=False))
    >>> container.cache is None
    True
    >>> container.search_service is container.search_service
    True
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings

    @property
    def settings(self) -> Settings:
        """Settings in use, loaded lazily from the environment."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def create_store(self) -> KeyValueStoreInterface:
        """
        Create a new store for the configured cache backend.

        Returns
        -------
        KeyValueStoreInterface
            A ``FileStore`` under ``cache_dir / "search"`` for the ``file``
            backend, otherwise a ``MemoryStore``.
        """
        if self.settings.cache_backend == "file":
            return FileStore(root=self.settings.cache_dir / "search")
        return MemoryStore()

    @cached_property
    def transport(self) -> TransportInterface:
        """Singleton InnerTube transport."""
        return InnerTubeTransport(
            proxy_url=self.settings.proxy_url,
            timeout=self.settings.request_timeout,
        )

    @cached_property
    def cache(self) -> Optional[LRUCache]:
        """Singleton result cache, or None when caching is disabled."""
        if not self.settings.use_cache:
            return None
        return LRUCache(
            store=self.create_store(),
            namespace=self.settings.cache_namespace,
            max_age=self.settings.cache_max_age_seconds,
            capacity=self.settings.cache_capacity,
        )

    @cached_property
    def paginator(self) -> SearchPaginator:
        """Singleton paginator bound to the transport."""
        return SearchPaginator(
            transport=self.transport,
            api_key=self.settings.api_key,
            client_context=self.settings.client_context,
            max_attempts=self.settings.max_continuation_attempts,
        )

    @cached_property
    def search_service(self) -> SearchService:
        """Singleton search service."""
        return SearchService(
            paginator=self.paginator,
            cache=self.cache,
            default_limit=self.settings.default_limit,
        )

    def reset(self) -> None:
        """
        Clear all cached singleton instances.

        Primarily for tests, which may assign fakes to the cached
        attributes and then restore a clean container.
        """
        properties_to_clear = ["transport", "cache", "paginator", "search_service"]
        for prop in properties_to_clear:
            self.__dict__.pop(prop, None)


# Global container instance
container = Container()
