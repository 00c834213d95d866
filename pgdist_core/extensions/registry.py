"""Registry of extension repositories keyed by namespace."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from pgdist_core.registry.errors import RegistrationConflict, RegistryLookupError

from .repository import Repository

logger = logging.getLogger(__name__)

RepositoryFactory = Callable[[], Repository]


class RepositoryNotFound(RegistryLookupError):
    """No repository is registered under the namespace."""


class RepositoryRegistry:
    """Append-only mapping of namespaces to repository factories."""

    def __init__(self) -> None:
        self._factories: dict[str, RepositoryFactory] = {}
        self._lock = threading.Lock()

    def register(self, namespace: str, factory: RepositoryFactory) -> None:
        """Register ``factory``; same factory again is a no-op, another one conflicts."""

        if not namespace:
            raise ValueError("namespace cannot be empty.")
        with self._lock:
            existing = self._factories.get(namespace)
            if existing is not None:
                if existing == factory:
                    logger.debug("repository %s already registered, skipping", namespace)
                    return
                raise RegistrationConflict(f"{namespace} is already registered.")
            self._factories = {**self._factories, namespace: factory}
        logger.debug("registered repository %s", namespace)

    def get(self, namespace: str) -> Repository:
        factory = self._factories.get(namespace)
        if factory is None:
            raise RepositoryNotFound(namespace)
        return factory()

    def namespaces(self) -> tuple[str, ...]:
        """Return registered namespaces in registration order."""

        return tuple(self._factories)


_REPOSITORIES = RepositoryRegistry()


def default_repositories() -> RepositoryRegistry:
    """Return the process-wide repository registry."""

    return _REPOSITORIES
