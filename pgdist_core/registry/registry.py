"""Append-only registries dispatching URLs to handlers by predicate."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from .entry import Predicate, RegistryEntry
from .errors import (
    CatalogNotFound,
    MatcherNotFound,
    RegistrationConflict,
    RegistryLookupError,
)

if TYPE_CHECKING:
    from pgdist_core.repository import ArchiveRepository

logger = logging.getLogger(__name__)

H = TypeVar("H")

CatalogFactory = Callable[[str], "ArchiveRepository"]
TargetMatcher = Callable[[str], str]


class PredicateRegistry(Generic[H]):
    """Ordered list of ``(predicate, handler)`` pairs.

    Entries are never removed. :meth:`resolve` returns the handler of the
    earliest registered predicate that accepts the URL. Registration is
    expected to finish during startup; readers work on an immutable snapshot
    so they never see a partially appended list.
    """

    not_found: type[RegistryLookupError] = RegistryLookupError

    def __init__(self) -> None:
        self._entries: tuple[RegistryEntry[H], ...] = ()
        self._lock = threading.Lock()

    def register(self, predicate: Predicate, handler: H) -> None:
        """Append an entry.

        Re-registering an equal predicate with the same handler is a no-op;
        with a different handler it raises :class:`RegistrationConflict`.
        """

        with self._lock:
            for entry in self._entries:
                if entry.predicate != predicate:
                    continue
                if entry.handler == handler:
                    logger.debug("predicate %r already registered, skipping", predicate)
                    return
                raise RegistrationConflict(
                    f"{predicate!r} is already registered with {entry.handler!r}"
                )
            self._entries = (*self._entries, RegistryEntry(predicate, handler))
        logger.debug("registered %r -> %r", predicate, handler)

    def resolve(self, url: str) -> H:
        """Return the handler of the first entry accepting ``url``."""

        for entry in self._entries:
            if entry.accepts(url):
                return entry.handler
        raise self.not_found(url)

    def entries(self) -> tuple[RegistryEntry[H], ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)


class CatalogRegistry(PredicateRegistry[CatalogFactory]):
    """Maps catalog URLs to archive repository factories."""

    not_found = CatalogNotFound

    def get(self, url: str) -> "ArchiveRepository":
        """Build the archive repository serving ``url``."""

        factory = self.resolve(url)
        return factory(url)


class MatcherRegistry(PredicateRegistry[TargetMatcher]):
    """Maps catalog URLs to functions rewriting a target triple for that catalog."""

    not_found = MatcherNotFound

    def target_for(self, url: str, target: str) -> str:
        """Rewrite ``target`` for ``url``; unknown URLs keep the target as-is."""

        try:
            matcher = self.resolve(url)
        except MatcherNotFound:
            return target
        return matcher(target)
