"""Registry entries and URL predicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

Predicate = Callable[[str], bool]
H = TypeVar("H")


@dataclass(frozen=True)
class UrlPrefix:
    """Predicate accepting every URL that starts with ``prefix``.

    Two ``UrlPrefix`` values with the same prefix compare equal, which lets
    the registry recognise a repeated registration.
    """

    prefix: str

    def __post_init__(self) -> None:
        if not self.prefix:
            raise ValueError("prefix cannot be empty.")

    def __call__(self, url: str) -> bool:
        return url.startswith(self.prefix)


@dataclass(frozen=True)
class RegistryEntry(Generic[H]):
    """Immutable (predicate, handler) pair."""

    predicate: Predicate
    handler: H

    def accepts(self, url: str) -> bool:
        return bool(self.predicate(url))
