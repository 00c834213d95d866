"""Unit tests for the catalog and target matcher registries."""

from __future__ import annotations

import threading

import pytest

from pgdist_core import registry as catalog_registry
from pgdist_core.github.repository import GitHubRepository
from pgdist_core.registry import (
    THESEUS_POSTGRESQL_BINARIES_URL,
    CatalogNotFound,
    CatalogRegistry,
    MatcherNotFound,
    MatcherRegistry,
    PredicateRegistry,
    RegistrationConflict,
    UrlPrefix,
    identity_matcher,
)


class _Handler:
    def __init__(self, url: str) -> None:
        self.url = url


class _OtherHandler(_Handler):
    pass


def test_resolve_returns_registered_handler() -> None:
    registry = CatalogRegistry()
    registry.register(UrlPrefix("https://example.com/catalog"), _Handler)

    assert registry.resolve("https://example.com/catalog/x") is _Handler
    repository = registry.get("https://example.com/catalog/x")
    assert isinstance(repository, _Handler)
    assert repository.url == "https://example.com/catalog/x"


def test_resolve_unknown_url_raises_not_found() -> None:
    registry = CatalogRegistry()
    registry.register(UrlPrefix("https://example.com/catalog"), _Handler)

    with pytest.raises(CatalogNotFound) as excinfo:
        registry.resolve("https://other.example/")
    assert excinfo.value.key == "https://other.example/"


def test_first_registered_predicate_wins() -> None:
    registry: PredicateRegistry[str] = PredicateRegistry()
    registry.register(UrlPrefix("https://example.com"), "broad")
    registry.register(UrlPrefix("https://example.com/catalog"), "narrow")

    assert registry.resolve("https://example.com/catalog/x") == "broad"
    assert [entry.handler for entry in registry.entries()] == ["broad", "narrow"]


def test_callable_predicates_are_supported() -> None:
    registry: PredicateRegistry[str] = PredicateRegistry()
    registry.register(lambda url: url.endswith(".zip"), "zip")

    assert registry.resolve("https://example.com/a.zip") == "zip"


def test_reregistering_same_handler_is_a_no_op() -> None:
    registry = CatalogRegistry()
    registry.register(UrlPrefix("https://example.com"), _Handler)
    registry.register(UrlPrefix("https://example.com"), _Handler)

    assert len(registry) == 1


def test_conflicting_handler_is_rejected() -> None:
    registry = CatalogRegistry()
    registry.register(UrlPrefix("https://example.com"), _Handler)

    with pytest.raises(RegistrationConflict):
        registry.register(UrlPrefix("https://example.com"), _OtherHandler)
    assert registry.resolve("https://example.com/x") is _Handler


def test_empty_prefix_is_rejected() -> None:
    with pytest.raises(ValueError):
        UrlPrefix("")


def test_matcher_registry_rewrites_target() -> None:
    matchers = MatcherRegistry()
    matchers.register(UrlPrefix("https://example.com"), lambda target: target.upper())

    assert matchers.target_for("https://example.com/x", "x86_64-unknown-linux-gnu") == "X86_64-UNKNOWN-LINUX-GNU"
    assert matchers.target_for("https://other.example", "wasm32") == "wasm32"
    with pytest.raises(MatcherNotFound):
        matchers.resolve("https://other.example")


def test_initialize_registers_defaults_idempotently() -> None:
    catalogs = CatalogRegistry()
    matchers = MatcherRegistry()

    catalog_registry.initialize(catalogs, matchers)
    catalog_registry.initialize(catalogs, matchers)

    assert len(catalogs) == 1
    assert catalogs.resolve(THESEUS_POSTGRESQL_BINARIES_URL) is GitHubRepository
    assert matchers.resolve(THESEUS_POSTGRESQL_BINARIES_URL) is identity_matcher


def test_concurrent_readers_see_complete_snapshots() -> None:
    registry: PredicateRegistry[int] = PredicateRegistry()
    errors: list[BaseException] = []

    def writer() -> None:
        for i in range(200):
            registry.register(UrlPrefix(f"https://example.com/{i}/"), i)

    def reader() -> None:
        try:
            for _ in range(200):
                for entry in registry.entries():
                    assert entry.handler is not None
        except BaseException as exc:  # pragma: no cover - surfaced below
            errors.append(exc)

    threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert not errors
    assert len(registry) == 200
    assert registry.resolve("https://example.com/150/x") == 150
