"""Asyncio facade running the blocking pipeline on one shared executor."""

from __future__ import annotations

import asyncio
import functools
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, TypeVar

from . import archive
from .registry import CatalogRegistry
from .version import Version

T = TypeVar("T")

_EXECUTOR: ThreadPoolExecutor | None = None
_EXECUTOR_LOCK = threading.Lock()


def _executor() -> ThreadPoolExecutor:
    global _EXECUTOR
    with _EXECUTOR_LOCK:
        if _EXECUTOR is None:
            _EXECUTOR = ThreadPoolExecutor(thread_name_prefix="pgdist")
        return _EXECUTOR


def shutdown() -> None:
    """Release the shared executor; the next call creates a fresh one."""

    global _EXECUTOR
    with _EXECUTOR_LOCK:
        executor, _EXECUTOR = _EXECUTOR, None
    if executor is not None:
        executor.shutdown(wait=True)


async def _run(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_executor(), functools.partial(func, *args, **kwargs))


async def get_version(url: str, version: Version, *, catalogs: CatalogRegistry | None = None) -> Version:
    return await _run(archive.get_version, url, version, catalogs=catalogs)


async def get_archive(url: str, version: Version, *, catalogs: CatalogRegistry | None = None) -> tuple[Version, bytes]:
    return await _run(archive.get_archive, url, version, catalogs=catalogs)


async def get_archive_for_target(
    url: str,
    version: Version,
    target: str,
    *,
    catalogs: CatalogRegistry | None = None,
) -> tuple[Version, bytes]:
    return await _run(archive.get_archive_for_target, url, version, target, catalogs=catalogs)


async def extract(data: bytes, out_dir: Path) -> list[Path]:
    return await _run(archive.extract, data, out_dir)
