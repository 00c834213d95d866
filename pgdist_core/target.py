"""Host platform target triple detection."""

from __future__ import annotations

import platform
import sys

_ARCH_ALIASES = {
    "amd64": "x86_64",
    "x86_64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "armv7l": "armv7",
    "i386": "i686",
    "i686": "i686",
    "ppc64le": "powerpc64le",
    "s390x": "s390x",
}


def _arch(machine: str) -> str:
    key = machine.strip().lower()
    return _ARCH_ALIASES.get(key, key)


def target_triple(system: str, machine: str, libc: str = "") -> str:
    """Build a target triple such as ``x86_64-unknown-linux-gnu``."""

    arch = _arch(machine)
    system = system.lower()
    if system == "darwin":
        return f"{arch}-apple-darwin"
    if system == "windows":
        return f"{arch}-pc-windows-msvc"
    if system == "linux":
        abi = "gnueabihf" if arch == "armv7" else "gnu"
        if libc and "musl" in libc.lower():
            abi = "musleabihf" if arch == "armv7" else "musl"
        return f"{arch}-unknown-linux-{abi}"
    return f"{arch}-unknown-{system}"


def current_target() -> str:
    """Return the target triple of the running interpreter's platform."""

    system = platform.system() or sys.platform
    libc = ""
    if system.lower() == "linux":
        libc = platform.libc_ver()[0] or "musl"
    return target_triple(system, platform.machine(), libc)
