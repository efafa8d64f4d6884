"""Platform identifiers used as artifact keys."""

from __future__ import annotations

import platform as _host
import sys

SUPPORTED_PLATFORMS: tuple[str, ...] = (
    "darwin_arm64",
    "darwin_amd64",
    "linux_amd64",
    "linux_arm64",
    "windows_amd64",
)

_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv8l": "arm64",
    "i386": "386",
    "i486": "386",
    "i586": "386",
    "i686": "386",
    "x86": "386",
    "armv6l": "arm",
    "armv7l": "arm",
    "arm": "arm",
    "ppc64le": "ppc64le",
    "ppc64": "ppc64",
    "s390x": "s390x",
    "riscv64": "riscv64",
    "mips64": "mips64",
}


def _os_name() -> str:
    name = sys.platform
    if name.startswith("linux"):
        return "linux"
    if name.startswith("darwin"):
        return "darwin"
    if name in ("win32", "cygwin", "msys"):
        return "windows"
    return name.rstrip("0123456789")


def _arch_name() -> str:
    machine = _host.machine().lower()
    return _ARCH_ALIASES.get(machine, machine)


def current_platform() -> str:
    """Return the artifact key for the running OS and CPU, e.g. ``darwin_arm64``."""
    return f"{_os_name()}_{_arch_name()}"