"""Host detection performed once at startup.

The wizard never probes the system while routing keys; every question it
asks (termux? obsidian installed? ghostty present?) is answered from the
``SystemInfo`` captured here.
"""

from __future__ import annotations

import logging
import os
import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

OS_MAC = "mac"
OS_LINUX = "linux"
OS_ARCH = "arch"
OS_DEBIAN = "debian"
OS_FEDORA = "fedora"
OS_TERMUX = "termux"
OS_UNKNOWN = "unknown"

LINUX_FAMILY = frozenset({OS_LINUX, OS_ARCH, OS_DEBIAN, OS_FEDORA})

_OS_LABELS = {
    OS_MAC: "macOS",
    OS_LINUX: "Linux",
    OS_ARCH: "Arch Linux",
    OS_DEBIAN: "Debian/Ubuntu",
    OS_FEDORA: "Fedora",
    OS_TERMUX: "Termux",
    OS_UNKNOWN: "Unknown",
}


@dataclass(frozen=True)
class SystemInfo:
    os: str = OS_UNKNOWN
    is_wsl: bool = False
    is_termux: bool = False
    is_arm: bool = False
    has_brew: bool = False
    has_xcode: bool = False
    has_obsidian: bool = False
    has_ghostty: bool = False
    user_shell: str = ""

    @property
    def os_label(self) -> str:
        label = _OS_LABELS.get(self.os, self.os)
        if self.is_wsl:
            label += " (WSL)"
        return label

    @property
    def wizard_os(self) -> str:
        """The OS option value this host maps to: ``mac``, ``linux`` or ``termux``."""
        if self.is_termux or self.os == OS_TERMUX:
            return OS_TERMUX
        if self.os == OS_MAC:
            return OS_MAC
        return OS_LINUX


def command_exists(name: str) -> bool:
    return shutil.which(name) is not None


def _read_os_release(path: Path = Path("/etc/os-release")) -> dict[str, str]:
    values: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return values
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if sep:
            values[key.strip()] = value.strip().strip('"')
    return values


def linux_distribution(os_release: dict[str, str]) -> str:
    """Map ``/etc/os-release`` fields to a distribution family."""
    ids = {os_release.get("ID", "").lower()}
    ids.update(os_release.get("ID_LIKE", "").lower().split())
    if ids & {"arch", "manjaro", "endeavouros"}:
        return OS_ARCH
    if ids & {"debian", "ubuntu", "pop", "linuxmint"}:
        return OS_DEBIAN
    if ids & {"fedora", "rhel", "centos"}:
        return OS_FEDORA
    return OS_LINUX


def _is_termux(environ: dict[str, str]) -> bool:
    if environ.get("TERMUX_VERSION"):
        return True
    return "com.termux" in environ.get("PREFIX", "")


def _is_wsl() -> bool:
    try:
        return "microsoft" in Path("/proc/version").read_text(encoding="utf-8").lower()
    except OSError:
        return False


def detect_system(environ: dict[str, str] | None = None) -> SystemInfo:
    """Probe the host. Never raises; unknown facts default to ``False``."""
    env = dict(os.environ) if environ is None else environ
    system = platform.system()
    termux = _is_termux(env)
    if termux:
        os_name = OS_TERMUX
    elif system == "Darwin":
        os_name = OS_MAC
    elif system == "Linux":
        os_name = linux_distribution(_read_os_release())
    else:
        os_name = OS_UNKNOWN

    has_xcode = False
    if os_name == OS_MAC:
        has_xcode = Path("/Library/Developer/CommandLineTools").is_dir()

    has_obsidian = command_exists("obsidian") or Path("/Applications/Obsidian.app").is_dir()
    info = SystemInfo(
        os=os_name,
        is_wsl=system == "Linux" and _is_wsl(),
        is_termux=termux,
        is_arm=platform.machine().lower() in {"arm64", "aarch64"},
        has_brew=command_exists("brew"),
        has_xcode=has_xcode,
        has_obsidian=has_obsidian,
        has_ghostty=command_exists("ghostty"),
        user_shell=os.path.basename(env.get("SHELL", "")),
    )
    logger.info("detected system: %s", info)
    return info


__all__ = [
    "LINUX_FAMILY",
    "OS_ARCH",
    "OS_DEBIAN",
    "OS_FEDORA",
    "OS_LINUX",
    "OS_MAC",
    "OS_TERMUX",
    "OS_UNKNOWN",
    "SystemInfo",
    "command_exists",
    "detect_system",
    "linux_distribution",
]
