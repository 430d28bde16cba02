"""Build UNC paths into a snapshot's ``@GMT-`` namespace."""

from ..models.common import AddressingMode

GMT_PREFIX = "@GMT-"


def normalize_relative(path: str) -> str:
    return path.replace("/", "\\").strip("\\")


def build_snapshot_path(
    system: str,
    addressing: AddressingMode,
    token: str,
    relative_path: str = "",
) -> str:
    r"""``\\system\D$\@GMT-token\rel`` or ``\\system\share\@GMT-token\rel``."""
    root = f"\\\\{system}\\{addressing.segment}\\{GMT_PREFIX}{token}"
    rel = normalize_relative(relative_path)
    return f"{root}\\{rel}" if rel else root
