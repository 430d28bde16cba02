"""Wrappers for remote snapshot commands."""

import asyncio
import logging
from typing import Optional

from ..config import Settings, settings as default_settings
from ..errors import RemoteCallError

logger = logging.getLogger(__name__)


async def run_cmd(
    *args: str,
    timeout: float = 30.0,
) -> tuple[int, str, str]:
    """Run a command and return (returncode, stdout, stderr)."""
    proc = await asyncio.create_subprocess_exec(
        *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        proc.kill()
        await proc.wait()
        return -1, "", "Command timed out"

    return (
        proc.returncode or 0,
        stdout.decode("utf-8", errors="replace").strip(),
        stderr.decode("utf-8", errors="replace").strip(),
    )


def build_listing_command(host: str, cfg: Settings) -> list[str]:
    return [arg.replace("{host}", host) for arg in cfg.listing_command]


def parse_creation_times(output: str, marker: str) -> list[str]:
    """Pull the timestamp text that follows ``marker`` on each matching line.

    Order is whatever the remote tool emitted.
    """
    needle = marker.lower()
    times = []
    for line in output.splitlines():
        idx = line.lower().find(needle)
        if idx < 0:
            continue
        value = line[idx + len(needle):].strip()
        if value:
            times.append(value)
    return times


async def list_shadow_copies(host: str, cfg: Optional[Settings] = None) -> list[str]:
    """List the creation timestamps of every shadow copy on ``host``."""
    cfg = cfg or default_settings
    cmd = build_listing_command(host, cfg)
    logger.debug(f"Listing shadow copies on {host}: {cmd}")

    try:
        rc, out, err = await run_cmd(*cmd, timeout=cfg.listing_timeout)
    except OSError as e:
        raise RemoteCallError(host, str(e)) from e

    if rc != 0:
        raise RemoteCallError(host, err or out or "no output", returncode=rc)

    times = parse_creation_times(out, cfg.listing_marker)
    logger.info(f"{host}: {len(times)} shadow copies listed")
    return times
