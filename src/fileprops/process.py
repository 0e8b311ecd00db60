"""Spawn external tools and collect their output."""

import asyncio
import logging

from fileprops.errors import CommandError

logger = logging.getLogger(__name__)


async def run_command(cmd: list[str], timeout: float | None = 30.0) -> str:
    """Run ``cmd`` and return its decoded standard output.

    Raises:
        CommandError: spawn failure, timeout, or non-zero exit status
    """
    logger.debug("Running %s", cmd)
    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise CommandError(cmd, f"failed to start: {e}") from e

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        raise CommandError(cmd, f"timed out after {timeout}s") from None

    if process.returncode != 0:
        err = stderr.decode("utf-8", errors="replace").strip()
        raise CommandError(cmd, f"exited with status {process.returncode}", stderr=err)

    return stdout.decode("utf-8", errors="replace")
