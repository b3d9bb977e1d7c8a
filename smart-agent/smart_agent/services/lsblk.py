"""
Block device enumeration via lsblk.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError

from smart_agent.config import settings
from smart_agent.errors import CommandError, EnumerationError
from smart_agent.models.device import BlockDevice, LsblkOutput
from smart_agent.services.command import run_command

logger = logging.getLogger(__name__)


class LsblkService:
    """Service for listing block devices."""

    def __init__(
        self,
        binary: Optional[str] = None,
        device_prefix: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        self.lsblk = binary or settings.lsblk_binary
        self.device_prefix = device_prefix if device_prefix is not None else settings.device_prefix
        self.timeout = timeout if timeout is not None else settings.command_timeout

    def list_devices(self) -> List[BlockDevice]:
        """
        Return the top-level block devices reported by lsblk.

        Raises:
            EnumerationError: lsblk could not run or printed unusable output.
        """
        cmd = [self.lsblk, "--json"]
        try:
            code, stdout, stderr = run_command(cmd, timeout=self.timeout)
        except CommandError as e:
            raise EnumerationError(e.message)

        if code != 0:
            logger.error(f"Failed to list block devices: {stderr}")
            raise EnumerationError(
                f"lsblk exited with status {code}: {stderr.strip() or 'no error output'}"
            )
        if not stdout.strip():
            raise EnumerationError("lsblk returned no output")

        try:
            parsed = LsblkOutput.model_validate_json(stdout)
        except ValidationError as e:
            logger.error(f"Unparseable lsblk output: {e}")
            raise EnumerationError(f"lsblk returned invalid JSON: {e.error_count()} error(s)")

        logger.debug(f"lsblk reported {len(parsed.blockdevices)} device(s)")
        return parsed.blockdevices

    def device_paths(self, devices: List[BlockDevice]) -> List[str]:
        """Build device node paths for every device that has a name."""
        return [f"{self.device_prefix}{d.name}" for d in devices if d.name]


# Singleton instance
lsblk_service = LsblkService()
