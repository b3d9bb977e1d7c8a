"""
SMART data queries via smartctl.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from smart_agent.config import settings
from smart_agent.errors import CommandError, SmartParseError, SmartQueryError
from smart_agent.models.smart import SmartctlOutput
from smart_agent.services.command import run_command

logger = logging.getLogger(__name__)

# smartctl exit status is a bitmask. Bit 0: command line did not parse,
# bit 1: device open failed. Both mean there is no SMART data to report;
# the remaining bits describe the device and still come with full JSON.
SMARTCTL_FATAL_BITS = 0b11


def _smartctl_messages(stdout: str) -> Optional[str]:
    """Extract smartctl's own error messages from its JSON output, if any."""
    try:
        data = SmartctlOutput.model_validate_json(stdout)
    except ValidationError:
        return None
    if not data.smartctl or not data.smartctl.messages:
        return None
    texts = [m.string for m in data.smartctl.messages if m.string]
    return "; ".join(texts) or None


class SmartctlService:
    """Service for reading SMART data from a single device."""

    def __init__(self, binary: Optional[str] = None, timeout: Optional[float] = None):
        self.smartctl = binary or settings.smartctl_binary
        self.timeout = timeout if timeout is not None else settings.command_timeout

    def read(self, device: str) -> SmartctlOutput:
        """
        Read all SMART information for a device path.

        Raises:
            SmartQueryError: smartctl could not run or could not open the device.
            SmartParseError: smartctl output is not valid SMART JSON.
        """
        cmd = [self.smartctl, "--json", "-a", device]
        try:
            code, stdout, stderr = run_command(cmd, timeout=self.timeout)
        except CommandError as e:
            raise SmartQueryError(device, e.reason)

        if code & SMARTCTL_FATAL_BITS:
            reason = _smartctl_messages(stdout) or stderr.strip() or f"exit status {code}"
            logger.error(f"smartctl failed for {device}: {reason}")
            raise SmartQueryError(device, reason, exit_status=code)

        if not stdout.strip():
            raise SmartQueryError(device, stderr.strip() or "no output", exit_status=code)

        if code:
            logger.info(f"smartctl reported status bits {code:#x} for {device}")

        try:
            return SmartctlOutput.model_validate_json(stdout)
        except ValidationError as e:
            logger.error(f"Unparseable smartctl output for {device}: {e}")
            raise SmartParseError(device, f"{e.error_count()} validation error(s)")


# Singleton instance
smartctl_service = SmartctlService()
