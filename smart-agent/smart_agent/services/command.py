"""
External command execution shared by the lsblk and smartctl services.
"""

import subprocess
import logging
from typing import List, Optional, Tuple

from smart_agent.errors import CommandError

logger = logging.getLogger(__name__)


def run_command(
    cmd: List[str],
    timeout: Optional[float] = None
) -> Tuple[int, str, str]:
    """
    Execute a command and return (exit_code, stdout, stderr).

    A non-zero exit code is returned to the caller, not raised: both
    tools print usable JSON alongside some non-zero exit codes.

    Raises:
        CommandError: the command could not be started or timed out.
    """
    logger.debug(f"Running command: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout
        )
    except subprocess.TimeoutExpired:
        logger.error(f"Command timed out: {' '.join(cmd)}")
        raise CommandError(cmd, f"timed out after {timeout}s")
    except OSError as e:
        logger.error(f"Command error: {e}")
        raise CommandError(cmd, str(e))

    if result.returncode != 0:
        logger.debug(f"Command exited with {result.returncode}: {result.stderr.strip()}")
    return result.returncode, result.stdout, result.stderr
