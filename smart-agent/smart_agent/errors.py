"""
SMART Agent error types.

Each error carries a stable error code and the HTTP status the API layer
should answer with when the error escapes a request.
"""

from typing import Optional


class SmartAgentError(Exception):
    """Base exception for SMART Agent operations"""

    error_code = "SMART_AGENT_ERROR"
    status_code = 500

    def __init__(self, message: str, error_code: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message
        if error_code:
            self.error_code = error_code
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)


class CommandError(SmartAgentError):
    """Raised when an external command cannot be executed at all"""

    error_code = "COMMAND_FAILED"

    def __init__(self, cmd: list, reason: str):
        super().__init__(f"Failed to run {' '.join(cmd)}: {reason}")
        self.cmd = cmd
        self.reason = reason


class EnumerationError(SmartAgentError):
    """Raised when lsblk fails or returns unusable output"""

    error_code = "ENUMERATION_FAILED"


class SmartQueryError(SmartAgentError):
    """Raised when smartctl could not query a device"""

    error_code = "SMART_QUERY_FAILED"

    def __init__(self, device: str, reason: str, exit_status: Optional[int] = None):
        super().__init__(f"smartctl failed for {device}: {reason}")
        self.device = device
        self.exit_status = exit_status


class SmartParseError(SmartAgentError):
    """Raised when smartctl output for a device is not valid SMART JSON"""

    error_code = "SMART_PARSE_FAILED"

    def __init__(self, device: str, reason: str):
        super().__init__(f"Invalid smartctl output for {device}: {reason}")
        self.device = device
