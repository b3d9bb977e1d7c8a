"""
Aggregates lsblk enumeration and per-device smartctl queries into one report.
"""

import logging
from typing import List, Optional

from smart_agent.errors import SmartParseError, SmartQueryError
from smart_agent.models.smart import DeviceError, SmartInfo
from smart_agent.services.lsblk import LsblkService, lsblk_service
from smart_agent.services.smartctl import SmartctlService, smartctl_service

logger = logging.getLogger(__name__)


class SmartCollector:
    """Builds the SMART report for every enumerated device."""

    def __init__(
        self,
        lsblk: Optional[LsblkService] = None,
        smartctl: Optional[SmartctlService] = None
    ):
        self.lsblk = lsblk or lsblk_service
        self.smartctl = smartctl or smartctl_service

    def collect(self) -> List[SmartInfo]:
        """
        Enumerate devices once and query each of them in order.

        Per-device failures become error entries. Enumeration failures
        propagate as EnumerationError.
        """
        devices = self.lsblk.list_devices()
        report: List[SmartInfo] = []

        for path in self.lsblk.device_paths(devices):
            try:
                output = self.smartctl.read(path)
            except (SmartQueryError, SmartParseError) as e:
                logger.warning(f"No SMART data for {path}: {e.message}")
                report.append(SmartInfo(
                    device=path,
                    error=DeviceError(
                        code=e.error_code,
                        message=e.message,
                        exit_status=getattr(e, "exit_status", None)
                    )
                ))
                continue

            report.append(SmartInfo(device=path, output=output))

        logger.info(f"Collected SMART data for {len(report)} device(s)")
        return report


# Singleton instance
smart_collector = SmartCollector()
