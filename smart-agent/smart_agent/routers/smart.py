"""
SMART report endpoint.
"""

from typing import List

from fastapi import APIRouter, Depends

from smart_agent.models.smart import SmartInfo
from smart_agent.services.collector import SmartCollector, smart_collector

router = APIRouter(tags=["smart"])


def get_collector() -> SmartCollector:
    return smart_collector


@router.get(
    "/smart",
    response_model=List[SmartInfo],
    response_model_exclude_none=True
)
def get_smart(collector: SmartCollector = Depends(get_collector)):
    """
    SMART data for every block device.

    Runs lsblk once and smartctl once per device, sequentially. Devices
    whose query failed carry an `error` object instead of `output`.
    """
    return collector.collect()
