"""
SMART Agent - FastAPI service publishing disk SMART telemetry.

Provides REST API for:
- Block device enumeration via lsblk
- Per-device SMART data via smartctl
"""

__version__ = "1.0.0"
__author__ = "SMART Agent"
