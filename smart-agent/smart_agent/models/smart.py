"""
Pydantic models for smartctl JSON output.

A single schema covers every protocol. NVMe and ATA devices report
disjoint field sets; SmartctlOutput keeps the branch matching
device.protocol and drops the other.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class SmartctlMessage(BaseModel):
    """Diagnostic message emitted by smartctl itself."""
    string: Optional[str] = None
    severity: Optional[str] = None  # information, warning, error


class SmartctlInfo(BaseModel):
    """smartctl build and invocation details."""
    version: Optional[List[int]] = None
    svn_revision: Optional[str] = None
    platform_info: Optional[str] = None
    build_info: Optional[str] = None
    argv: Optional[List[str]] = None
    exit_status: Optional[int] = None
    messages: Optional[List[SmartctlMessage]] = None


class DeviceIdentity(BaseModel):
    name: Optional[str] = None
    info_name: Optional[str] = None
    type: Optional[str] = None
    protocol: Optional[str] = None  # ATA, NVMe, SCSI


class Capacity(BaseModel):
    blocks: Optional[int] = None
    bytes: Optional[int] = None


class Temperature(BaseModel):
    current: Optional[int] = None


class PowerOnTime(BaseModel):
    hours: Optional[int] = None
    minutes: Optional[int] = None


class LocalTime(BaseModel):
    time_t: Optional[int] = None
    asctime: Optional[str] = None


class NVMeStatusValue(BaseModel):
    value: Optional[int] = None


class SmartStatus(BaseModel):
    """Overall SMART self-assessment."""
    passed: Optional[bool] = None
    nvme: Optional[NVMeStatusValue] = None


# =========================================================================
# NVMe
# =========================================================================

class NVMePCIVendor(BaseModel):
    id: Optional[int] = None
    subsystem_id: Optional[int] = None


class NVMeVersion(BaseModel):
    string: Optional[str] = None
    value: Optional[int] = None


class EUI64(BaseModel):
    oui: Optional[int] = None
    ext_id: Optional[int] = None


class NVMeNamespace(BaseModel):
    id: Optional[int] = None
    size: Optional[Capacity] = None
    capacity: Optional[Capacity] = None
    utilization: Optional[Capacity] = None
    formatted_lba_size: Optional[int] = None
    eui64: Optional[EUI64] = None


class NVMeSmartHealthLog(BaseModel):
    """NVMe SMART / Health Information log page (0x02)."""
    critical_warning: Optional[int] = None
    temperature: Optional[int] = None
    available_spare: Optional[int] = None
    available_spare_threshold: Optional[int] = None
    percentage_used: Optional[int] = None
    data_units_read: Optional[int] = None
    data_units_written: Optional[int] = None
    host_reads: Optional[int] = None
    host_writes: Optional[int] = None
    controller_busy_time: Optional[int] = None
    power_cycles: Optional[int] = None
    power_on_hours: Optional[int] = None
    unsafe_shutdowns: Optional[int] = None
    media_errors: Optional[int] = None
    num_err_log_entries: Optional[int] = None
    warning_temp_time: Optional[int] = None
    critical_comp_time: Optional[int] = None
    temperature_sensors: Optional[List[int]] = None


# =========================================================================
# ATA
# =========================================================================

class AtaAttributeFlags(BaseModel):
    value: Optional[int] = None
    string: Optional[str] = None
    prefailure: Optional[bool] = None
    updated_online: Optional[bool] = None
    performance: Optional[bool] = None
    error_rate: Optional[bool] = None
    event_count: Optional[bool] = None
    auto_keep: Optional[bool] = None


class AtaAttributeRaw(BaseModel):
    value: Optional[int] = None
    string: Optional[str] = None


class AtaAttribute(BaseModel):
    """One row of the ATA SMART attribute table."""
    id: Optional[int] = None
    name: Optional[str] = None
    value: Optional[int] = None
    worst: Optional[int] = None
    thresh: Optional[int] = None
    when_failed: Optional[str] = None
    flags: Optional[AtaAttributeFlags] = None
    raw: Optional[AtaAttributeRaw] = None


class AtaSmartAttributes(BaseModel):
    revision: Optional[int] = None
    table: List[AtaAttribute] = []


class AtaSmartStatus(BaseModel):
    passed: Optional[bool] = None


class AtaErrorLogSummary(BaseModel):
    revision: Optional[int] = None
    count: Optional[int] = None


class AtaSmartErrorLog(BaseModel):
    summary: Optional[AtaErrorLogSummary] = None


NVME_FIELDS = (
    "nvme_pci_vendor",
    "nvme_ieee_oui_identifier",
    "nvme_total_capacity",
    "nvme_unallocated_capacity",
    "nvme_controller_id",
    "nvme_version",
    "nvme_namespaces",
    "nvme_smart_health_information_log",
)

ATA_FIELDS = (
    "ata_smart_attributes",
    "ata_smart_status",
    "ata_smart_error_log",
)


class SmartctlOutput(BaseModel):
    """Document printed by `smartctl --json -a <device>`."""
    model_config = ConfigDict(protected_namespaces=())

    json_format_version: Optional[List[int]] = None
    smartctl: Optional[SmartctlInfo] = None
    device: Optional[DeviceIdentity] = None

    model_name: Optional[str] = None
    serial_number: Optional[str] = None
    firmware_version: Optional[str] = None
    user_capacity: Optional[Capacity] = None
    logical_block_size: Optional[int] = None

    temperature: Optional[Temperature] = None
    power_cycle_count: Optional[int] = None
    power_on_time: Optional[PowerOnTime] = None
    local_time: Optional[LocalTime] = None

    smart_status: Optional[SmartStatus] = None

    # NVMe-specific
    nvme_pci_vendor: Optional[NVMePCIVendor] = None
    nvme_ieee_oui_identifier: Optional[int] = None
    nvme_total_capacity: Optional[int] = None
    nvme_unallocated_capacity: Optional[int] = None
    nvme_controller_id: Optional[int] = None
    nvme_version: Optional[NVMeVersion] = None
    nvme_namespaces: Optional[List[NVMeNamespace]] = None
    nvme_smart_health_information_log: Optional[NVMeSmartHealthLog] = None

    # ATA-specific
    ata_smart_attributes: Optional[AtaSmartAttributes] = None
    ata_smart_status: Optional[AtaSmartStatus] = None
    ata_smart_error_log: Optional[AtaSmartErrorLog] = None

    @property
    def protocol(self) -> Optional[str]:
        return self.device.protocol if self.device else None

    @property
    def ata_error_count(self) -> Optional[int]:
        if self.ata_smart_error_log and self.ata_smart_error_log.summary:
            return self.ata_smart_error_log.summary.count
        return None

    @model_validator(mode="after")
    def _select_protocol_branch(self) -> "SmartctlOutput":
        protocol = (self.protocol or "").lower()
        if protocol == "nvme":
            dropped = ATA_FIELDS
        elif protocol == "ata":
            dropped = NVME_FIELDS
        else:
            return self
        for name in dropped:
            setattr(self, name, None)
        return self


class DeviceError(BaseModel):
    """Why SMART data for a device is missing from a report."""
    code: str  # SMART_QUERY_FAILED, SMART_PARSE_FAILED
    message: str
    exit_status: Optional[int] = None


class SmartInfo(BaseModel):
    """SMART report entry for one device path."""
    device: str
    output: Optional[SmartctlOutput] = None
    error: Optional[DeviceError] = None
