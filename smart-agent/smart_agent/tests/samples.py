"""Canned lsblk and smartctl output used across the test suite."""

import json

LSBLK_JSON = json.dumps({
    "blockdevices": [
        {
            "name": "sda", "kname": "sda", "maj:min": "8:0", "rm": False,
            "size": "931.5G", "type": "disk", "mountpoint": None,
            "children": [
                {"name": "sda1", "kname": "sda1", "maj:min": "8:1", "rm": False,
                 "size": "512M", "type": "part", "mountpoint": "/boot/efi"},
                {"name": "sda2", "kname": "sda2", "maj:min": "8:2", "rm": False,
                 "size": "931G", "type": "part", "mountpoint": "/"},
            ],
        },
        {
            "name": "nvme0n1", "kname": "nvme0n1", "maj:min": "259:0", "rm": "0",
            "size": 1024209543168, "type": "disk", "mountpoint": None,
        },
    ]
})

ATA_RECORD = {
    "json_format_version": [1, 0],
    "smartctl": {
        "version": [7, 3],
        "svn_revision": "5338",
        "platform_info": "x86_64-linux-6.1.0",
        "build_info": "(local build)",
        "argv": ["smartctl", "--json", "-a", "/dev/sda"],
        "exit_status": 0,
    },
    "device": {"name": "/dev/sda", "info_name": "/dev/sda [SAT]", "type": "sat", "protocol": "ATA"},
    "model_name": "TestDisk 1TB",
    "serial_number": "ABCDEFG",
    "firmware_version": "1.23",
    "user_capacity": {"blocks": 1953525168, "bytes": 1000204886016},
    "logical_block_size": 512,
    "temperature": {"current": 34},
    "power_cycle_count": 1200,
    "power_on_time": {"hours": 21000},
    "local_time": {"time_t": 1700000000, "asctime": "Tue Nov 14 22:13:20 2023 UTC"},
    "smart_status": {"passed": True},
    "ata_smart_attributes": {
        "revision": 16,
        "table": [
            {
                "id": 5, "name": "Reallocated_Sector_Ct", "value": 100, "worst": 100,
                "thresh": 36, "when_failed": "",
                "flags": {"value": 51, "string": "PO--CK ", "prefailure": True,
                          "updated_online": True, "performance": False,
                          "error_rate": False, "event_count": True, "auto_keep": True},
                "raw": {"value": 0, "string": "0"},
            },
            {
                "id": 194, "name": "Temperature_Celsius", "value": 66, "worst": 45,
                "thresh": 0, "when_failed": "",
                "flags": {"value": 34, "string": "-O---K ", "prefailure": False,
                          "updated_online": True, "performance": False,
                          "error_rate": False, "event_count": False, "auto_keep": True},
                "raw": {"value": 34, "string": "34 (Min/Max 18/55)"},
            },
        ],
    },
    "ata_smart_error_log": {"summary": {"revision": 1, "count": 2}},
}

NVME_RECORD = {
    "json_format_version": [1, 0],
    "smartctl": {"version": [7, 3], "exit_status": 0},
    "device": {"name": "/dev/nvme0n1", "info_name": "/dev/nvme0n1", "type": "nvme", "protocol": "NVMe"},
    "model_name": "UMIS RPJYJ1T24RLS1QWY",
    "serial_number": "SS1Q23148Z1CD56B11B0",
    "firmware_version": "1.0L0541",
    "nvme_pci_vendor": {"id": 6541, "subsystem_id": 6541},
    "nvme_ieee_oui_identifier": 5358,
    "nvme_total_capacity": 1024209543168,
    "nvme_unallocated_capacity": 0,
    "nvme_controller_id": 1,
    "nvme_version": {"string": "1.4", "value": 66560},
    "nvme_namespaces": [
        {
            "id": 1,
            "size": {"blocks": 2000409264, "bytes": 1024209543168},
            "capacity": {"blocks": 2000409264, "bytes": 1024209543168},
            "utilization": {"blocks": 2000409264, "bytes": 1024209543168},
            "formatted_lba_size": 512,
            "eui64": {"oui": 5358, "ext_id": 123456789},
        }
    ],
    "user_capacity": {"blocks": 2000409264, "bytes": 1024209543168},
    "logical_block_size": 512,
    "smart_status": {"passed": True, "nvme": {"value": 0}},
    "nvme_smart_health_information_log": {
        "critical_warning": 0,
        "temperature": 29,
        "available_spare": 100,
        "available_spare_threshold": 10,
        "percentage_used": 0,
        "data_units_read": 1778273,
        "data_units_written": 2725721,
        "host_reads": 20000000,
        "host_writes": 30000000,
        "controller_busy_time": 100,
        "power_cycles": 73,
        "power_on_hours": 41,
        "unsafe_shutdowns": 10,
        "media_errors": 0,
        "num_err_log_entries": 0,
        "warning_temp_time": 0,
        "critical_comp_time": 0,
        "temperature_sensors": [29, 35],
    },
    "temperature": {"current": 29},
    "power_cycle_count": 73,
    "power_on_time": {"hours": 41},
}

OPEN_FAILED_RECORD = {
    "json_format_version": [1, 0],
    "smartctl": {
        "version": [7, 3],
        "exit_status": 2,
        "messages": [
            {"string": "Smartctl open device: /dev/sdz failed: No such device", "severity": "error"}
        ],
    },
}
