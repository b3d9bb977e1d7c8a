"""
Pydantic models for lsblk block device output.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BlockDevice(BaseModel):
    """A block device or partition as reported by lsblk."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    kname: Optional[str] = None
    maj_min: Optional[str] = Field(default=None, alias="maj:min")
    rm: Optional[bool] = None  # older util-linux reports "0"/"1"
    size: Optional[str] = None
    type: Optional[str] = None
    mountpoint: Optional[str] = None
    mountpoints: Optional[List[Optional[str]]] = None
    children: List["BlockDevice"] = []

    @field_validator("size", mode="before")
    @classmethod
    def _size_as_string(cls, value: Union[str, int, float, None]) -> Optional[str]:
        # lsblk -b reports sizes as numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class LsblkOutput(BaseModel):
    """Top-level document printed by `lsblk --json`."""
    blockdevices: List[BlockDevice]
