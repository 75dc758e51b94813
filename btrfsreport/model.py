#!/usr/bin/python3

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional

from btrfsreport.errors import UnknownRedundancyLevelError


class RedundancyLevel(Enum):
    SINGLE = 'single'
    DUP = 'dup'
    RAID1 = 'raid1'

    @property
    def copies(self):
        if self is RedundancyLevel.SINGLE:
            return 1
        return 2

    @classmethod
    def parse(cls, label):
        normalised = label.strip().lower().replace('-', '')
        for level in cls:
            if level.value == normalised:
                return level
        raise UnknownRedundancyLevelError(label)


@dataclass(frozen=True)
class Device:
    devid: str
    size: int
    used: int
    path: str


@dataclass(frozen=True)
class DFData:
    data_type: str
    level: str
    total: int
    used: int

    def used_total(self):
        """Used bytes counting every copy the redundancy level keeps."""
        return self.used * RedundancyLevel.parse(self.level).copies


@dataclass(frozen=True)
class Subvolume:
    name: str = ''
    uuid: str = ''
    parent_uuid: str = ''
    creation_time: Optional[datetime] = None
    id: str = ''
    gen: int = 0
    gen_at_creation: int = 0
    parent: int = 0
    top_level: int = 0
    path: str = ''


@dataclass(frozen=True)
class FileSystem:
    label: str
    uuid: str
    total_devices: int
    used_bytes: int
    version: Optional[str]
    devices_missing: bool = False
    devices: tuple[Device, ...] = ()
    df: tuple[DFData, ...] = ()
    subvolumes: tuple[Subvolume, ...] = ()

    def total_bytes(self):
        return sum(device.size for device in self.devices)

    def allocated_bytes(self):
        # Space reserved by the allocator, not necessarily holding data
        return sum(device.used for device in self.devices)

    def get_used_bytes(self):
        total = 0
        for data in self.df:
            total += data.used_total()
        return total

    def with_df(self, df):
        return replace(self, df=tuple(df))

    def with_subvolumes(self, subvolumes):
        return replace(self, subvolumes=tuple(subvolumes))

    def with_version(self, version):
        return replace(self, version=version)
