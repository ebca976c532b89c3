"""Snapshot of the host the program runs on."""

import logging
import platform
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import psutil
from rich.console import Console

logger = logging.getLogger(__name__)


@dataclass
class DiskInfo:
    device: str
    file_system: Optional[str]
    free_space: Optional[int]


@dataclass
class SystemInfo:
    system_name: str
    kernel_version: str
    os_version: str
    hostname: str
    cpu_cores: int
    cpu_virtual_cores: int
    total_memory: int
    used_memory: int
    total_swap: int
    used_swap: int
    disks: List[DiskInfo] = field(default_factory=list)

    @classmethod
    def collect(cls) -> 'SystemInfo':
        """Read the current host state."""
        uname = platform.uname()
        memory = psutil.virtual_memory()
        swap = psutil.swap_memory()
        return cls(
            system_name=uname.system,
            kernel_version=uname.release,
            os_version=uname.version,
            hostname=uname.node,
            cpu_cores=psutil.cpu_count(logical=False) or 0,
            cpu_virtual_cores=psutil.cpu_count(logical=True) or 0,
            total_memory=memory.total,
            used_memory=memory.used,
            total_swap=swap.total,
            used_swap=swap.used,
            disks=_collect_disks(),
        )

    def to_dict(self) -> Dict[str, str]:
        """
        Flatten into display labels.

        Disk entries share their labels, so only the last disk survives.
        """
        info = {
            "System Name": self.system_name,
            "System kernel version": self.kernel_version,
            "System OS version": self.os_version,
            "Hostname": self.hostname,
            "CPU Cores": str(self.cpu_cores),
            "CPU Virtual Cores": str(self.cpu_virtual_cores),
            "Total Memory": str(self.total_memory),
            "Used Memory": str(self.used_memory),
            "Total Swap": str(self.total_swap),
            "Used Swap": str(self.used_swap),
        }
        for disk in self.disks:
            info["Disk Device"] = disk.device
            if disk.file_system is not None:
                info["File System"] = disk.file_system
            if disk.free_space is not None:
                info["Free Space"] = str(disk.free_space)
        return info

    def display(self, console: Optional[Console] = None) -> None:
        """Print ``Label: value`` lines, to the shared console by default."""
        # verbose imports this module
        from .verbose import say

        for label, value in self.to_dict().items():
            say(f"{label}: {value}", console=console)


def _collect_disks() -> List[DiskInfo]:
    disks = []
    for partition in psutil.disk_partitions(all=False):
        try:
            usage = psutil.disk_usage(partition.mountpoint)
        except OSError as e:
            logger.debug(f"Skipping unreadable partition {partition.mountpoint}: {e}")
            continue
        disks.append(DiskInfo(
            device=partition.device,
            file_system=partition.fstype or None,
            free_space=usage.free,
        ))
    return disks
