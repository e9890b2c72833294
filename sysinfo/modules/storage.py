#!/usr/bin/env python3
"""
Storage related information modules.
"""

import logging
import os
from typing import List

import psutil

from .base import DiagnosticModule, Metric

logger = logging.getLogger("sysinfo.modules.storage")

DISK_GAUGE_SLOTS = 28

GB = 1024 ** 3

# Pseudo and memory backed filesystems
VIRTUAL_FSTYPES = {
    "tmpfs", "devtmpfs", "overlay", "squashfs", "efivarfs", "proc", "sysfs",
    "devfs", "autofs", "ramfs", "cgroup", "cgroup2", "nullfs",
}
NETWORK_FSTYPES = {
    "nfs", "nfs4", "cifs", "smbfs", "smb2", "afpfs", "sshfs", "fuse.sshfs",
    "9p", "ceph", "glusterfs", "davfs", "webdav",
}
OPTICAL_FSTYPES = {"iso9660", "udf", "cdfs"}
# Windows drive types reported by psutil in the mount options
REMOVABLE_OPTS = {"cdrom", "removable", "remote", "ramdisk"}

SYS_BLOCK = "/sys/class/block"


def disk_used_percent(total_gb: float, free_gb: float) -> int:
    """Return the used share of a volume as a whole percentage."""
    if total_gb <= 0:
        return 0
    return int((total_gb - free_gb) / total_gb * 100)


def is_removable_device(device: str) -> bool:
    """Check the kernel removable flag of a block device or its parent disk."""
    if not device or not device.startswith("/dev/"):
        return False
    node = os.path.join(SYS_BLOCK, os.path.basename(os.path.realpath(device)))
    for candidate in (node, os.path.dirname(os.path.realpath(node))):
        flag = os.path.join(candidate, "removable")
        if os.path.exists(flag):
            try:
                with open(flag, "r") as f:
                    return f.read().strip() == "1"
            except OSError:
                return False
    return False


def is_fixed_volume(partition) -> bool:
    """Tell whether a psutil partition is a local, non-removable volume."""
    fstype = (partition.fstype or "").lower()
    if not fstype:
        return False
    if fstype in VIRTUAL_FSTYPES or fstype in NETWORK_FSTYPES or fstype in OPTICAL_FSTYPES:
        return False
    opts = {opt.strip().lower() for opt in (partition.opts or "").split(",")}
    if opts & REMOVABLE_OPTS:
        return False
    return not is_removable_device(partition.device)


def fixed_volumes() -> list:
    """Return fixed volumes sorted by mount point, one entry per mount point."""
    seen = {}
    for partition in psutil.disk_partitions(all=False):
        if not is_fixed_volume(partition):
            continue
        seen.setdefault(partition.mountpoint, partition)
    return [seen[mount] for mount in sorted(seen)]


class DiskModule(DiagnosticModule):
    """Module for capacity and free space of fixed volumes."""

    def __init__(self):
        super().__init__(
            "disks",
            "Disk Information"
        )

    def run(self) -> List[Metric]:
        try:
            volumes = fixed_volumes()
        except (OSError, RuntimeError) as e:
            raise self.unavailable(f"volume list not readable: {e}")

        metrics = []
        for volume in volumes:
            try:
                usage = psutil.disk_usage(volume.mountpoint)
            except (OSError, RuntimeError) as e:
                logger.info(f"Skipping volume {volume.mountpoint}: {e}")
                continue

            total_gb = usage.total / GB
            free_gb = usage.free / GB
            percent = disk_used_percent(total_gb, free_gb)

            metrics.append(Metric.text("Drive", volume.mountpoint))
            metrics.append(Metric.text("Space", f"Total: {total_gb:.1f} GB | Free: {free_gb:.1f} GB"))
            metrics.append(Metric.percent("Used", percent,
                                          detail=f"{total_gb - free_gb:.1f} GB",
                                          slots=DISK_GAUGE_SLOTS))

        if not metrics:
            metrics.append(Metric.text("Volumes", "none found"))
        return metrics
