"""Render options snapshot writing."""

from .writer import SNAPSHOT_HEADER, SnapshotWriter, format_snapshot, write_snapshot

__all__ = [
    "SNAPSHOT_HEADER",
    "SnapshotWriter",
    "format_snapshot",
    "write_snapshot",
]
