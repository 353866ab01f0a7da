"""Backups, roster rewrites and raw content writes."""

from .backup import backup_path_for, create_backup
from .destination import default_downloads_dir, resolve_destination, write_raw_content
from .roster_store import UpdateResult, load_roster, update_record

__all__ = [
    "UpdateResult",
    "backup_path_for",
    "create_backup",
    "default_downloads_dir",
    "load_roster",
    "resolve_destination",
    "update_record",
    "write_raw_content",
]
