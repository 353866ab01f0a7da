"""Timestamped backup copies made before destructive writes."""

from __future__ import annotations

import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path


logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
DEFAULT_BACKUP_STEM = "backup"
DEFAULT_BACKUP_EXTENSION = "csv"


def backup_path_for(path: Path | str, *, now: datetime | None = None) -> Path:
    """Return the sibling ``{stem}_backup_{YYYYMMDD_HHMMSS}.{ext}`` path for ``path``.

    Timestamps are UTC with one-second resolution; two backups of the same file
    within a second share a name.
    """

    path = Path(path)
    moment = now or datetime.now(timezone.utc)
    stem = path.stem or DEFAULT_BACKUP_STEM
    extension = path.suffix.lstrip(".") or DEFAULT_BACKUP_EXTENSION
    stamp = moment.astimezone(timezone.utc).strftime(BACKUP_TIMESTAMP_FORMAT)
    return path.with_name(f"{stem}_backup_{stamp}.{extension}")


def create_backup(path: Path | str, *, now: datetime | None = None) -> Path:
    """Copy ``path`` byte for byte to its backup name and return the new path.

    Raises the native ``OSError`` when the source is missing or unreadable or
    the copy cannot be written. Backups are never rotated or removed.
    """

    source = Path(path)
    target = backup_path_for(source, now=now)
    shutil.copyfile(source, target)
    logger.info("Backed up %s to %s", source, target)
    return target


__all__ = ["backup_path_for", "create_backup"]
