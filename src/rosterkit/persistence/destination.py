"""Resolve and write pre-serialized content blobs."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .backup import create_backup
from .files import write_atomic


logger = logging.getLogger(__name__)

DOWNLOADS_DIR_NAME = "Downloads"


def default_downloads_dir() -> Path:
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        home = Path(tempfile.gettempdir())
    return home / DOWNLOADS_DIR_NAME


def resolve_destination(name_or_path: Path | str, *, downloads_dir: Path | None = None) -> Path:
    """Bare file names go to the downloads directory; anything else is used as given."""

    text = os.fspath(name_or_path)
    if os.path.dirname(text):
        return Path(text).absolute()
    base = downloads_dir if downloads_dir is not None else default_downloads_dir()
    return (Path(base) / text).absolute()


def write_raw_content(
    name_or_path: Path | str,
    content: bytes,
    *,
    downloads_dir: Path | None = None,
) -> Path:
    """Write ``content`` verbatim to the resolved destination and return its path.

    An existing target is backed up before it is replaced.
    """

    target = resolve_destination(name_or_path, downloads_dir=downloads_dir)
    if not os.path.dirname(os.fspath(name_or_path)):
        target.parent.mkdir(parents=True, exist_ok=True)
    if target.exists():
        create_backup(target)
    write_atomic(target, content)
    logger.info("Wrote %s bytes to %s", len(content), target)
    return target
