"""Whole-file replacement helpers."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_atomic(path: Path, content: bytes) -> None:
    """Replace ``path`` with ``content`` in one step.

    The bytes go to a temporary sibling first, which is then renamed over the
    target, so readers see either the old file or the new one. Symlinks are
    followed so the link target receives the content, and the target keeps its
    permission bits; a new file gets the default mode under the umask.
    """

    target = Path(path).resolve()
    fd, temp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if target.exists():
            shutil.copymode(target, temp_name)
        else:
            os.chmod(temp_name, 0o666 & ~_current_umask())
        os.replace(temp_name, target)
    except BaseException:
        if os.path.exists(temp_name):
            os.remove(temp_name)
        raise
