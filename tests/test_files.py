import os
import stat
import sys
from pathlib import Path

import pytest

from rosterkit.models import PlayerUpdate
from rosterkit.persistence import load_roster, update_record, write_raw_content
from rosterkit.persistence import files
from rosterkit.persistence.files import write_atomic


posix_only = pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits and symlinks")

HEADER = "Barcode Number,Team,First Name,Last Name,Jersey Number,Coach,Cell Phone,Email,Products,Packages"


def _mode(path: Path) -> int:
    return stat.S_IMODE(path.stat().st_mode)


def _roster(path: Path) -> Path:
    path.write_text(HEADER + "\n123,Red,Ann,Lee,7,N,,,,\n", encoding="utf-8")
    return path


@posix_only
def test_update_keeps_roster_mode(tmp_path: Path):
    path = _roster(tmp_path / "roster.csv")
    os.chmod(path, 0o644)

    update_record(path, PlayerUpdate(barcode="123", first_name="Anne"))

    assert _mode(path) == 0o644


@posix_only
def test_overwrite_keeps_existing_mode(tmp_path: Path):
    path = tmp_path / "export.csv"
    path.write_bytes(b"old")
    os.chmod(path, 0o664)

    write_raw_content(path, b"new")

    assert _mode(path) == 0o664
    assert path.read_bytes() == b"new"


@posix_only
def test_new_file_follows_umask(tmp_path: Path):
    mask = os.umask(0o022)
    try:
        write_atomic(tmp_path / "fresh.csv", b"x")
    finally:
        os.umask(mask)

    assert _mode(tmp_path / "fresh.csv") == 0o644


@posix_only
def test_update_through_symlink_edits_target(tmp_path: Path):
    (tmp_path / "shared").mkdir()
    real = _roster(tmp_path / "shared" / "roster.csv")
    link = tmp_path / "roster.csv"
    link.symlink_to(real)

    update_record(link, PlayerUpdate(barcode="123", first_name="Anne"))

    assert link.is_symlink()
    assert load_roster(real).players[0].first_name == "Anne"


def test_failed_replace_leaves_old_file(tmp_path: Path, monkeypatch):
    path = tmp_path / "roster.csv"
    path.write_bytes(b"old")

    def _fail(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(files.os, "replace", _fail)

    with pytest.raises(OSError, match="disk full"):
        write_atomic(path, b"new")

    assert path.read_bytes() == b"old"
    assert [p.name for p in tmp_path.iterdir()] == ["roster.csv"]
