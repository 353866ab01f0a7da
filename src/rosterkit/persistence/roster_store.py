"""Load-mutate-store cycle for single-record roster edits."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rosterkit.codec import encode, load
from rosterkit.errors import RecordNotFoundError
from rosterkit.models import PlayerUpdate, Roster

from .backup import create_backup
from .files import write_atomic


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateResult:
    barcode: str
    matched: bool
    backup_path: Path


def load_roster(path: Path | str) -> Roster:
    """Decode the roster at ``path``; each call re-reads the file."""

    return load(path)


def update_record(path: Path | str, update: PlayerUpdate, *, strict: bool = False) -> UpdateResult:
    """Apply ``update`` to the first record with a matching barcode and rewrite ``path``.

    The file is always backed up first, even when the update changes nothing.
    Only the mutable fields are overwritten; team, jersey number and unknown
    columns are left as they were. When no record matches, the roster is still
    rewritten and the miss is reported through ``UpdateResult.matched``; with
    ``strict=True`` a miss raises :class:`RecordNotFoundError` instead and the
    file is left untouched apart from the backup.
    """

    path = Path(path)
    backup_path = create_backup(path)
    roster = load(path)

    player = roster.find(update.barcode)
    if player is not None:
        player.apply_update(update)
    elif strict:
        raise RecordNotFoundError(update.barcode)
    else:
        logger.warning("No player with barcode %s in %s; rewriting unchanged", update.barcode, path)

    write_atomic(path, encode(roster))
    logger.info("Saved %s players to %s", len(roster.players), path)
    return UpdateResult(barcode=update.barcode, matched=player is not None, backup_path=backup_path)
