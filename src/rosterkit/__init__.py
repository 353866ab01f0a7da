"""Roster file editing with backups and version control sync."""

from .codec import decode, encode, load
from .errors import DecodeError, PreconditionError, RecordNotFoundError, RosterError, SyncToolError
from .models import PlayerRecord, PlayerUpdate, Roster
from .persistence import (
    UpdateResult,
    create_backup,
    load_roster,
    resolve_destination,
    update_record,
    write_raw_content,
)
from .sync import GitSync, SyncOutcome, SyncResult

__all__ = [
    # Models
    "PlayerRecord",
    "PlayerUpdate",
    "Roster",
    # Codec
    "decode",
    "encode",
    "load",
    # Persistence
    "UpdateResult",
    "create_backup",
    "load_roster",
    "resolve_destination",
    "update_record",
    "write_raw_content",
    # Sync
    "GitSync",
    "SyncOutcome",
    "SyncResult",
    # Errors
    "DecodeError",
    "PreconditionError",
    "RecordNotFoundError",
    "RosterError",
    "SyncToolError",
]
