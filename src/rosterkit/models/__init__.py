"""Canonical roster models."""

from .player import FIXED_COLUMNS, FIXED_LABELS, MUTABLE_FIELDS, PlayerRecord, PlayerUpdate
from .roster import Roster

__all__ = [
    "FIXED_COLUMNS",
    "FIXED_LABELS",
    "MUTABLE_FIELDS",
    "PlayerRecord",
    "PlayerUpdate",
    "Roster",
]
