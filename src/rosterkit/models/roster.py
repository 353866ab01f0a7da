"""In-memory roster built from one decoded file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .player import FIXED_LABELS, PlayerRecord


@dataclass
class Roster:
    players: List[PlayerRecord] = field(default_factory=list)
    columns: List[str] = field(default_factory=list)
    file_path: Optional[Path] = None
    teams: List[str] = field(init=False, default_factory=list)
    players_by_barcode: Dict[str, PlayerRecord] = field(init=False, default_factory=dict)
    players_by_team: Dict[str, List[PlayerRecord]] = field(init=False, default_factory=dict)

    def __post_init__(self) -> None:
        self.refresh_indexes()

    def refresh_indexes(self) -> None:
        """Rebuild the team list and lookup maps from ``players``."""

        by_barcode: Dict[str, PlayerRecord] = {}
        by_team: Dict[str, List[PlayerRecord]] = {}
        teams: set[str] = set()
        for player in self.players:
            teams.add(player.team)
            if player.barcode:
                by_barcode.setdefault(player.barcode, player)
            if player.team:
                by_team.setdefault(player.team, []).append(player)
        self.teams = sorted(teams)
        self.players_by_barcode = by_barcode
        self.players_by_team = by_team

    def find(self, barcode: str) -> Optional[PlayerRecord]:
        for player in self.players:
            if player.barcode == barcode:
                return player
        return None

    def output_columns(self) -> List[str]:
        """Header for re-encoding: source order first, then anything new."""

        columns = list(self.columns)
        seen = set(columns)
        for label in FIXED_LABELS:
            if label not in seen:
                columns.append(label)
                seen.add(label)
        for player in self.players:
            for key in player.extra:
                if key not in seen:
                    columns.append(key)
                    seen.add(key)
        return columns
