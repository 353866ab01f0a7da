"""Header-driven CSV codec for roster files."""

from __future__ import annotations

import csv
import logging
from io import StringIO
from pathlib import Path
from typing import List

from pydantic import ValidationError

from rosterkit.errors import DecodeError
from rosterkit.models import FIXED_LABELS, PlayerRecord, Roster


logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def _read_text(content: bytes) -> str:
    try:
        # Spreadsheet exports often lead with a BOM.
        return content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"content is not valid UTF-8: {exc}") from exc


def _check_header(header: List[str]) -> None:
    seen: set[str] = set()
    for label in header:
        if label in seen:
            raise DecodeError(f"duplicate column {label!r}", line=1)
        seen.add(label)
    missing = [label for label in FIXED_LABELS if label not in seen]
    if missing:
        raise DecodeError(f"missing required columns: {', '.join(missing)}", line=1)


def decode(content: bytes, *, file_path: Path | None = None) -> Roster:
    """Parse roster bytes into a :class:`Roster`.

    Columns are matched by header label, so column order may differ between
    files. Every value stays a string. Headers outside the fixed schema land in
    each record's ``extra`` mapping under their literal text.
    """

    reader = csv.reader(StringIO(_read_text(content), newline=""), strict=True)
    players: List[PlayerRecord] = []
    header: List[str] = []
    try:
        for values in reader:
            if not values:
                continue
            if not header:
                header = values
                _check_header(header)
                continue
            if len(values) != len(header):
                raise DecodeError(
                    f"expected {len(header)} fields, found {len(values)}",
                    line=reader.line_num,
                )
            try:
                players.append(PlayerRecord.from_row(dict(zip(header, values))))
            except ValidationError as exc:
                raise DecodeError(str(exc), line=reader.line_num) from exc
    except csv.Error as exc:
        raise DecodeError(str(exc), line=reader.line_num) from exc

    logger.debug("Decoded %s records with %s columns", len(players), len(header))
    return Roster(players=players, columns=header, file_path=file_path)


def encode(roster: Roster) -> bytes:
    """Serialize every record under the roster's header, unknown columns included."""

    columns = roster.output_columns()
    buffer = StringIO()
    writer = csv.DictWriter(buffer, fieldnames=columns, restval="", lineterminator="\n")
    writer.writeheader()
    for player in roster.players:
        writer.writerow(player.to_row())
    return buffer.getvalue().encode(ENCODING)


def load(path: Path | str) -> Roster:
    """Read and decode the roster stored at ``path``."""

    path = Path(path)
    return decode(path.read_bytes(), file_path=path)


__all__ = ["decode", "encode", "load"]
