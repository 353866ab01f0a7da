"""Command-line interface for viewing, editing and syncing roster files."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rosterkit.config import load_settings
from rosterkit.errors import RecordNotFoundError, RosterError
from rosterkit.models import PlayerUpdate
from rosterkit.orders import build_player_update, display_name, is_coach, to_internal_quantities
from rosterkit.persistence import create_backup, load_roster, update_record, write_raw_content
from rosterkit.sync import GitSync
from rosterkit.validation import is_valid_email, is_valid_phone, phone_digits


logger = logging.getLogger(__name__)

_UPDATE_FIELDS = {
    "first_name": "--first-name",
    "last_name": "--last-name",
    "cell_phone": "--phone",
    "email": "--email",
    "coach": "--coach",
    "products": "--products",
    "packages": "--packages",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Edit and share player roster files")
    parser.add_argument("--settings", type=Path, default=None, help="Optional settings JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="List teams and players in a roster file")
    show.add_argument("path", type=Path, help="Roster CSV path")
    show.add_argument("--team", default=None, help="Only list players on this team")

    update = commands.add_parser("update", help="Overwrite the editable fields of one player")
    update.add_argument("path", type=Path, help="Roster CSV path")
    update.add_argument("--barcode", required=True, help="Barcode of the player to update")
    for name, flag in _UPDATE_FIELDS.items():
        update.add_argument(flag, dest=name, default=None, help=f"New {name.replace('_', ' ')}")
    update.add_argument(
        "--strict",
        action="store_true",
        help="Fail when no player has the barcode instead of rewriting unchanged",
    )

    order = commands.add_parser("order", help="Record a player's order and contact details")
    order.add_argument("path", type=Path, help="Roster CSV path")
    order.add_argument("--barcode", required=True, help="Barcode of the player to update")
    order.add_argument("--name", default="", help="Full name; empty keeps the current name")
    order.add_argument("--phone", default=None, help="Cell phone number")
    order.add_argument("--email", default=None, help="Email address")
    order.add_argument("--coach", action=argparse.BooleanOptionalAction, default=None)
    order.add_argument(
        "--item",
        action="append",
        default=[],
        help="Item quantity as CODE=COUNT (repeatable); replaces the current order",
    )

    backup = commands.add_parser("backup", help="Create a timestamped copy of a file")
    backup.add_argument("path", type=Path, help="File to back up")

    write = commands.add_parser("write", help="Write content to a file, backing up any existing copy")
    write.add_argument("destination", help="File name (saved to Downloads) or path")
    write.add_argument("--source", type=Path, required=True, help="File whose bytes are written")

    sync = commands.add_parser("sync", help="Synchronize the shared roster directory")
    sync_commands = sync.add_subparsers(dest="sync_command", required=True)
    sync_commands.add_parser("pull", help="Clone or pull the shared directory")
    push = sync_commands.add_parser("push", help="Commit and push all changes")
    push.add_argument("message", help="Commit message")
    sync_commands.add_parser("path", help="Print the shared directory path")

    return parser


def _parse_items(entries: Sequence[str]) -> dict[str, int]:
    quantities: dict[str, int] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid item entry '{entry}', expected CODE=COUNT")
        code, count = entry.split("=", 1)
        quantities[code.strip()] = int(count)
    return quantities


def _checked_phone(phone: str) -> str:
    if not is_valid_phone(phone):
        raise ValueError(f"Phone number must be 10 digits: {phone!r}")
    return phone_digits(phone)


def _checked_email(email: str) -> str:
    if not is_valid_email(email):
        raise ValueError(f"Invalid email address: {email!r}")
    return email.strip()


def _show(args: argparse.Namespace) -> None:
    roster = load_roster(args.path)
    print(f"{len(roster.players)} players on {len(roster.teams)} teams")
    teams = [args.team] if args.team else [team for team in roster.teams if team]
    for team in teams:
        print(f"{team}:")
        for player in roster.players_by_team.get(team, []):
            marker = " (coach)" if is_coach(player) else ""
            print(f"  {player.barcode}  #{player.jersey_number:<3} {display_name(player)}{marker}")


def _update(args: argparse.Namespace, strict: bool) -> None:
    roster = load_roster(args.path)
    current = roster.find(args.barcode)
    if args.cell_phone is not None:
        args.cell_phone = _checked_phone(args.cell_phone)
    if args.email is not None:
        args.email = _checked_email(args.email)
    values = {}
    for name in _UPDATE_FIELDS:
        supplied = getattr(args, name)
        if supplied is not None:
            values[name] = supplied
        elif current is not None:
            values[name] = getattr(current, name)
    result = update_record(args.path, PlayerUpdate(barcode=args.barcode, **values), strict=strict or args.strict)
    if result.matched:
        print(f"Updated {args.barcode}; backup at {result.backup_path}")
    else:
        print(f"No player with barcode {args.barcode}; file rewritten unchanged (backup at {result.backup_path})")


def _order(args: argparse.Namespace, strict: bool) -> None:
    roster = load_roster(args.path)
    record = roster.find(args.barcode)
    if record is None:
        raise RecordNotFoundError(args.barcode)
    quantities = (
        _parse_items(args.item)
        if args.item
        else to_internal_quantities(record.products, record.packages)
    )
    phone = _checked_phone(args.phone) if args.phone is not None else record.cell_phone
    email = _checked_email(args.email) if args.email is not None else record.email
    update = build_player_update(
        record,
        name=args.name,
        phone=phone,
        email=email,
        is_coach=is_coach(record) if args.coach is None else args.coach,
        quantities=quantities,
    )
    result = update_record(args.path, update, strict=strict)
    print(f"Saved order for {display_name(record)}; backup at {result.backup_path}")


def _sync(args: argparse.Namespace, git_sync: GitSync) -> None:
    if args.sync_command == "path":
        print(git_sync.working_tree())
        return
    if args.sync_command == "pull":
        result = git_sync.pull()
    else:
        result = git_sync.push(args.message)
    print(result.message or result.outcome.value)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.settings)
        logger.debug("Using settings %s", settings)
        if args.command == "show":
            _show(args)
        elif args.command == "update":
            _update(args, settings.strict_barcode)
        elif args.command == "order":
            _order(args, settings.strict_barcode)
        elif args.command == "backup":
            print(create_backup(args.path))
        elif args.command == "write":
            target = write_raw_content(
                args.destination,
                args.source.read_bytes(),
                downloads_dir=settings.downloads_dir,
            )
            print(f"Saved to {target}")
        elif args.command == "sync":
            _sync(args, GitSync.from_settings(settings))
    except (RosterError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
