from pathlib import Path

import pytest

from rosterkit.cli import main
from rosterkit.persistence import load_roster


HEADER = "Barcode Number,Team,First Name,Last Name,Jersey Number,Coach,Cell Phone,Email,Products,Packages,Size"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "ROSTERKIT_DOWNLOADS_DIR",
        "ROSTERKIT_SYNC_PARENT",
        "ROSTERKIT_SYNC_DIR",
        "ROSTERKIT_SYNC_REMOTE",
        "ROSTERKIT_STRICT_BARCODE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def roster_path(tmp_path: Path) -> Path:
    path = tmp_path / "roster.csv"
    path.write_text(
        "\n".join(
            [
                HEADER,
                "123,Red,Ann,Lee,7,N,555-1111,a@x.com,Hat,Pkg1,M",
                "124,Blue,Bo,Diaz-C,12,Y,,,810T,,L",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return path


def test_show_lists_teams(roster_path: Path, capsys):
    assert main(["show", str(roster_path)]) == 0

    out = capsys.readouterr().out
    assert "2 players on 2 teams" in out
    assert "Bo Diaz (coach)" in out


def test_update_only_changes_supplied_fields(roster_path: Path, capsys):
    assert main(["update", str(roster_path), "--barcode", "123", "--first-name", "Anne"]) == 0

    player = load_roster(roster_path).players[0]
    assert player.first_name == "Anne"
    assert player.cell_phone == "555-1111"
    assert player.extra == {"Size": "M"}
    assert "Updated 123" in capsys.readouterr().out


def test_update_rejects_invalid_phone(roster_path: Path, capsys):
    original = roster_path.read_bytes()

    assert main(["update", str(roster_path), "--barcode", "123", "--phone", "12345"]) == 1

    assert roster_path.read_bytes() == original
    assert "10 digits" in capsys.readouterr().err


def test_update_miss_reports_and_strict_fails(roster_path: Path, capsys, monkeypatch):
    assert main(["update", str(roster_path), "--barcode", "999", "--first-name", "X"]) == 0
    assert "No player with barcode 999" in capsys.readouterr().out

    monkeypatch.setenv("ROSTERKIT_STRICT_BARCODE", "1")
    assert main(["update", str(roster_path), "--barcode", "999", "--first-name", "X"]) == 1


def test_order_applies_coach_rules(roster_path: Path):
    assert main(["order", str(roster_path), "--barcode", "123", "--coach", "--item", "A=2"]) == 0

    player = load_roster(roster_path).players[0]
    assert player.coach == "Y"
    assert player.last_name == "Lee-C"
    assert player.products == "810T"
    assert player.packages == "A,A"


def test_backup_prints_new_path(roster_path: Path, capsys):
    assert main(["backup", str(roster_path)]) == 0

    backup = Path(capsys.readouterr().out.strip())
    assert backup.read_bytes() == roster_path.read_bytes()


def test_backup_missing_file_fails(tmp_path: Path, capsys):
    assert main(["backup", str(tmp_path / "missing.csv")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_write_bare_name_uses_downloads_setting(roster_path: Path, tmp_path: Path, monkeypatch):
    downloads = tmp_path / "dl"
    monkeypatch.setenv("ROSTERKIT_DOWNLOADS_DIR", str(downloads))

    assert main(["write", "export.csv", "--source", str(roster_path)]) == 0

    assert (downloads / "export.csv").read_bytes() == roster_path.read_bytes()


def test_sync_path_and_push_precondition(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setenv("ROSTERKIT_SYNC_PARENT", str(tmp_path))

    assert main(["sync", "path"]) == 0
    assert capsys.readouterr().out.strip() == str((tmp_path / "roster-data").resolve())

    assert main(["sync", "push", "fix typo"]) == 1
    assert "pull first" in capsys.readouterr().err
