import pytest

from rosterkit.models import PlayerRecord
from rosterkit.orders import (
    build_player_update,
    display_name,
    format_quantities,
    is_placeholder_name,
    parse_quantities,
    split_order_columns,
    to_internal_quantities,
)


def _record(**overrides) -> PlayerRecord:
    values = {
        "barcode": "123",
        "team": "Red",
        "first_name": "Ann",
        "last_name": "Lee",
        "jersey_number": "7",
        "coach": "N",
        "cell_phone": "",
        "email": "",
        "products": "",
        "packages": "",
    }
    values.update(overrides)
    return PlayerRecord(**values)


def test_parse_and_format_quantities():
    assert parse_quantities(" A, A ,57,,") == {"A": 2, "57": 1}
    assert parse_quantities("") == {}
    assert format_quantities({"A": 2, "57": 1}) == "A,A,57"


def test_digital_download_codes_map_by_column():
    quantities = to_internal_quantities("DD,57", "DD,A")

    assert quantities == {"DDPr": 1, "57": 1, "DDPa": 1, "A": 1}
    assert split_order_columns(quantities) == ("DD,57", "DD,A")


def test_split_order_columns_separates_packages_and_drops_unknown():
    products, packages = split_order_columns({"A": 2, "810T": 1, "57F": 1, "ZZZ": 4, "B": 0})

    assert products == "810T,57F"
    assert packages == "A,A"


def test_coach_gets_suffix_and_free_team_print():
    update = build_player_update(
        _record(),
        name="Ann Lee",
        phone="5551112222",
        email="ann@x.com",
        is_coach=True,
        quantities={"A": 1},
    )

    assert update.coach == "Y"
    assert update.last_name == "Lee-C"
    assert update.products == "810T"
    assert update.packages == "A"


def test_coach_suffix_is_not_doubled():
    update = build_player_update(
        _record(last_name="Lee-C", coach="Y"),
        name="",
        phone="",
        email="",
        is_coach=True,
        quantities={"810T": 2},
    )

    assert update.last_name == "Lee-C"
    assert update.products == "810T,810T"


def test_no_order_player_gets_suffix():
    update = build_player_update(_record(), name="Ann Lee", phone="", email="", is_coach=False, quantities={})

    assert update.last_name == "Lee-N"
    assert update.coach == "N"
    assert (update.products, update.packages) == ("", "")


def test_placeholder_name_keeps_no_suffix():
    record = _record(first_name="Player", last_name="34")

    update = build_player_update(record, name="", phone="", email="", is_coach=False, quantities={})

    assert update.last_name == "34"


def test_ordering_removes_no_order_suffix():
    update = build_player_update(
        _record(last_name="Lee-N"), name="", phone="", email="", is_coach=False, quantities={"57": 1}
    )

    assert update.last_name == "Lee"
    assert update.products == "57"


def test_name_splits_at_first_space():
    update = build_player_update(
        _record(), name="Mary Ann Van Dyke", phone="", email="", is_coach=False, quantities={"A": 1}
    )

    assert (update.first_name, update.last_name) == ("Mary", "Ann Van Dyke")


@pytest.mark.parametrize(
    ("first", "last", "expected"),
    [
        ("Ann", "Lee-C", "Ann Lee"),
        ("Ann", "Lee-N", "Ann Lee"),
        ("Player", "34", "123"),
        ("", "", "123"),
    ],
)
def test_display_name(first, last, expected):
    assert display_name(_record(first_name=first, last_name=last)) == expected


def test_is_placeholder_name():
    assert is_placeholder_name(" Player 7 ")
    assert not is_placeholder_name("Player Seven")
