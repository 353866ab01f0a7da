"""Order quantities and the naming rules applied when a player's order is saved."""

from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Dict, Mapping, Tuple

from rosterkit.config.catalog import (
    FILE_TO_INTERNAL_CODES,
    INTERNAL_TO_FILE_CODES,
    PACKAGE,
    get_item,
)
from rosterkit.models import PlayerRecord, PlayerUpdate


logger = logging.getLogger(__name__)

COACH_FLAG = "Y"
NOT_COACH_FLAG = "N"
COACH_SUFFIX = "-C"
NO_ORDER_SUFFIX = "-N"
COACH_FREE_ITEM = "810T"

_PLACEHOLDER_NAME = re.compile(r"^Player \d+$")


def parse_quantities(text: str) -> Dict[str, int]:
    """Count the codes in a comma-separated list such as ``"A,A,57"``."""

    if not text:
        return {}
    codes = [code.strip() for code in text.split(",")]
    return dict(Counter(code for code in codes if code))


def format_quantities(quantities: Mapping[str, int]) -> str:
    items: list[str] = []
    for code, count in quantities.items():
        items.extend([code] * count)
    return ",".join(items)


def to_internal_quantities(products: str, packages: str) -> Dict[str, int]:
    """Merge both order columns into one quantity map keyed by internal codes."""

    merged: Counter[str] = Counter()
    for column, text in (("products", products), ("packages", packages)):
        conversion = FILE_TO_INTERNAL_CODES[column]
        for code, count in parse_quantities(text).items():
            merged[conversion.get(code, code)] += count
    return dict(merged)


def _to_file_quantities(quantities: Mapping[str, int]) -> Dict[str, int]:
    converted: Counter[str] = Counter()
    for code, count in quantities.items():
        converted[INTERNAL_TO_FILE_CODES.get(code, code)] += count
    return dict(converted)


def split_order_columns(quantities: Mapping[str, int]) -> Tuple[str, str]:
    """Return the ``(products, packages)`` column values for ``quantities``.

    Codes missing from the catalog are dropped.
    """

    products: Dict[str, int] = {}
    packages: Dict[str, int] = {}
    for code, count in quantities.items():
        if count <= 0:
            continue
        try:
            item = get_item(code)
        except KeyError:
            logger.debug("Dropping unknown item code %s", code)
            continue
        target = packages if item.category == PACKAGE else products
        target[code] = count
    return (
        format_quantities(_to_file_quantities(products)),
        format_quantities(_to_file_quantities(packages)),
    )


def is_placeholder_name(name: str) -> bool:
    return bool(_PLACEHOLDER_NAME.match(name.strip()))


def is_coach(record: PlayerRecord) -> bool:
    return record.coach == COACH_FLAG


def _strip_suffix(text: str, suffix: str) -> str:
    return text[: -len(suffix)] if text.endswith(suffix) else text


def display_name(record: PlayerRecord) -> str:
    full_name = f"{record.first_name} {record.last_name}".strip()
    if is_placeholder_name(full_name):
        return record.barcode
    cleaned = _strip_suffix(_strip_suffix(full_name, COACH_SUFFIX), NO_ORDER_SUFFIX)
    return cleaned or record.barcode


def build_player_update(
    record: PlayerRecord,
    *,
    name: str,
    phone: str,
    email: str,
    is_coach: bool,
    quantities: Mapping[str, int],
) -> PlayerUpdate:
    """Turn edited form values into the update written for ``record``.

    An empty ``name`` keeps the record's current name. Coaches get a ``-C``
    last-name suffix and one free team print. Players without any order get a
    ``-N`` suffix, unless they still carry a placeholder name; ordering again
    removes it.
    """

    if name.strip():
        first_name, _, last_name = name.strip().partition(" ")
        last_name = last_name.strip()
    else:
        first_name, last_name = record.first_name, record.last_name

    ordered = {code: count for code, count in quantities.items() if count > 0}
    if is_coach:
        ordered.setdefault(COACH_FREE_ITEM, 1)
        if not last_name.endswith(COACH_SUFFIX):
            last_name += COACH_SUFFIX
    elif not ordered:
        full_name = f"{first_name} {last_name}".strip()
        if not is_placeholder_name(full_name) and not last_name.endswith(NO_ORDER_SUFFIX):
            last_name += NO_ORDER_SUFFIX
    else:
        last_name = _strip_suffix(last_name, NO_ORDER_SUFFIX)

    products, packages = split_order_columns(ordered)
    return PlayerUpdate(
        barcode=record.barcode,
        first_name=first_name,
        last_name=last_name,
        cell_phone=phone,
        email=email,
        coach=COACH_FLAG if is_coach else NOT_COACH_FLAG,
        products=products,
        packages=packages,
    )
