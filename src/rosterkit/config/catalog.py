"""Order item catalog used when building the Products and Packages columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple


PACKAGE = "package"
PRODUCT = "product"
FAMILY_VARIANT = "f-variant"
TEAM_VARIANT = "t-variant"

CATEGORIES: Tuple[str, ...] = (PACKAGE, PRODUCT, FAMILY_VARIANT, TEAM_VARIANT)


@dataclass(frozen=True)
class ItemConfig:
    code: str
    display_name: str
    price: int
    category: str


def _items(category: str, *entries: Tuple[str, str, int]) -> Tuple[ItemConfig, ...]:
    return tuple(ItemConfig(code, name, price, category) for code, name, price in entries)


_ITEMS: Tuple[ItemConfig, ...] = (
    *_items(
        PACKAGE,
        ("A", "Package A", 15),
        ("B", "Package B", 20),
        ("C", "Package C", 25),
        ("D", "Package D", 35),
        ("E", "Package E", 44),
        ("F", "Package F", 53),
        ("G", "Package G", 60),
        ("H", "Package H", 45),
        ("DDPa", "Digital Download", 30),
    ),
    *_items(
        PRODUCT,
        ("57", "5x7 Individual", 9),
        ("810", "8x10 Individual", 15),
        ("23", "4 Wallets", 8),
        ("23x8", "8 Wallets", 14),
        ("Bu", "Button", 9),
        ("ABa", "Acrylic Button", 9),
        ("Ma", "Magnet", 9),
        ("AMa", "Acrylic Magnet", 9),
        ("Kc", "Keychain", 12),
        ("KcS", "Keychain Statuette", 18),
        ("DDPr", "Digital File", 20),
    ),
    *_items(
        FAMILY_VARIANT,
        ("57F", "5x7 - Family", 11),
        ("810F", "8x10 - Family", 17),
        ("23F", "4 Wallets - Family", 10),
        ("23x8F", "8 Wallets - Family", 17),
        ("BuF", "Button - Family", 11),
        ("ABuF", "Acrylic Button - Family", 17),
        ("MaF", "Magnet - Family", 11),
        ("AMaF", "Acrylic Magnet - Family", 17),
        ("KcF", "Keychain - Family", 15),
        ("KcSF", "Keychain Statuette - Family", 23),
        ("DDF", "Digital File - Family", 25),
    ),
    *_items(
        TEAM_VARIANT,
        ("57T", "5x7 - Team", 11),
        ("810T", "8x10 - Team", 17),
    ),
)

_ITEMS_BY_CODE: Dict[str, ItemConfig] = {item.code: item for item in _ITEMS}

# Both digital download variants are written to the file as "DD"; the column
# they appear in decides which internal code they map back to.
INTERNAL_TO_FILE_CODES: Mapping[str, str] = {"DDPa": "DD", "DDPr": "DD"}
FILE_TO_INTERNAL_CODES: Mapping[str, Mapping[str, str]] = {
    "packages": {"DD": "DDPa"},
    "products": {"DD": "DDPr"},
}


def iter_items(category: Optional[str] = None) -> Iterable[ItemConfig]:
    """Return catalog items, optionally restricted to one category."""

    if category is None:
        return iter(_ITEMS)
    if category not in CATEGORIES:
        raise ValueError(f"Unknown item category {category!r}")
    return (item for item in _ITEMS if item.category == category)


def get_item(code: str) -> ItemConfig:
    """Fetch an item by its internal code, raising KeyError if missing."""

    if code not in _ITEMS_BY_CODE:
        raise KeyError(f"No catalog item with code {code!r}")
    return _ITEMS_BY_CODE[code]


def is_package(code: str) -> bool:
    item = _ITEMS_BY_CODE.get(code)
    return item is not None and item.category == PACKAGE
