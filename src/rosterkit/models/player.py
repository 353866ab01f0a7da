"""Player record models shared by the codec, the mutation path and the CLI."""

from __future__ import annotations

from typing import Dict, Mapping, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


# Header labels for the fixed schema, keyed by model field name. Order is the
# order used when a roster has no source header to follow.
FIXED_COLUMNS: Dict[str, str] = {
    "barcode": "Barcode Number",
    "team": "Team",
    "first_name": "First Name",
    "last_name": "Last Name",
    "jersey_number": "Jersey Number",
    "coach": "Coach",
    "cell_phone": "Cell Phone",
    "email": "Email",
    "products": "Products",
    "packages": "Packages",
}

FIXED_LABELS: Tuple[str, ...] = tuple(FIXED_COLUMNS.values())

# Fields a single-record update is allowed to overwrite.
MUTABLE_FIELDS: Tuple[str, ...] = (
    "first_name",
    "last_name",
    "cell_phone",
    "email",
    "coach",
    "products",
    "packages",
)


class PlayerRecord(BaseModel):
    """One roster row: the fixed columns plus every other column verbatim."""

    barcode: str = Field(alias="Barcode Number")
    team: str = Field(alias="Team")
    first_name: str = Field(alias="First Name")
    last_name: str = Field(alias="Last Name")
    jersey_number: str = Field(alias="Jersey Number")
    coach: str = Field(alias="Coach")
    cell_phone: str = Field(alias="Cell Phone")
    email: str = Field(alias="Email")
    products: str = Field(alias="Products")
    packages: str = Field(alias="Packages")
    extra: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> "PlayerRecord":
        fixed = {label: row[label] for label in FIXED_LABELS}
        extra = {key: value for key, value in row.items() if key not in FIXED_LABELS}
        return cls(**fixed, extra=extra)

    def to_row(self) -> Dict[str, str]:
        row = {label: getattr(self, name) for name, label in FIXED_COLUMNS.items()}
        row.update(self.extra)
        return row

    def apply_update(self, update: "PlayerUpdate") -> None:
        for name in MUTABLE_FIELDS:
            setattr(self, name, getattr(update, name))


class PlayerUpdate(BaseModel):
    """Replacement values for the mutable fields of the record with ``barcode``."""

    barcode: str
    first_name: str = ""
    last_name: str = ""
    cell_phone: str = ""
    email: str = ""
    coach: str = "N"
    products: str = ""
    packages: str = ""

    model_config = ConfigDict(frozen=True)
