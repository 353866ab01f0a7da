"""Runtime settings: defaults, an optional JSON profile, then environment overrides."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from rosterkit.errors import PreconditionError


logger = logging.getLogger(__name__)

DEFAULT_SYNC_DIR_NAME = "roster-data"
DEFAULT_GIT_EXECUTABLE = "git"

_DOWNLOADS_ENV = "ROSTERKIT_DOWNLOADS_DIR"
_SYNC_PARENT_ENV = "ROSTERKIT_SYNC_PARENT"
_SYNC_DIR_ENV = "ROSTERKIT_SYNC_DIR"
_SYNC_REMOTE_ENV = "ROSTERKIT_SYNC_REMOTE"
_GIT_ENV = "ROSTERKIT_GIT"
_STRICT_BARCODE_ENV = "ROSTERKIT_STRICT_BARCODE"

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_PATH_FIELDS = {"downloads_dir", "sync_parent_dir"}


def _parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
    return None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    parsed = _parse_bool(raw)
    if parsed is not None:
        return parsed
    logger.warning("Invalid boolean for %s: %s; using default %s", name, raw, default)
    return default


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if not raw:
        return default
    return Path(raw).expanduser()


@dataclass
class RosterSettings:
    downloads_dir: Optional[Path] = None
    sync_parent_dir: Optional[Path] = None
    sync_dir_name: str = DEFAULT_SYNC_DIR_NAME
    sync_remote: Optional[str] = None
    git_executable: str = DEFAULT_GIT_EXECUTABLE
    strict_barcode: bool = False

    @classmethod
    def load(cls, path: Path) -> "RosterSettings":
        data: Dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown settings in %s: %s", path, ", ".join(unknown))
        values = {key: value for key, value in data.items() if key in known}
        for key in _PATH_FIELDS:
            if values.get(key):
                values[key] = Path(values[key]).expanduser()
        if "strict_barcode" in values:
            parsed = _parse_bool(values["strict_barcode"])
            if parsed is None:
                raise ValueError(f"strict_barcode in {path} must be a boolean, got {values['strict_barcode']!r}")
            values["strict_barcode"] = parsed
        return cls(**values)

    def save(self, path: Path) -> None:
        payload = asdict(self)
        for key in _PATH_FIELDS:
            if payload[key] is not None:
                payload[key] = str(payload[key])
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def with_env_overrides(self) -> "RosterSettings":
        return replace(
            self,
            downloads_dir=_env_path(_DOWNLOADS_ENV, self.downloads_dir),
            sync_parent_dir=_env_path(_SYNC_PARENT_ENV, self.sync_parent_dir),
            sync_dir_name=os.getenv(_SYNC_DIR_ENV) or self.sync_dir_name,
            sync_remote=os.getenv(_SYNC_REMOTE_ENV) or self.sync_remote,
            git_executable=os.getenv(_GIT_ENV) or self.git_executable,
            strict_barcode=_env_bool(_STRICT_BARCODE_ENV, self.strict_barcode),
        )


def load_settings(path: Path | None = None) -> RosterSettings:
    """Build settings from an optional JSON profile with environment overrides applied."""

    base = RosterSettings.load(path) if path is not None else RosterSettings()
    return base.with_env_overrides()


class PlatformLocator(Protocol):
    def resolve_sibling_directory(self, name: str) -> Path:
        ...


class ConfiguredLocator:
    """Resolve sibling directories against a configured parent directory."""

    def __init__(self, parent_dir: Path | str | None):
        self.parent_dir = Path(parent_dir) if parent_dir is not None else None

    def resolve_sibling_directory(self, name: str) -> Path:
        if self.parent_dir is None:
            raise PreconditionError(
                f"No parent directory configured for {name!r}; set {_SYNC_PARENT_ENV}"
            )
        return (self.parent_dir / name).resolve()
