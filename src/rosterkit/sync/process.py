"""Run external commands and capture their output."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Protocol, Sequence, Tuple

from rosterkit.errors import SyncToolError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    argv: Tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        return (self.stdout or "") + (("\n" + self.stderr) if self.stderr else "")

    def diagnostic(self) -> str:
        return (
            self.stderr.strip()
            or self.stdout.strip()
            or f"{self.argv[0]} exited with status {self.returncode}"
        )


class CommandRunner(Protocol):
    def __call__(
        self, argv: Sequence[str], cwd: Path, env: Optional[Mapping[str, str]] = None
    ) -> CommandResult:
        ...


def run_command(
    argv: Sequence[str], cwd: Path, env: Optional[Mapping[str, str]] = None
) -> CommandResult:
    """Run ``argv`` in ``cwd`` and wait for it; there is no timeout.

    ``env`` entries are layered over the current environment.
    """

    logger.debug("Running %s in %s", " ".join(argv), cwd)
    try:
        proc = subprocess.run(
            list(argv),
            cwd=str(cwd),
            text=True,
            capture_output=True,
            env={**os.environ, **env} if env else None,
        )
    except OSError as exc:
        raise SyncToolError(str(exc), argv=argv) from exc
    return CommandResult(
        argv=tuple(argv),
        returncode=proc.returncode,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )
