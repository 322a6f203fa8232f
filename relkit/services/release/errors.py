from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class ReleaseError:
    kind: Literal[
        "missing_version",
        "invalid_access",
        "command_failed",
    ]
    message: str
    hint: str | None = None
