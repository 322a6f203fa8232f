"""Reading `package.json` and deriving release metadata from it."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path

from relkit.core.result import Err, Ok, Result
from relkit.core.structured import StrDict, as_str_dict, get_str

__all__ = [
    "PackageJson",
    "PackageJsonError",
    "get_pre_release_tag",
    "read_package_json",
]

PACKAGE_JSON = "package.json"

_PRE_RELEASE_RE = re.compile(r"-(\w+)\.\d+")


@dataclass(frozen=True, slots=True)
class PackageJsonError:
    message: str
    path: Path


@dataclass(frozen=True, slots=True)
class PackageJson:
    """Parsed package.json.

    `version` is kept as found (any JSON type) so callers can tell a
    missing version from one of the wrong type.
    """

    data: StrDict

    @property
    def name(self) -> str | None:
        return get_str(self.data, "name")

    @property
    def version(self) -> object:
        return self.data.get("version")


def read_package_json(root: Path) -> Result[PackageJson, PackageJsonError]:
    path = root / PACKAGE_JSON
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(PackageJsonError(message=f"cannot read {PACKAGE_JSON}: {e}", path=path))

    try:
        raw: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(PackageJsonError(message=f"invalid JSON in {PACKAGE_JSON}: {e}", path=path))

    data = as_str_dict(raw)
    if data is None:
        return Err(PackageJsonError(message=f"{PACKAGE_JSON} is not a JSON object", path=path))
    return Ok(PackageJson(data=data))


def get_pre_release_tag(version: str) -> str | None:
    """Return the pre-release identifier of a semantic version.

    "1.0.0-beta.1" -> "beta", "2.0.0-rc.3" -> "rc", "1.0.0" -> None.
    """
    m = _PRE_RELEASE_RE.search(version)
    if m is None:
        return None
    return m.group(1)
