from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from relkit.npm.package_json import PackageJson
from relkit.services.release.config import DEFAULT_ACCESS, DEFAULT_BUILD_SCRIPT, STASH_NAME


BuildRunner = Literal["npm run", "pnpm"]


@dataclass(frozen=True, slots=True)
class ReleaseOptions:
    """Release flags, resolved once from the command line.

    None means the flag was not given; defaults are applied when the
    release context is built.
    """

    verbose: bool = False
    version: str | None = None
    origin: str | None = None
    npm: bool = False
    access: str | None = None
    build: str | None = None


@dataclass(frozen=True, slots=True)
class ReleaseContext:
    """Validated inputs of one release run."""

    project: PackageJson | None
    options: ReleaseOptions
    version: str
    origin: str
    build_runner: BuildRunner
    stash_name: str = STASH_NAME

    @property
    def tag(self) -> str:
        return f"v{self.version}"

    @property
    def access(self) -> str:
        return self.options.access or DEFAULT_ACCESS

    @property
    def build_command(self) -> str:
        return f"{self.build_runner} {self.options.build or DEFAULT_BUILD_SCRIPT}"

    @property
    def package_name(self) -> str | None:
        return self.project.name if self.project is not None else None


@dataclass(frozen=True, slots=True)
class ReleaseSummary:
    package: str | None
    message: str
    origin: str
    tag: str
    npm_publish: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "package": self.package,
            "message": self.message,
            "origin": self.origin,
            "tag": self.tag,
            "npmPublish": self.npm_publish,
        }
