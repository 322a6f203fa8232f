"""Release/publish orchestration."""

from relkit.services.release.errors import ReleaseError
from relkit.services.release.model import (
    BuildRunner,
    ReleaseContext,
    ReleaseOptions,
    ReleaseSummary,
)
from relkit.services.release.service import (
    execute_release,
    prepare_release,
    publish_command,
    release,
)

__all__ = [
    "BuildRunner",
    "ReleaseContext",
    "ReleaseError",
    "ReleaseOptions",
    "ReleaseSummary",
    "execute_release",
    "prepare_release",
    "publish_command",
    "release",
]
