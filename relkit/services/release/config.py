from __future__ import annotations


# Message of the stash created before building; also used to find it again.
STASH_NAME = "pre-release"

DEFAULT_BUILD_SCRIPT = "build"
DEFAULT_ORIGIN = "origin"

DEFAULT_ACCESS = "public"
ALLOWED_ACCESS: tuple[str, ...] = ("public", "restricted")

# Globally installed package that switches the build runner to pnpm.
PNPM_PACKAGE = "pnpm"
