"""npm package metadata and installed-package checks."""

from .package_json import PackageJson, PackageJsonError, get_pre_release_tag, read_package_json
from .packages import NpmError, is_package_installed, list_packages

__all__ = [
    # package_json
    "PackageJson",
    "PackageJsonError",
    "get_pre_release_tag",
    "read_package_json",
    # packages
    "NpmError",
    "is_package_installed",
    "list_packages",
]
