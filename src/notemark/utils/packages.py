#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/utils/packages.py
"""Helpers for checking installed optional packages."""

from __future__ import annotations

from importlib import metadata
from typing import Optional, Tuple

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version


def get_package_version(package_name: str) -> Optional[str]:
    """Get the installed version of a distribution, or None if absent.

    Parameters
    ----------
    package_name : str
        Distribution name as used with pip (not the import name)

    """
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Check whether the installed package satisfies a version specifier.

    Parameters
    ----------
    package_name : str
        Distribution name
    version_spec : str
        Specifier such as ``">=3.1.0"``; an empty string accepts any version

    Returns
    -------
    tuple
        (meets_requirement, installed_version)

    Raises
    ------
    ValueError
        If ``version_spec`` is not a valid specifier

    """
    installed_version = get_package_version(package_name)
    if not installed_version:
        return False, None

    try:
        spec = SpecifierSet(version_spec)
    except InvalidSpecifier as e:
        raise ValueError(f"Invalid version specifier for {package_name}: {version_spec!r}") from e

    try:
        return Version(installed_version) in spec, installed_version
    except InvalidVersion:
        # Non-PEP 440 local builds cannot be compared
        return False, installed_version
