#
# Copyright 2024 wallentines and gmv Project Authors. All rights reserved.
# Use of this source code is governed by a MIT-style
# license that can be found at
#
# https://opensource.org/license/MIT
#
# The above copyright notice and this permission
# notice shall be included in all copies or
# substantial portions of the Software.

import re
from typing import Optional, Tuple

SNAPSHOT_QUALIFIER = "SNAPSHOT"

_VERSION_PATTERN = re.compile(r'^(\d+)\.(\d+)\.(\d+)(?:-([0-9A-Za-z.\-]+))?$')


def parse_version(version_str: str) -> Optional[Tuple[int, int, int, str]]:
    """
    Parse a Maven style version string (e.g., '0.2.0', '0.3.0-SNAPSHOT').

    Args:
        version_str: Version string to parse

    Returns:
        Tuple of (major, minor, patch, qualifier) or None if parsing fails.
        The qualifier is an empty string for release versions.
    """
    if not isinstance(version_str, str):
        return None

    match = _VERSION_PATTERN.match(version_str.strip())
    if match:
        return (
            int(match.group(1)),
            int(match.group(2)),
            int(match.group(3)),
            match.group(4) or "",
        )
    return None


def is_snapshot(version_str: str) -> bool:
    """Check whether a version is a Maven pre-release snapshot."""
    parsed = parse_version(version_str)
    if parsed is None:
        return version_str.upper().endswith(f"-{SNAPSHOT_QUALIFIER}")
    return parsed[3].upper() == SNAPSHOT_QUALIFIER


def release_of(version_str: str) -> str:
    """
    Get the release version a snapshot leads up to.

    '0.3.0-SNAPSHOT' -> '0.3.0', release versions are returned unchanged.
    """
    parsed = parse_version(version_str)
    if parsed is None:
        return version_str
    major, minor, patch, _ = parsed
    return f"{major}.{minor}.{patch}"
