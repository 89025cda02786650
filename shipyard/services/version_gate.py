"""Schema version compatibility gate.

The declared version only decides whether a document may be loaded at all;
it never selects which migrations run.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from shipyard.services.report import VersionError

CURRENT_SCHEMA_VERSION = "1.2.0"
SUPPORTED_MAJOR_VERSION = 1

VERSION_PATTERN = re.compile(r"^([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?(?:[-+].*)?$", re.ASCII)


class SchemaVersion(NamedTuple):
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


OLDEST_VERSION = SchemaVersion(0, 0, 0)


def parse_version(value: object) -> SchemaVersion:
    """Read a declared version; prerelease and build suffixes are ignored."""
    if isinstance(value, bool):
        raise VersionError(f"Unrecognised schema version: {value!r}")
    if isinstance(value, int):
        return SchemaVersion(value, 0, 0)
    if not isinstance(value, str):
        raise VersionError(f"Unrecognised schema version: {value!r}")

    match = VERSION_PATTERN.match(value.strip())
    if match is None:
        raise VersionError(f"Unrecognised schema version: {value!r}")
    return SchemaVersion(*(int(part or 0) for part in match.groups()))


def check(doc: dict) -> SchemaVersion:
    """Return the declared version, raising VersionError if it is too new.

    Documents that predate the `schemaVersion` field carry `version`; a
    document with neither is treated as the oldest version.
    """
    if "schemaVersion" in doc:
        raw = doc["schemaVersion"]
    elif "version" in doc:
        raw = doc["version"]
    else:
        return OLDEST_VERSION

    if raw is None:
        return OLDEST_VERSION
    version = parse_version(raw)
    if version.major > SUPPORTED_MAJOR_VERSION:
        raise VersionError(
            f"This file was saved by a newer version of the application "
            f"(schema {version}, supported up to {SUPPORTED_MAJOR_VERSION}.x)"
        )
    return version
