# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of package snapshots.

Snapshots are stored as compact JSON with sorted keys, so two equal packages
always produce byte-identical snapshots regardless of the order in which their
options were populated. The format is versioned so future schema changes can
be detected. Source descriptors attached to types are not part of a snapshot.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pydantic

from protomodel.errors import SnapshotError
from protomodel.model.entities import Package

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

SNAPSHOT_FORMAT_VERSION = "1"
SNAPSHOT_SUFFIX = ".protomodel.json"


def serialize(package: Package) -> str:
    """Serialize a Package to a compact JSON string."""
    obj = {"v": SNAPSHOT_FORMAT_VERSION, "package": package.model_dump(mode="json")}
    return json.dumps(obj, separators=(",", ":"), sort_keys=True)


def deserialize(data: str) -> Package:
    """Deserialize a Package from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`Package`. Types that were shared between
        fields in the original package are independent copies afterwards.

    Raises:
        SnapshotError: If the data is not valid JSON, the format version is
            not recognised, or the package does not match the model.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"Invalid snapshot JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise SnapshotError("Snapshot must be a JSON object")

    version = obj.get("v")
    if version != SNAPSHOT_FORMAT_VERSION:
        raise SnapshotError(f"Unsupported snapshot format version: {version!r}")

    try:
        return Package.model_validate(obj.get("package"))
    except pydantic.ValidationError as exc:
        raise SnapshotError(f"Invalid package in snapshot: {exc}") from exc


def write_snapshot(package: Package, path: Path) -> None:
    """Write a snapshot of *package* to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(package), encoding="utf-8")
    logger.debug("Wrote snapshot of package %s to %s", package.name, path)


def read_snapshot(path: Path) -> Package:
    """Read and deserialize a package snapshot from *path*."""
    logger.debug("Reading snapshot %s", path)
    return deserialize(path.read_text(encoding="utf-8"))
