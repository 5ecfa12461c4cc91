# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy for protomodel."""

# ###############
# Public Interface
# ###############


class ProtomodelError(Exception):
    """Base class for all errors raised by protomodel."""


class InvalidPackageNameError(ProtomodelError, IndexError):
    """Raised when a service name cannot be derived from a package name."""


class ConfigError(ProtomodelError):
    """Raised when a configuration file is invalid or cannot be loaded."""


class SnapshotError(ProtomodelError, ValueError):
    """Raised when a package snapshot cannot be decoded."""
