# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for populated packages (position collisions, duplicate names, etc.)."""

from protomodel.validation.checks import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
