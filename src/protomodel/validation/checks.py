# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for populated packages.

The model itself only guarantees its local invariants (no duplicate imports,
no duplicate reserved positions). Cross-entity rules such as field position
collisions are the populating scanner's responsibility; these checks let it
verify a package before handing it to a renderer.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from protomodel.model.entities import Enum, Message, Package
from protomodel.model.types import Alias, Basic, Map, Type

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal issue detected during validation.

    The package still renders to a valid schema, but the issue indicates a
    potentially unintentional result of the scan.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A fatal issue detected during validation.

    A package with errors renders to a schema that protobuf compilers reject.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running the validation checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: Fatal errors that indicate an invalid package.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return len(self.errors) > 0


def validate(package: Package) -> ValidationResult:
    """Run all validation checks on a populated package.

    Checks performed:

    1. **Field positions** (error): two fields of a message share a position,
       or a field uses a reserved position.
    2. **Field names** (error): two fields of a message share a name.
    3. **Type names** (error): messages and enums share one namespace within
       the package, so no two of them may have the same name.
    4. **Enum values** (error): two values of an enum share a name.
    5. **Maps** (error): map keys must be integral or string scalars, map
       values cannot be maps, and map fields cannot be repeated.
    6. **RPCs** (error): every RPC needs an input and an output type, and
       RPC names must be unique.
    7. **Empty messages** (warning): a message without fields.
    8. **Enum defaults** (warning): an enum without values, or whose first
       value is not ``0``.

    Args:
        package: The populated package to validate.

    Returns:
        A :class:`ValidationResult` containing any warnings and errors found.
    """
    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    for message in package.messages:
        errors.extend(_check_field_positions(message))
        errors.extend(_check_field_names(message))
        errors.extend(_check_maps(message))
        if not message.fields:
            warnings.append(ValidationWarning(message=f"Message '{message.name}' has no fields"))

    errors.extend(_check_type_names(package))

    for enum in package.enums:
        errors.extend(_check_enum_values(enum))
        warnings.extend(_check_enum_default(enum))

    errors.extend(_check_rpcs(package))

    logger.debug(
        "Validated package %s: %d errors, %d warnings",
        package.name,
        len(errors),
        len(warnings),
    )
    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################

_MAP_KEY_TYPES = frozenset(
    {
        "int32",
        "int64",
        "uint32",
        "uint64",
        "sint32",
        "sint64",
        "fixed32",
        "fixed64",
        "sfixed32",
        "sfixed64",
        "bool",
        "string",
    }
)


def _check_field_positions(message: Message) -> list[ValidationError]:
    errors: list[ValidationError] = []
    seen: dict[int, str] = {}
    for f in message.fields:
        if message.is_reserved(f.pos):
            errors.append(
                ValidationError(message=f"Field '{message.name}.{f.name}' uses reserved position {f.pos}")
            )
        if f.pos in seen:
            errors.append(
                ValidationError(
                    message=f"Fields '{seen[f.pos]}' and '{f.name}' of message '{message.name}' "
                    f"share position {f.pos}"
                )
            )
        else:
            seen[f.pos] = f.name
    return errors


def _check_field_names(message: Message) -> list[ValidationError]:
    return [
        ValidationError(message=f"Duplicate field name '{name}' in message '{message.name}'")
        for name in _duplicates(f.name for f in message.fields)
    ]


def _check_type_names(package: Package) -> list[ValidationError]:
    names = [m.name for m in package.messages] + [e.name for e in package.enums]
    return [
        ValidationError(message=f"Duplicate message or enum name '{name}' in package '{package.name}'")
        for name in _duplicates(names)
    ]


def _check_enum_values(enum: Enum) -> list[ValidationError]:
    return [
        ValidationError(message=f"Duplicate value name '{name}' in enum '{enum.name}'")
        for name in _duplicates(v.name for v in enum.values)
    ]


def _check_enum_default(enum: Enum) -> list[ValidationWarning]:
    if not enum.values:
        return [ValidationWarning(message=f"Enum '{enum.name}' has no values")]
    first = enum.values[0]
    if first.value != 0:
        return [
            ValidationWarning(
                message=f"First value '{first.name}' of enum '{enum.name}' is {first.value}, expected 0"
            )
        ]
    return []


def _check_maps(message: Message) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for f in message.fields:
        if f.repeated and isinstance(_resolve(f.type), Map):
            errors.append(ValidationError(message=f"Map field '{message.name}.{f.name}' cannot be repeated"))
        for map_type in _maps_in(f.type):
            if isinstance(_resolve(map_type.value), Map):
                errors.append(
                    ValidationError(
                        message=f"Field '{message.name}.{f.name}' has map value type '{map_type.value}', "
                        "maps cannot be map values"
                    )
                )
            key = _resolve(map_type.key)
            if not isinstance(key, Basic) or key.name not in _MAP_KEY_TYPES:
                errors.append(
                    ValidationError(
                        message=f"Field '{message.name}.{f.name}' has invalid map key type '{map_type.key}'"
                    )
                )
    return errors


def _check_rpcs(package: Package) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for rpc in package.rpcs:
        if rpc.input is None:
            errors.append(ValidationError(message=f"RPC '{rpc.name}' has no input type"))
        if rpc.output is None:
            errors.append(ValidationError(message=f"RPC '{rpc.name}' has no output type"))
    for name in _duplicates(rpc.name for rpc in package.rpcs):
        errors.append(ValidationError(message=f"Duplicate RPC name '{name}' in package '{package.name}'"))
    return errors


def _resolve(typ: Type) -> Type:
    """Return the type *typ* stands for once all aliases are unwrapped."""
    while isinstance(typ, Alias):
        typ = typ.underlying
    return typ


def _maps_in(typ: Type) -> Iterator[Map]:
    """Yield every map type reachable from *typ* through aliases and map values."""
    if isinstance(typ, Alias):
        yield from _maps_in(typ.underlying)
    elif isinstance(typ, Map):
        yield typ
        yield from _maps_in(typ.value)


def _duplicates(names: Iterable[str]) -> list[str]:
    """Return the names that occur more than once, in order of their second occurrence."""
    seen: set[str] = set()
    reported: set[str] = set()
    result: list[str] = []
    for name in names:
        if name in seen and name not in reported:
            result.append(name)
            reported.add(name)
        seen.add(name)
    return result
