# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Core schema entities: packages, messages, fields, enums and RPCs."""

from __future__ import annotations

import logging
import posixpath

from pydantic import BaseModel
from pydantic import Field as _Field

from protomodel.errors import InvalidPackageNameError
from protomodel.model.options import Options
from protomodel.model.types import ProtoType, Type

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

GENERATED_FILE_NAME = "generated.proto"
SERVICE_SUFFIX = "Service"


class Field(BaseModel):
    """A single field of a message.

    Attributes:
        name: Name of the field.
        pos: 1-based position of the field in the message. Collisions with
            other fields or reserved positions are not detected here; see
            :func:`protomodel.validation.validate`.
        repeated: True if the field holds a list of values.
        type: Type of the field. Types are shared and may be used by
            several fields.
    """

    name: str
    pos: int = _Field(ge=1)
    repeated: bool = False
    type: Type
    options: Options = _Field(default_factory=Options)
    docs: list[str] = _Field(default_factory=list)


class Message(BaseModel):
    """A structured record type."""

    name: str
    docs: list[str] = _Field(default_factory=list)
    reserved: list[int] = _Field(default_factory=list)
    options: Options = _Field(default_factory=Options)
    fields: list[Field] = _Field(default_factory=list)

    def reserve(self, pos: int) -> None:
        """Reserve a position in the message so it is never used again.

        Reserving an already reserved position is a no-op.

        Raises:
            ValueError: If *pos* is negative.
        """
        if pos < 0:
            raise ValueError(f"Cannot reserve negative position {pos} in message '{self.name}'")
        if self.is_reserved(pos):
            logger.debug("Position %d already reserved in message %s", pos, self.name)
            return
        self.reserved.append(pos)

    def is_reserved(self, pos: int) -> bool:
        """Return True if *pos* is reserved in this message."""
        return pos in self.reserved

    def field_by_name(self, name: str) -> Field | None:
        """Return the field called *name*, or None."""
        return next((f for f in self.fields if f.name == name), None)

    def field_by_pos(self, pos: int) -> Field | None:
        """Return the first field at position *pos*, or None."""
        return next((f for f in self.fields if f.pos == pos), None)


class EnumValue(BaseModel):
    """A single named constant of an enumeration."""

    name: str
    value: int = _Field(ge=0)
    docs: list[str] = _Field(default_factory=list)
    options: Options = _Field(default_factory=Options)


class Enum(BaseModel):
    """An enumerated type."""

    name: str
    docs: list[str] = _Field(default_factory=list)
    options: Options = _Field(default_factory=Options)
    values: list[EnumValue] = _Field(default_factory=list)


class RPC(BaseModel):
    """A single method exposed in the package's RPC service.

    Attributes:
        recv: Name of the receiver type in the source. Empty if the callable
            is a plain function rather than a method.
        method: Name of the source method or function.
        has_ctx: True if the callable accepts a cancellation/deadline context.
        has_error: True if the callable can fail.
        is_variadic: True if the callable accepts a variable number of
            trailing arguments.
    """

    name: str
    docs: list[str] = _Field(default_factory=list)
    recv: str = ""
    method: str = ""
    has_ctx: bool = False
    has_error: bool = False
    is_variadic: bool = False
    input: Type | None = None
    output: Type | None = None
    options: Options = _Field(default_factory=Options)


class Package(BaseModel):
    """A single ``.proto`` file with its own package definition.

    Attributes:
        name: Dotted package name, e.g. ``store.users``.
        path: Source path the package was generated from.
        imports: Files imported by the package, in order of first import.
            Never contains duplicates or the package's own file.
        generated_file_name: File name of every generated ``.proto`` file,
            used to derive import locators from source paths.
        service_suffix: Suffix appended to derive the RPC service name.
    """

    name: str
    path: str = ""
    imports: list[str] = _Field(default_factory=list)
    options: Options = _Field(default_factory=Options)
    messages: list[Message] = _Field(default_factory=list)
    enums: list[Enum] = _Field(default_factory=list)
    rpcs: list[RPC] = _Field(default_factory=list)
    generated_file_name: str = GENERATED_FILE_NAME
    service_suffix: str = SERVICE_SUFFIX

    def import_type(self, typ: ProtoType) -> None:
        """Import the file defining *typ*, unless it needs no import or is already imported."""
        if not typ.import_path:
            return
        if self.is_imported(typ.import_path):
            logger.debug("%s already imported in package %s", typ.import_path, self.name)
            return
        self.imports.append(typ.import_path)

    def import_from_path(self, path: str) -> None:
        """Import the generated file of the package at source *path*.

        Importing the package's own path is skipped, as is a file that is
        already imported.
        """
        file = posixpath.normpath(posixpath.join(path, self.generated_file_name))
        if path == self.path:
            logger.debug("Skipping self import of %s in package %s", path, self.name)
            return
        if self.is_imported(file):
            logger.debug("%s already imported in package %s", file, self.name)
            return
        self.imports.append(file)

    def is_imported(self, file: str) -> bool:
        """Return True if *file* is already in the import list."""
        return file in self.imports

    def service_name(self) -> str:
        """Return the name of the package's RPC service.

        The last segment of the dotted package name is capitalized and the
        service suffix appended: ``store.users`` yields ``UsersService``.

        Raises:
            InvalidPackageNameError: If the package name or its last segment is empty.
        """
        last = self.name.split(".")[-1]
        if not last:
            raise InvalidPackageNameError(f"Cannot derive a service name from package name {self.name!r}")
        return last[0].upper() + last[1:] + self.service_suffix

    def message_by_name(self, name: str) -> Message | None:
        """Return the message called *name*, or None."""
        return next((m for m in self.messages if m.name == name), None)

    def enum_by_name(self, name: str) -> Enum | None:
        """Return the enum called *name*, or None."""
        return next((e for e in self.enums if e.name == name), None)
