# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type system representations for the protomodel schema model.

Every type variant renders to its canonical schema text with ``str()`` and
answers whether a value of the type can be absent. Nullability depends on how
the originating source type behaves, so each variant may carry an opaque
source descriptor supplied by the scanner. When present, the descriptor is
authoritative; otherwise each variant falls back to its own default.
"""

from __future__ import annotations

from typing import Annotated, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, PrivateAttr
from pydantic import Field as _Field

from protomodel.model.options import Options

# ###############
# Public Interface
# ###############


@runtime_checkable
class SourceType(Protocol):
    """Descriptor of the source-language type a schema type was derived from."""

    def is_nullable(self) -> bool:
        """Return True if the source type admits an absent value."""
        ...


class _SourcedType(BaseModel):
    """Common source descriptor handling shared by all type variants."""

    _source: SourceType | None = PrivateAttr(default=None)

    def set_source(self, src: SourceType | None) -> None:
        """Attach the scanner's source descriptor to this type."""
        self._source = src

    def source(self) -> SourceType | None:
        """Return the attached source descriptor, if any."""
        return self._source


class Basic(_SourcedType):
    """One of the scalar types of protobuf, e.g. ``int32``, ``string`` or ``bool``."""

    kind: Literal["basic"] = "basic"
    name: str

    def __str__(self) -> str:
        return self.name

    def is_nullable(self) -> bool:
        # Scalars have no null representation, whatever the source says.
        return False


class Named(_SourcedType):
    """A type with a name that is defined somewhere else, maybe in another package.

    Attributes:
        package: Name of the package that defines the type.
        name: Name of the type inside its package.
        generated: True if the type is generated by protomodel's pipeline,
            False if it is a user defined type.
    """

    kind: Literal["named"] = "named"
    package: str
    name: str
    generated: bool = False

    @classmethod
    def generated_type(cls, package: str, name: str) -> Named:
        """Create a Named type for a message or enum produced by the generator."""
        return cls(package=package, name=name, generated=True)

    def __str__(self) -> str:
        return f"{self.package}.{self.name}"

    def is_nullable(self) -> bool:
        src = self.source()
        if src is not None:
            return src.is_nullable()
        # Named types are messages, which are nullable unless said otherwise.
        return True


class Alias(_SourcedType):
    """A type declaration from one type to another.

    An alias is textually transparent: it renders as the type it stands for.

    Attributes:
        type: The alias's own identity. May be unknown.
        underlying: The type the alias stands for.
    """

    kind: Literal["alias"] = "alias"
    type: Type | None = None
    underlying: Type

    def __str__(self) -> str:
        return str(self.underlying)

    def is_nullable(self) -> bool:
        src = self.source()
        if src is not None:
            return src.is_nullable()
        return self.underlying.is_nullable()


class Map(_SourcedType):
    """A key-value map type."""

    kind: Literal["map"] = "map"
    key: Type
    value: Type

    def __str__(self) -> str:
        return f"map<{self.key}, {self.value}>"

    def is_nullable(self) -> bool:
        return self.value.is_nullable()


# A schema type reference — a scalar, a named type, an alias or a map.
# The `kind` discriminator field enables unambiguous deserialization.
Type = Annotated[Basic | Named | Alias | Map, _Field(discriminator="kind")]


class ProtoType(BaseModel):
    """The protobuf type a source-language type was mapped to.

    Attributes:
        name: Name of the protobuf type.
        package: Package of the protobuf type. Empty for scalars.
        import_path: The ``.proto`` file that has to be imported in order to
            use the type. Empty if no import is required.
        basic: True if the type is a protobuf scalar.
        options: Options that must be applied to fields of this type.
    """

    name: str
    package: str = ""
    import_path: str = ""
    basic: bool = False
    options: Options = _Field(default_factory=Options)

    def to_type(self) -> Basic | Named:
        """Return the schema type reference for this mapping."""
        if self.basic:
            return Basic(name=self.name)
        return Named(package=self.package, name=self.name)


# Resolve forward references for models that use Type.
Alias.model_rebuild()
Map.model_rebuild()
