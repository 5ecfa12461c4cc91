# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Option values and option sets attached to packages, messages, fields, enums and RPCs."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class LiteralValue(BaseModel):
    """A literal option value like ``true``, ``false``, a number or an identifier."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    value: str

    def __str__(self) -> str:
        return self.value


class StringValue(BaseModel):
    """A string option value, rendered quoted and escaped."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["string"] = "string"
    value: str

    def __str__(self) -> str:
        return _quote(self.value)


# The value of a single option. The `kind` discriminator keeps snapshots unambiguous.
OptionValue = Annotated[LiteralValue | StringValue, _Field(discriminator="kind")]


class Option(BaseModel):
    """An option name and value pair."""

    name: str
    value: OptionValue


class Options(RootModel[dict[str, OptionValue]]):
    """Named option values with deterministic, name-ordered enumeration."""

    root: dict[str, OptionValue] = _Field(default_factory=dict)

    def __getitem__(self, name: str) -> OptionValue:
        return self.root[name]

    def __setitem__(self, name: str, value: OptionValue) -> None:
        if not isinstance(value, LiteralValue | StringValue):
            raise TypeError(f"Option '{name}' must be a LiteralValue or StringValue, got {type(value).__name__}")
        self.root[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self.root

    def __len__(self) -> int:
        return len(self.root)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def get(self, name: str) -> OptionValue | None:
        """Return the value of the option *name*, or None if it is not set."""
        return self.root.get(name)

    def sorted(self) -> list[Option]:
        """Return the options as pairs ordered by name.

        The order only depends on the names, never on the order in which the
        options were set, so equal option sets always render identically.
        """
        return [Option(name=name, value=self.root[name]) for name in sorted(self.root)]

    def __str__(self) -> str:
        if not self.root:
            return ""
        return "[" + ", ".join(f"{opt.name} = {opt.value}" for opt in self.sorted()) + "]"


# ################
# Implementation
# ################

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(value: str) -> str:
    """Quote *value* as a double-quoted literal, escaping like Go's ``%q`` verb."""
    parts: list[str] = ['"']
    for char in value:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        elif ord(char) < 0x80:
            parts.append(f"\\x{ord(char):02x}")
        elif ord(char) <= 0xFFFF:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(f"\\U{ord(char):08x}")
    parts.append('"')
    return "".join(parts)
