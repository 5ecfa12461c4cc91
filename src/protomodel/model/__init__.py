# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema model for protomodel (packages, messages, enums, RPCs and types)."""

from protomodel.model.entities import (
    GENERATED_FILE_NAME,
    RPC,
    SERVICE_SUFFIX,
    Enum,
    EnumValue,
    Field,
    Message,
    Package,
)
from protomodel.model.options import (
    LiteralValue,
    Option,
    Options,
    OptionValue,
    StringValue,
)
from protomodel.model.types import (
    Alias,
    Basic,
    Map,
    Named,
    ProtoType,
    SourceType,
    Type,
)

__all__ = [
    # Options
    "LiteralValue",
    "StringValue",
    "OptionValue",
    "Option",
    "Options",
    # Type system
    "SourceType",
    "Basic",
    "Named",
    "Alias",
    "Map",
    "Type",
    "ProtoType",
    # Entities
    "GENERATED_FILE_NAME",
    "SERVICE_SUFFIX",
    "Field",
    "Message",
    "EnumValue",
    "Enum",
    "RPC",
    "Package",
]
