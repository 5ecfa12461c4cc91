# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for package snapshot serialization."""

import json
from pathlib import Path

import pytest

from protomodel.errors import SnapshotError
from protomodel.model import (
    RPC,
    Alias,
    Basic,
    Enum,
    EnumValue,
    Field,
    LiteralValue,
    Map,
    Message,
    Named,
    Package,
    StringValue,
)
from protomodel.snapshot import (
    SNAPSHOT_FORMAT_VERSION,
    deserialize,
    read_snapshot,
    serialize,
    write_snapshot,
)

# ###############
# Helpers
# ###############


class _Source:
    def is_nullable(self) -> bool:
        return False


def _package() -> Package:
    pkg = Package(name="store.users", path="example.com/store/users")
    pkg.import_from_path("example.com/store/common")
    pkg.options["go_package"] = StringValue(value="users")

    user_id = Alias(type=Named(package="store.users", name="UserID"), underlying=Basic(name="int64"))
    msg = Message(
        name="User",
        docs=["A user."],
        fields=[
            Field(name="id", pos=1, type=user_id),
            Field(name="labels", pos=2, type=Map(key=Basic(name="string"), value=Basic(name="string"))),
            Field(name="friends", pos=3, repeated=True, type=Named.generated_type("store.users", "User")),
        ],
    )
    msg.reserve(7)
    msg.fields[0].options["deprecated"] = LiteralValue(value="true")
    pkg.messages.append(msg)
    pkg.enums.append(Enum(name="Status", values=[EnumValue(name="ACTIVE", value=0)]))
    pkg.rpcs.append(
        RPC(
            name="GetUser",
            method="GetUser",
            has_error=True,
            input=user_id,
            output=Named(package="store.users", name="User"),
        )
    )
    return pkg


# ###############
# Serialization
# ###############


def test_roundtrip_preserves_package() -> None:
    pkg = _package()
    restored = deserialize(serialize(pkg))

    assert restored == pkg
    assert restored.imports == ["example.com/store/common/generated.proto"]
    assert restored.messages[0].reserved == [7]
    assert str(restored.messages[0].fields[1].type) == "map<string, string>"
    assert restored.messages[0].fields[2].type.generated is True


def test_roundtrip_through_file(tmp_path: Path) -> None:
    path = tmp_path / "out" / "users.protomodel.json"
    write_snapshot(_package(), path)
    assert read_snapshot(path) == _package()


def test_serialization_is_independent_of_option_order() -> None:
    first = Package(name="foo")
    first.options["z"] = LiteralValue(value="1")
    first.options["a"] = LiteralValue(value="2")
    second = Package(name="foo")
    second.options["a"] = LiteralValue(value="2")
    second.options["z"] = LiteralValue(value="1")
    assert serialize(first) == serialize(second)


def test_snapshot_is_versioned() -> None:
    obj = json.loads(serialize(Package(name="foo")))
    assert obj["v"] == SNAPSHOT_FORMAT_VERSION
    assert obj["package"]["name"] == "foo"


def test_sources_are_not_serialized() -> None:
    typ = Named(package="foo", name="Bar")
    typ.set_source(_Source())
    pkg = Package(name="foo", rpcs=[RPC(name="Get", input=typ, output=typ)])

    restored = deserialize(serialize(pkg))
    assert restored.rpcs[0].input is not None
    assert restored.rpcs[0].input.source() is None
    assert restored.rpcs[0].input.is_nullable() is True


# ###############
# Errors
# ###############


def test_invalid_json() -> None:
    with pytest.raises(SnapshotError, match="Invalid snapshot JSON"):
        deserialize("{not json")


def test_non_object() -> None:
    with pytest.raises(SnapshotError, match="must be a JSON object"):
        deserialize("[]")


def test_unknown_version() -> None:
    with pytest.raises(SnapshotError, match="Unsupported snapshot format version"):
        deserialize(json.dumps({"v": "0", "package": {"name": "foo"}}))


def test_invalid_package() -> None:
    data = json.dumps({"v": SNAPSHOT_FORMAT_VERSION, "package": {"name": "foo", "messages": [{"fields": []}]}})
    with pytest.raises(SnapshotError, match="Invalid package"):
        deserialize(data)


def test_snapshot_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        deserialize(json.dumps({"v": "0"}))


def test_roundtrip_alias_without_own_type() -> None:
    alias = Alias(underlying=Basic(name="int64"))
    pkg = Package(name="foo", messages=[Message(name="M", fields=[Field(name="id", pos=1, type=alias)])])

    restored = deserialize(serialize(pkg))
    restored_type = restored.messages[0].fields[0].type
    assert isinstance(restored_type, Alias)
    assert restored_type.type is None
    assert str(restored_type) == "int64"
