# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how a scanner populates a package and a renderer reads it."""

from dataclasses import dataclass

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
    ProtoType,
    StringValue,
)
from protomodel.validation import validate

# ###############
# Helpers
# ###############


@dataclass
class _GoType:
    """Stand-in for a scanner type descriptor."""

    name: str
    pointer: bool = False

    def is_nullable(self) -> bool:
        return self.pointer


def _build_users_package() -> Package:
    """Populate a package bottom-up the way a scanner does: types, fields, messages, package."""
    pkg = Package(name="store.users", path="example.com/store/users")
    pkg.options["go_package"] = StringValue(value="users")
    pkg.options["(gogoproto.goproto_getters_all)"] = LiteralValue(value="false")

    timestamp = ProtoType(
        name="Timestamp",
        package="google.protobuf",
        import_path="google/protobuf/timestamp.proto",
    )
    created = timestamp.to_type()
    created.set_source(_GoType("time.Time"))
    pkg.import_type(timestamp)

    user_id = Alias(type=Named(package="store.users", name="UserID"), underlying=Basic(name="int64"))
    address = Named(package="store.common", name="Address")
    address.set_source(_GoType("common.Address", pointer=True))
    pkg.import_from_path("example.com/store/common")

    status = Enum(
        name="Status",
        values=[EnumValue(name="ACTIVE", value=0), EnumValue(name="SUSPENDED", value=1)],
    )
    user = Message(
        name="User",
        docs=["User is a registered customer."],
        fields=[
            Field(name="id", pos=1, type=user_id),
            Field(name="created_at", pos=2, type=created),
            Field(name="address", pos=3, type=address),
            Field(name="status", pos=5, type=Named(package="store.users", name="Status")),
            Field(name="labels", pos=6, type=Map(key=Basic(name="string"), value=Basic(name="string"))),
        ],
    )
    user.reserve(4)
    pkg.messages.append(user)
    pkg.enums.append(status)

    request = Message(name="UsersService_GetUserRequest", fields=[Field(name="arg1", pos=1, type=user_id)])
    pkg.messages.append(request)
    pkg.rpcs.append(
        RPC(
            name="UsersService_GetUser",
            recv="UserStore",
            method="GetUser",
            has_ctx=True,
            has_error=True,
            input=Named.generated_type("store.users", request.name),
            output=Named(package="store.users", name="User"),
        )
    )
    return pkg


# ###############
# Scenarios
# ###############


def test_populated_package_is_valid() -> None:
    result = validate(_build_users_package())
    assert not result.has_errors
    assert result.warnings == []


def test_renderer_view_of_package() -> None:
    """Everything a renderer needs is reachable through strings and sorted options."""
    pkg = _build_users_package()

    assert pkg.service_name() == "UsersService"
    assert pkg.imports == [
        "google/protobuf/timestamp.proto",
        "example.com/store/common/generated.proto",
    ]
    assert [(o.name, str(o.value)) for o in pkg.options.sorted()] == [
        ("(gogoproto.goproto_getters_all)", "false"),
        ("go_package", '"users"'),
    ]

    user = pkg.message_by_name("User")
    assert user is not None
    assert [f"{f.type} {f.name} = {f.pos}" for f in user.fields] == [
        "int64 id = 1",
        "google.protobuf.Timestamp created_at = 2",
        "store.common.Address address = 3",
        "store.users.Status status = 5",
        "map<string, string> labels = 6",
    ]
    assert user.reserved == [4]


def test_nullability_as_seen_by_the_stub_generator() -> None:
    pkg = _build_users_package()
    user = pkg.message_by_name("User")
    assert user is not None

    nullability = {f.name: f.type.is_nullable() for f in user.fields}
    assert nullability == {
        "id": False,
        "created_at": False,
        "address": True,
        "status": True,
        "labels": False,
    }
