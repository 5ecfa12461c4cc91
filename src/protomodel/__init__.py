# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""protomodel: an in-memory model of protobuf schema packages."""
