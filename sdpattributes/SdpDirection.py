# Copyright (C) 2025 Matrox Graphics Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from enum import Enum

from .SdpErrors import ConnectionRoleParseError


class Direction(Enum):
    """Media direction of a stream or header extension."""

    Unknown  = "unknown"
    SendRecv = "sendrecv"
    SendOnly = "sendonly"
    RecvOnly = "recvonly"
    Inactive = "inactive"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def new(cls, raw: str) -> "Direction":
        """Map direction text to a member, Unknown when not recognized."""
        return _DIRECTIONS.get(raw, cls.Unknown)


_DIRECTIONS = {d.value: d for d in Direction if d is not Direction.Unknown}


class ConnectionRole(Enum):
    """Which end point initiates the connection establishment (a=setup)."""

    Active   = 1  # will initiate an outgoing connection
    Passive  = 2  # will accept an incoming connection
    Actpass  = 3  # willing to do either
    Holdconn = 4  # does not want the connection established for now

    def __str__(self) -> str:
        return _ROLE_NAMES[self]

    @classmethod
    def new(cls, raw: str) -> "ConnectionRole":
        for role, name in _ROLE_NAMES.items():
            if name == raw:
                return role
        raise ConnectionRoleParseError(f"unknown connection role {raw!r}", raw)


_ROLE_NAMES = {
    ConnectionRole.Active:   "active",
    ConnectionRole.Passive:  "passive",
    ConnectionRole.Actpass:  "actpass",
    ConnectionRole.Holdconn: "holdconn",
}
