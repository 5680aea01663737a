"""Canonical server records."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from mcp_config_schema.constants import Transport


class ServerRecord(BaseModel):
    """Transport-agnostic view of one server entry, independent of any client's on-disk shape.

    Only ``type`` is checked. The other fields are copied from the entry as
    found, since existing user configs may hold values of any type.
    """

    type: Transport = "stdio"
    command: Any = None
    args: Any = None
    env: Any = None
    url: Any = None
    headers: Any = None
