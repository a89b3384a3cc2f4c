"""src/servaddr/address/__init__.py

Server address parsing and host specifier kinds.
"""

from .host import (
    Endpoint,
    HostKind,
    NamedHost,
    PipeDescriptorHost,
    SocketDescriptorHost,
    UnixPipeHost,
)
from .server_address import ServerAddress, format_address, parse

__all__ = [
    "ServerAddress",
    "parse",
    "format_address",
    "HostKind",
    "Endpoint",
    "NamedHost",
    "UnixPipeHost",
    "PipeDescriptorHost",
    "SocketDescriptorHost",
]
