"""src/servaddr/address/host.py

Host specifier kinds.

A host specifier is stored as the raw text taken from the address. Its kind
is decided by a reserved prefix and nothing else, so the prefix table below
is the single place that knows how to tell the kinds apart.
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from servaddr.constants import (
    PIPE_DESCRIPTOR_PREFIX,
    SOCKET_DESCRIPTOR_PREFIX,
    UNIX_PIPE_HOST_PREFIX,
)
from servaddr.exceptions import InvalidDescriptor
from servaddr.utils.validators import is_decimal

__all__ = [
    "HostKind",
    "NamedHost",
    "UnixPipeHost",
    "PipeDescriptorHost",
    "SocketDescriptorHost",
    "Endpoint",
    "RESERVED_PREFIXES",
    "match_prefix",
    "host_kind",
    "endpoint",
]


class HostKind(enum.Enum):
    """Kind of endpoint a host specifier names."""

    NAMED = "named"
    UNIX_PIPE = "unix_pipe"
    PIPE_DESCRIPTOR = "pipe_descriptor"
    SOCKET_DESCRIPTOR = "socket_descriptor"


# Tested in order; the first prefix found at the host position wins.
RESERVED_PREFIXES: Tuple[Tuple[str, HostKind], ...] = (
    (UNIX_PIPE_HOST_PREFIX, HostKind.UNIX_PIPE),
    (PIPE_DESCRIPTOR_PREFIX, HostKind.PIPE_DESCRIPTOR),
    (SOCKET_DESCRIPTOR_PREFIX, HostKind.SOCKET_DESCRIPTOR),
)


@dataclass(frozen=True)
class NamedHost:
    """DNS name or IP literal, used together with a port."""

    name: str


@dataclass(frozen=True)
class UnixPipeHost:
    """Filesystem path of a unix domain socket or named pipe."""

    path: str


@dataclass(frozen=True)
class PipeDescriptorHost:
    """Already-open pipe handle."""

    fd: int


@dataclass(frozen=True)
class SocketDescriptorHost:
    """Already-open socket handle inherited from the parent process."""

    fd: int


Endpoint = Union[NamedHost, UnixPipeHost, PipeDescriptorHost, SocketDescriptorHost]


def match_prefix(text: str, start: int = 0) -> Optional[Tuple[str, HostKind]]:
    """
    Find the reserved prefix that begins at ``start``.

    Args:
        text: String to look into.
        start: Offset where the host specifier starts.

    Returns:
        ``(prefix, kind)`` of the first matching entry of
        ``RESERVED_PREFIXES``, or None for a plain host.
    """
    for prefix, kind in RESERVED_PREFIXES:
        if text.startswith(prefix, start):
            return prefix, kind
    return None


def host_kind(host: str) -> HostKind:
    """Kind of the given raw host specifier."""
    match = match_prefix(host)
    if match is None:
        return HostKind.NAMED
    return match[1]


def _parse_descriptor(value: str) -> int:
    if not is_decimal(value):
        raise InvalidDescriptor(value)
    return int(value)


def endpoint(host: str) -> Endpoint:
    """
    Build the tagged variant for a raw host specifier.

    Raises:
        InvalidDescriptor: descriptor host with a non-numeric remainder.
    """
    match = match_prefix(host)
    if match is None:
        return NamedHost(host)

    prefix, kind = match
    if kind is HostKind.UNIX_PIPE:
        # The prefix ends with "/", which is the root of the pipe path.
        return UnixPipeHost(host[len(prefix) - 1 :])

    fd = _parse_descriptor(host[len(prefix) :])
    if kind is HostKind.PIPE_DESCRIPTOR:
        return PipeDescriptorHost(fd)
    return SocketDescriptorHost(fd)
