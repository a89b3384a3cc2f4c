"""src/servaddr/address/server_address.py

Server binding address parser for Servaddr.

Addresses look like ``scheme://host[:port][/path]`` for network endpoints or
``scheme://<prefix>...[:path]`` for the reserved host kinds (unix pipe,
pipe descriptor, socket descriptor). The string is scanned by position only;
no URL library is involved because the reserved kinds are not valid URLs.
"""

import logging
from typing import Any, Optional, Tuple, cast

from servaddr.address.host import (
    Endpoint,
    HostKind,
    PipeDescriptorHost,
    SocketDescriptorHost,
    UnixPipeHost,
    endpoint,
    host_kind,
    match_prefix,
)
from servaddr.constants import (
    DEFAULT_PORTS,
    MAX_PORT,
    PATH_DELIMITER,
    PORT_DELIMITER,
    RESERVED_PATH_DELIMITER,
    SCHEME_DELIMITER,
    UNSET_PORT,
)
from servaddr.exceptions import AddressKindError, InvalidAddress
from servaddr.utils.validators import is_any_host, is_port

__all__ = ["ServerAddress", "parse", "format_address"]

logger = logging.getLogger(__name__)


class ServerAddress:
    """
    Parsed server binding address.

    Attributes:
        scheme: Protocol token before ``://``, case preserved.
        host: Raw host specifier, reserved prefix included.
        port: TCP port. Only changed through ``rebind_port()``.
        path_base: Path prefix, never ending with ``/``.

    Instances are read-only except for the port, which the owner may rebind
    once the OS has picked one. ``rebind_port()`` is not synchronized.
    """

    __slots__ = ("scheme", "host", "port", "path_base")

    def __init__(
        self,
        scheme: str,
        host: str,
        port: int = UNSET_PORT,
        path_base: str = "",
    ) -> None:
        if not host:
            raise ValueError("Host must not be empty")
        object.__setattr__(self, "scheme", scheme)
        object.__setattr__(self, "host", host)
        object.__setattr__(self, "port", port)
        object.__setattr__(self, "path_base", path_base)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__}.{name} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__}.{name} is read-only")

    @classmethod
    def from_url(cls, url: Optional[str]) -> "ServerAddress":
        """
        Parse a binding address.

        Args:
            url: Address string. None is treated as an empty string.

        Returns:
            The parsed address.

        Raises:
            InvalidAddress: No ``://`` in the string, or the host is empty.
        """
        url = url or ""

        scheme_start = url.find(SCHEME_DELIMITER)
        if scheme_start < 0:
            raise InvalidAddress(url)
        host_start = scheme_start + len(SCHEME_DELIMITER)

        match = match_prefix(url, host_start)

        if match is None:
            # The "/" opens the path base and stays part of it.
            path_start = url.find(PATH_DELIMITER, host_start)
            path_end = path_start
        else:
            prefix = match[0]
            path_start = url.find(RESERVED_PATH_DELIMITER, host_start + len(prefix))
            path_end = path_start + len(RESERVED_PATH_DELIMITER)

        if path_start < 0:
            path_start = path_end = len(url)

        scheme = url[:scheme_start]
        host = None
        port = UNSET_PORT

        if match is None:
            port_start = url.rfind(PORT_DELIMITER, host_start, path_start)
            if port_start >= 0:
                port_text = url[port_start + len(PORT_DELIMITER) : path_start]
                if is_port(port_text):
                    host = url[host_start:port_start]
                    port = int(port_text)

            if host is None:
                port = DEFAULT_PORTS.get(scheme.lower(), UNSET_PORT)

        if host is None:
            host = url[host_start:path_start]

        if not host:
            raise InvalidAddress(url)

        # Used as a routing prefix later, so no trailing "/".
        path_base = url[path_end:]
        if url.endswith(PATH_DELIMITER):
            path_base = path_base[:-1]

        address = cls(scheme, host, port, path_base)
        logger.debug("Parsed %r as %r", url, address)
        return address

    @property
    def host_kind(self) -> HostKind:
        """Kind of the host specifier, decided by its prefix."""
        return host_kind(self.host)

    @property
    def endpoint(self) -> Endpoint:
        """
        Host specifier as a tagged variant.

        Raises:
            InvalidDescriptor: descriptor host with a non-numeric remainder.
        """
        return endpoint(self.host)

    @property
    def is_unix_pipe(self) -> bool:
        return self.host_kind is HostKind.UNIX_PIPE

    @property
    def is_pipe_descriptor(self) -> bool:
        return self.host_kind is HostKind.PIPE_DESCRIPTOR

    @property
    def is_socket_descriptor(self) -> bool:
        return self.host_kind is HostKind.SOCKET_DESCRIPTOR

    @property
    def is_any_host(self) -> bool:
        """True when the host is a wildcard meant to be replaced later."""
        return self.host_kind is HostKind.NAMED and is_any_host(self.host)

    def _expect(self, kind: HostKind) -> Endpoint:
        if self.host_kind is not kind:
            raise AddressKindError(
                f"{self.host!r} is a {self.host_kind.value} host, not {kind.value}"
            )
        return self.endpoint

    @property
    def unix_pipe_path(self) -> str:
        """Filesystem path of a unix pipe host, leading ``/`` kept."""
        value = cast(UnixPipeHost, self._expect(HostKind.UNIX_PIPE))
        return value.path

    @property
    def pipe_descriptor(self) -> int:
        """Handle number of a pipe descriptor host."""
        value = cast(PipeDescriptorHost, self._expect(HostKind.PIPE_DESCRIPTOR))
        return value.fd

    @property
    def socket_descriptor(self) -> int:
        """Handle number of an inherited socket host."""
        value = cast(SocketDescriptorHost, self._expect(HostKind.SOCKET_DESCRIPTOR))
        return value.fd

    def with_host(self, host: str) -> "ServerAddress":
        """Copy of this address bound to another host."""
        address = type(self)(self.scheme, host, self.port, self.path_base)
        logger.debug("Replaced host of %s with %r", self, host)
        return address

    def rebind_port(self, port: int) -> None:
        """
        Record the port the listener actually got, e.g. after binding port 0.

        Args:
            port: Port number between 0 and 65535.
        """
        if isinstance(port, bool) or not isinstance(port, int):
            raise TypeError(f"Port must be an int, got {type(port).__name__}")
        if not 0 <= port <= MAX_PORT:
            raise ValueError(f"Port out of range: {port}")
        logger.debug("Rebinding %s to port %d", self, port)
        object.__setattr__(self, "port", port)

    def __str__(self) -> str:
        """
        Canonical form, lower-cased.

        Named hosts give ``scheme://host:port`` followed by the path base.
        Every reserved host (unix pipe, pipe descriptor and socket
        descriptor) gives ``scheme://host`` with no port, followed by
        ``:path_base`` when there is one, so ``http://sockfd:3`` is written
        back as is rather than as ``http://sockfd:3:0``.
        """
        scheme = self.scheme.lower()
        host = self.host.lower()
        path_base = self.path_base.lower()

        if self.host_kind is not HostKind.NAMED:
            if not path_base:
                return f"{scheme}{SCHEME_DELIMITER}{host}"
            return f"{scheme}{SCHEME_DELIMITER}{host}{RESERVED_PATH_DELIMITER}{path_base}"

        return f"{scheme}{SCHEME_DELIMITER}{host}{PORT_DELIMITER}{self.port}{path_base}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(scheme={self.scheme!r}, host={self.host!r}, "
            f"port={self.port!r}, path_base={self.path_base!r})"
        )

    def __reduce__(self) -> Tuple[Any, Tuple[str, str, int, str]]:
        return (type(self), (self.scheme, self.host, self.port, self.path_base))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServerAddress):
            return NotImplemented
        # Prefixes are case-sensitive, so "UNIX:/x" is a named host.
        return (
            self.host_kind is other.host_kind
            and self.scheme.lower() == other.scheme.lower()
            and self.host.lower() == other.host.lower()
            and self.port == other.port
            and self.path_base.lower() == other.path_base.lower()
        )

    def __hash__(self) -> int:
        return hash(str(self))


def parse(url: Optional[str]) -> ServerAddress:
    """Parse a binding address. See ``ServerAddress.from_url``."""
    return ServerAddress.from_url(url)


def format_address(address: ServerAddress) -> str:
    """Canonical string of an address."""
    return str(address)
