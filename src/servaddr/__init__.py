"""src/servaddr/__init__.py

Servaddr - server binding address parsing for Python.

Turns the address strings handed to a network server through configuration
or the command line into structured values, and back into a canonical form.

Supported host forms:
    - DNS names and IP literals, with an optional port
    - Unix domain socket paths (``unix:/path``)
    - Inherited pipe handles (``pipefd:N``)
    - Inherited socket handles (``sockfd:N``)

Example:
    Parsing::

        from servaddr import ServerAddress

        address = ServerAddress.from_url("http://localhost:8080/api")
        address.host       # 'localhost'
        address.port       # 8080
        address.path_base  # '/api'

    Unix socket::

        address = ServerAddress.from_url("http://unix:/run/app.sock")
        address.unix_pipe_path  # '/run/app.sock'

    From the environment::

        from servaddr import BindingConfig

        for address in BindingConfig.from_env().addresses():
            print(address)
"""

from servaddr.address import HostKind, ServerAddress, format_address, parse
from servaddr.config import BindingConfig
from servaddr.exceptions import (
    AddressKindError,
    InvalidAddress,
    InvalidDescriptor,
    ServerAddressError,
)
from servaddr.version import __version__

__all__ = [
    "ServerAddress",
    "HostKind",
    "BindingConfig",
    "parse",
    "format_address",
    "ServerAddressError",
    "InvalidAddress",
    "InvalidDescriptor",
    "AddressKindError",
]
