"""src/servaddr/exceptions.py

Servaddr Exceptions hierarchy.
"""


class ServerAddressError(Exception):
    """Base exception for all Servaddr errors."""


class InvalidAddress(ServerAddressError, ValueError):
    """
    The address string could not be parsed.
    Raised when the scheme delimiter is missing or the host is empty.
    """

    def __init__(self, url: str):
        super().__init__(f"Invalid URL: {url}")
        self.url = url


class InvalidDescriptor(ServerAddressError, ValueError):
    """A descriptor host does not carry a non-negative decimal number."""

    def __init__(self, value: str):
        super().__init__(f"Invalid file descriptor: {value}")
        self.value = value


class AddressKindError(ServerAddressError, TypeError):
    """
    An accessor was used on an address whose host is of another kind,
    e.g. asking for the pipe path of a TCP address.
    """
