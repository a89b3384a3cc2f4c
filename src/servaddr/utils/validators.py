"""utils/validators.py

Validation utilities for Servaddr.
"""

from servaddr.constants import ANY_HOSTS, MAX_PORT


def is_decimal(value: str) -> bool:
    """True if value is a non-empty run of ASCII digits."""
    return value.isascii() and value.isdigit()


def is_port(value: str) -> bool:
    """True if value is a decimal TCP port, 0 to 65535."""
    return is_decimal(value) and int(value) <= MAX_PORT


def is_any_host(host: str) -> bool:
    """Wildcard hosts that stand for every local interface."""
    return host in ANY_HOSTS
