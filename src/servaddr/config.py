"""src/servaddr/config.py

Binding configuration.

Servers are usually told where to listen through a single setting holding
one or more addresses separated by ``;``.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from servaddr.address.server_address import ServerAddress
from servaddr.constants import DEFAULT_URL, URLS_ENV_VAR, URLS_SEPARATOR

__all__ = ["BindingConfig"]

logger = logging.getLogger(__name__)


@dataclass
class BindingConfig:
    """
    Addresses a server should bind to.

    Attributes:
        urls: Raw address strings, in configured order.
    """

    urls: List[str] = field(default_factory=lambda: [DEFAULT_URL])

    @classmethod
    def from_string(cls, value: str) -> "BindingConfig":
        """Split a ``;`` separated setting, skipping blank entries."""
        urls = [item.strip() for item in value.split(URLS_SEPARATOR)]
        return cls(urls=[url for url in urls if url])

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        var: str = URLS_ENV_VAR,
    ) -> "BindingConfig":
        """
        Read the addresses from an environment variable.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.
            var: Variable name.

        Returns:
            The configuration, or the default address when the variable is
            unset or blank.
        """
        if environ is None:
            environ = os.environ

        value = environ.get(var, "")
        config = cls.from_string(value)
        if not config.urls:
            logger.debug("%s not set, using %s", var, DEFAULT_URL)
            return cls()
        return config

    def addresses(self) -> List[ServerAddress]:
        """
        Parse every configured address.

        Equal addresses are reported once, first occurrence kept.

        Raises:
            InvalidAddress: An entry is malformed.
        """
        result: List[ServerAddress] = []
        seen = set()
        for url in self.urls:
            address = ServerAddress.from_url(url)
            if address in seen:
                logger.debug("Skipping duplicate address %s", url)
                continue
            seen.add(address)
            result.append(address)
        return result
