"""src/servaddr/constants.py

Fixed tokens used when parsing server addresses.
"""

SCHEME_DELIMITER = "://"

UNIX_PIPE_HOST_PREFIX = "unix:/"
PIPE_DESCRIPTOR_PREFIX = "pipefd:"
SOCKET_DESCRIPTOR_PREFIX = "sockfd:"

# Separates a reserved-prefix host from its path base.
RESERVED_PATH_DELIMITER = ":"
PORT_DELIMITER = ":"
PATH_DELIMITER = "/"

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
}
UNSET_PORT = 0
MAX_PORT = 65535

ANY_HOSTS = frozenset({"*", "+", "0.0.0.0", "[::]"})

DEFAULT_URL = "http://localhost:5000"
URLS_ENV_VAR = "SERVADDR_URLS"
URLS_SEPARATOR = ";"
