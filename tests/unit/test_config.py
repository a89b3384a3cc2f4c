"""Unit tests for servaddr.config module."""

import pytest

from servaddr.address.server_address import ServerAddress
from servaddr.config import BindingConfig
from servaddr.constants import DEFAULT_URL
from servaddr.exceptions import InvalidAddress


class TestBindingConfig:
    """Tests for BindingConfig."""

    def test_default(self):
        """Test default binding is localhost:5000."""
        assert BindingConfig().urls == [DEFAULT_URL]
        assert BindingConfig().urls is not BindingConfig().urls

    def test_from_string(self):
        """Test splitting on semicolons with blanks dropped."""
        config = BindingConfig.from_string(" http://a:1; http://b:2 ;; ")
        assert config.urls == ["http://a:1", "http://b:2"]

    def test_from_string_empty(self):
        """Test empty setting gives no urls."""
        assert BindingConfig.from_string("").urls == []

    def test_from_env_mapping(self):
        """Test reading from an explicit mapping."""
        config = BindingConfig.from_env({"SERVADDR_URLS": "http://x:1;https://y"})
        assert config.urls == ["http://x:1", "https://y"]

    def test_from_env_custom_variable(self):
        """Test reading another variable name."""
        config = BindingConfig.from_env({"APP_URLS": "http://x:1"}, var="APP_URLS")
        assert config.urls == ["http://x:1"]

    @pytest.mark.parametrize("environ", [{}, {"SERVADDR_URLS": ""}, {"SERVADDR_URLS": " ; "}])
    def test_from_env_fallback(self, environ):
        """Test unset or blank variable falls back to the default."""
        assert BindingConfig.from_env(environ).urls == [DEFAULT_URL]

    def test_from_process_environment(self, clean_env):
        """Test os.environ is used when no mapping is given."""
        assert BindingConfig.from_env().urls == [DEFAULT_URL]
        clean_env.setenv("SERVADDR_URLS", "http://unix:/run/app.sock")
        assert BindingConfig.from_env().urls == ["http://unix:/run/app.sock"]

    def test_addresses(self):
        """Test entries are parsed in order."""
        config = BindingConfig(urls=["http://a:1/x", "http://unix:/tmp/s"])
        addresses = config.addresses()
        assert addresses == [
            ServerAddress("http", "a", 1, "/x"),
            ServerAddress("http", "unix:/tmp/s"),
        ]

    def test_addresses_deduplicated(self):
        """Test equal addresses are reported once, first kept."""
        config = BindingConfig(urls=["HTTP://A", "http://a:80", "http://b"])
        addresses = config.addresses()
        assert [a.host for a in addresses] == ["A", "b"]

    def test_addresses_invalid_entry(self):
        """Test malformed entry propagates the parse error."""
        config = BindingConfig(urls=["http://a", "localhost:5000"])
        with pytest.raises(InvalidAddress):
            config.addresses()
