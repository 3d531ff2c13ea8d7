"""
Unit tests for the INI configuration model.

Tests section registration, default section resolution, option queries
and mutation, and dictionary conversion.
"""

import pytest
from pydantic import ValidationError

from plainini.models.config import (
    IniConfig,
    IniError,
    InvalidNameError,
    DuplicateSectionError,
    NoSectionError
)


@pytest.fixture
def config():
    """A configuration with defaults and two sections."""
    config = IniConfig()
    config.set("default", "name", "demo")
    config.add_section("server")
    config.set("server", "host", "localhost")
    config.set("server", "port", "8080")
    config.add_section("client")
    return config


class TestSections:
    """Test cases for section registration."""

    def test_empty_config(self):
        """Test that a new configuration has no sections and no defaults."""
        config = IniConfig()
        assert config.sections() == []
        assert config.defaults() == {}

    def test_sections_in_first_seen_order(self, config):
        """Test that sections are enumerated in registration order."""
        config.add_section("alpha")
        assert config.sections() == ["server", "client", "alpha"]

    @pytest.mark.parametrize("name", ["default", "Default", "DEFAULT", "dEfAuLt"])
    def test_add_default_section_rejected(self, name):
        """Test that the default section name is reserved in any case."""
        config = IniConfig()
        with pytest.raises(InvalidNameError, match="reserved"):
            config.add_section(name)

    def test_invalid_name_is_value_error(self):
        """Test that InvalidNameError can be caught as ValueError."""
        with pytest.raises(ValueError):
            IniConfig().add_section("default")

    def test_add_near_default_name(self):
        """Test that names merely resembling 'default' are accepted."""
        config = IniConfig()
        config.add_section("defaults")
        assert config.has_section("defaults")

    def test_add_duplicate_section(self, config):
        """Test that registering an existing section fails."""
        with pytest.raises(DuplicateSectionError, match="server"):
            config.add_section("server")

    def test_add_duplicate_empty_section(self, config):
        """Test that re-adding an identical empty section is still a duplicate."""
        with pytest.raises(DuplicateSectionError):
            config.add_section("client")

    def test_section_names_are_case_sensitive(self, config):
        """Test that sections differing only in case are distinct."""
        config.add_section("Server")
        assert config.has_section("Server")
        assert config.get("Server", "host") is None

    def test_has_section_ignores_default(self, config):
        """Test that the default section is never reported as registered."""
        assert config.has_section("server")
        assert not config.has_section("default")
        assert not config.has_section("missing")

    def test_errors_share_base_class(self, config):
        """Test that model errors derive from IniError."""
        with pytest.raises(IniError):
            config.add_section("server")
        with pytest.raises(IniError):
            config.set("missing", "k", "v")


class TestQueries:
    """Test cases for option lookups."""

    def test_get(self, config):
        """Test getting values from named and default sections."""
        assert config.get("server", "host") == "localhost"
        assert config.get("default", "name") == "demo"
        assert config.get("DEFAULT", "name") == "demo"

    def test_get_missing_returns_none(self, config):
        """Test that missing sections and options are reported as None."""
        assert config.get("server", "missing") is None
        assert config.get("missing", "host") is None

    def test_options(self, config):
        """Test listing option names."""
        assert config.options("server") == ["host", "port"]
        assert config.options("Default") == ["name"]
        assert config.options("client") == []
        assert config.options("missing") is None

    def test_has_option(self, config):
        """Test option existence checks."""
        assert config.has_option("server", "port")
        assert config.has_option("default", "name")
        assert not config.has_option("server", "name")
        assert not config.has_option("missing", "port")

    def test_items(self, config):
        """Test listing option/value pairs."""
        assert config.items("server") == [("host", "localhost"), ("port", "8080")]
        assert config.items("default") == [("name", "demo")]
        assert config.items("missing") is None


class TestMutation:
    """Test cases for setting and removing options and sections."""

    def test_set_overwrites(self, config):
        """Test that setting an existing option replaces its value."""
        config.set("server", "port", "9090")
        assert config.get("server", "port") == "9090"
        assert config.options("server") == ["host", "port"]

    def test_set_empty_value(self, config):
        """Test that empty values are stored as empty strings."""
        config.set("client", "token", "")
        assert config.get("client", "token") == ""
        assert config.has_option("client", "token")

    def test_set_default_any_case(self):
        """Test that the default section always exists for set."""
        config = IniConfig()
        config.set("Default", "a", "1")
        assert config.defaults() == {"a": "1"}
        assert config.sections() == []

    def test_set_missing_section(self):
        """Test that setting into an unregistered section fails."""
        config = IniConfig()
        with pytest.raises(NoSectionError, match="nope"):
            config.set("nope", "k", "v")

    def test_remove_option(self, config):
        """Test removing present and absent options."""
        assert config.remove_option("server", "port") is True
        assert config.options("server") == ["host"]
        assert config.remove_option("server", "port") is False
        assert config.remove_option("default", "name") is True
        assert config.defaults() == {}

    def test_remove_option_missing_section(self, config):
        """Test that removing from an unregistered section fails."""
        with pytest.raises(NoSectionError):
            config.remove_option("missing", "k")

    def test_remove_section(self, config):
        """Test removing a registered section."""
        assert config.remove_section("server") is True
        assert config.sections() == ["client"]
        assert config.remove_section("server") is False

    def test_remove_default_section_clears_defaults(self, config):
        """Test that removing the default section empties it but reports False."""
        assert config.defaults() == {"name": "demo"}
        assert config.remove_section("default") is False
        assert config.defaults() == {}
        assert config.sections() == ["server", "client"]

    def test_remove_section_leaves_defaults(self, config):
        """Test that removing a named section does not touch defaults."""
        config.remove_section("server")
        assert config.get("default", "name") == "demo"


class TestConversion:
    """Test cases for dictionary conversion and validation."""

    def test_to_dict(self, config):
        """Test conversion to dictionary."""
        assert config.to_dict() == {
            "defaults": {"name": "demo"},
            "sections": {
                "server": {"host": "localhost", "port": "8080"},
                "client": {}
            }
        }

    def test_from_dict(self):
        """Test creation from dictionary."""
        config = IniConfig.from_dict({
            "defaults": {"a": "1"},
            "sections": {"s": {"b": "2"}}
        })
        assert config.get("default", "a") == "1"
        assert config.get("s", "b") == "2"
        assert config.sections() == ["s"]

    def test_construct_by_field_name(self):
        """Test creation using field names rather than aliases."""
        config = IniConfig(default_options={"a": "1"}, section_options={"s": {}})
        assert config.defaults() == {"a": "1"}
        assert config.has_section("s")

    def test_from_dict_rejects_default_section(self):
        """Test that a named section called 'default' is rejected."""
        with pytest.raises(ValidationError, match="reserved"):
            IniConfig.from_dict({"sections": {"Default": {}}})

    def test_from_dict_rejects_non_string_values(self):
        """Test that option values must be strings."""
        with pytest.raises(ValidationError):
            IniConfig.from_dict({"sections": {"s": {"k": ["v"]}}})

    def test_from_string(self):
        """Test parsing text through the model constructor."""
        config = IniConfig.from_string("a=1\n[s]\nb=2")
        assert config.get("default", "a") == "1"
        assert config.get("s", "b") == "2"

    def test_from_lines(self):
        """Test parsing raw lines through the model constructor."""
        config = IniConfig.from_lines(["[s]\n", "b = 2\n"])
        assert config.items("s") == [("b", "2")]

    def test_str_renders_ini(self, config):
        """Test that str() renders canonical INI text."""
        assert str(config) == (
            "name = demo\n"
            "[server]\n"
            "host = localhost\n"
            "port = 8080\n"
            "[client]\n"
            "\n"
        )
        assert config.to_string() == str(config)
