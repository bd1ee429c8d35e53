"""
Tests for configuration validation
"""

import pytest

from osm_request.config import LibraryConfig, XMLConfig, get_config, validate_config


class TestValidateConfig:
    """Test suite for validate_config"""

    def test_default_config_valid(self):
        validate_config(get_config())

    def test_missing_library_name(self):
        with pytest.raises(ValueError, match="library_name"):
            validate_config(LibraryConfig(library_name=""))

    def test_same_attr_and_char_key(self):
        with pytest.raises(ValueError, match="must differ"):
            validate_config(LibraryConfig(xml=XMLConfig(attr_key="@", char_key="@")))

    def test_indent_must_be_whitespace(self):
        with pytest.raises(ValueError, match="indent"):
            validate_config(LibraryConfig(xml=XMLConfig(indent="--")))

    def test_all_errors_reported(self):
        config = LibraryConfig(library_name="", xml=XMLConfig(root_name="", encoding=""))

        with pytest.raises(ValueError) as exc_info:
            validate_config(config)

        message = str(exc_info.value)
        assert "library_name" in message
        assert "xml.root_name" in message
        assert "xml.encoding" in message
