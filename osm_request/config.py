"""
Configuration settings for OSM Request XML helpers
"""

from dataclasses import dataclass, field


@dataclass
class XMLConfig:
    """Raw node conventions and document settings"""
    # Keys used by the parser/builder for attributes and character data
    attr_key: str = "$"
    char_key: str = "_"

    # Root tag used by json_to_xml when the mapping has several top-level keys
    root_name: str = "root"

    # XML declaration
    xml_version: str = "1.0"
    encoding: str = "UTF-8"

    # Pretty-print indentation for built documents
    indent: str = "  "


@dataclass
class LibraryConfig:
    """Library configuration"""
    # Stamped into the created_by:library changeset tag
    library_name: str = "OSM Request"

    xml: XMLConfig = field(default_factory=XMLConfig)


# Global config instance
config = LibraryConfig()


def get_config() -> LibraryConfig:
    """Get global configuration"""
    return config


def validate_config(config: LibraryConfig) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.
    """
    errors = []

    if not getattr(config, 'library_name', None):
        errors.append("library_name is required in config but not set")

    if not hasattr(config, 'xml') or config.xml is None:
        errors.append("xml configuration is required but not set")
    else:
        for name in ("attr_key", "char_key", "root_name", "xml_version", "encoding"):
            if not getattr(config.xml, name, None):
                errors.append(f"xml.{name} is required but not set")
        if config.xml.attr_key and config.xml.attr_key == config.xml.char_key:
            errors.append(f"xml.attr_key and xml.char_key must differ, both are {config.xml.attr_key!r}")
        if config.xml.indent and config.xml.indent.strip():
            errors.append(f"xml.indent must contain only whitespace, got {config.xml.indent!r}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
