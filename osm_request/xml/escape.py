"""
XML attribute value escaping
"""

from typing import Any

# Ampersand must come first so later replacements are not re-escaped
_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def encode_xml(value: str = "") -> str:
    """
    Escape a string to make it safe inside an XML attribute value

    Not idempotent: encoding "&amp;" yields "&amp;amp;", callers must not
    pass already escaped text.
    """
    for char, entity in _ENTITIES:
        value = value.replace(char, entity)
    return value


def decode_xml(value: str = "") -> str:
    """Reverse encode_xml"""
    for char, entity in reversed(_ENTITIES):
        value = value.replace(entity, char)
    return value


def stringify_value(value: Any) -> str:
    """
    Coerce a tag or preference value to text

    Booleans render as "true"/"false", None as an empty string and integral
    floats without their fractional part. Everything else goes through str().
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
