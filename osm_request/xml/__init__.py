"""
OSM XML conversion module

Modular XML helpers with separate components for:
- Escape: attribute value escaping and value coercion
- Builders: changeset and preferences request documents
- Flatten: parsed node normalization
- Converters: API response reshaping
- Bridge: lxml parse/build
- Models: type aliases and errors
"""

from .bridge import json_to_xml, parse_xml, xml_to_json
from .builders import (
    build_changeset_from_object_xml,
    build_changeset_xml,
    build_preferences_from_object_xml,
)
from .converters import (
    clean_map_json,
    convert_element_xml_to_json,
    convert_elements_list_xml_to_json,
    convert_map_xml_to_json,
    convert_notes_xml_to_json,
    convert_user_xml_to_json,
)
from .escape import decode_xml, encode_xml, stringify_value
from .flatten import flatten_attributes, is_raw_node, reflatten_nested, unwrap_first
from .models import ElementNotFoundError

__all__ = [
    "ElementNotFoundError",
    "build_changeset_from_object_xml",
    "build_changeset_xml",
    "build_preferences_from_object_xml",
    "clean_map_json",
    "convert_element_xml_to_json",
    "convert_elements_list_xml_to_json",
    "convert_map_xml_to_json",
    "convert_notes_xml_to_json",
    "convert_user_xml_to_json",
    "decode_xml",
    "encode_xml",
    "flatten_attributes",
    "is_raw_node",
    "json_to_xml",
    "parse_xml",
    "reflatten_nested",
    "stringify_value",
    "unwrap_first",
    "xml_to_json",
]
