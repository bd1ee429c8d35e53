"""
OSM Request XML helpers

Translate between plain mappings and the OpenStreetMap API XML format:
- Escape: attribute value escaping
- Builders: changeset and preferences request documents
- Flatten: normalization of parsed XML nodes into flat mappings
- Converters: element, list, map, notes and user response conversion
- Bridge: XML parse/build on top of lxml
"""

from loguru import logger

from .version import __version__

from .xml import (
    ElementNotFoundError,
    build_changeset_from_object_xml,
    build_changeset_xml,
    build_preferences_from_object_xml,
    clean_map_json,
    convert_element_xml_to_json,
    convert_elements_list_xml_to_json,
    convert_map_xml_to_json,
    convert_notes_xml_to_json,
    convert_user_xml_to_json,
    decode_xml,
    encode_xml,
    flatten_attributes,
    json_to_xml,
    parse_xml,
    xml_to_json,
)

logger.disable("osm_request")

__all__ = [
    "__version__",
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
    "json_to_xml",
    "parse_xml",
    "xml_to_json",
]
