"""
OSM API response converters

Turn raw API responses into the mappings handed to callers. Each async
converter parses once through xml_to_json and reshapes the result.
"""

from typing import Any, Dict, List, Mapping, Union

from loguru import logger

from ..config import get_config
from .bridge import xml_to_json
from .flatten import flatten_attributes, reflatten_nested, unwrap_first
from .models import ELEMENT_TYPES, ElementList, ElementNotFoundError, FlatMapping

XMLInput = Union[str, bytes]


def _osm_root(result: Mapping[str, Any]) -> Mapping[str, Any]:
    root = result.get("osm")
    # <osm/> with no children collapses to a string
    return root if isinstance(root, Mapping) else {}


def _with_envelope(element: Dict[str, Any], element_id: Any, element_type: str) -> Dict[str, Any]:
    element["_id"] = element_id
    element["_type"] = element_type
    return element


async def convert_element_xml_to_json(
    xml: XMLInput,
    element_type: str,
    element_id: str
) -> Dict[str, Any]:
    """
    Convert a raw Element API response into a well formatted mapping

    Args:
        xml: The raw API response
        element_type: The type of the concerned OSM element (node, way, relation)
        element_id: The ID of the concerned OSM element

    Returns:
        The raw element with _id and _type set

    Raises:
        ElementNotFoundError: If the response holds no element of that type
    """
    result = await xml_to_json(xml)
    element = unwrap_first(_osm_root(result), element_type)
    if not isinstance(element, dict):
        logger.warning(f"No {element_type} {element_id} in element response")
        raise ElementNotFoundError(element_type, element_id)
    return _with_envelope(element, element_id, element_type)


async def convert_elements_list_xml_to_json(xml: XMLInput, element_type: str) -> ElementList:
    """
    Convert a raw list of elements API response into a list of mappings

    Returns an empty list when the response holds no element of that type.
    Every listed element must carry an id attribute: an entry without
    attributes (<way/>) raises TypeError, one without id raises KeyError.
    """
    result = await xml_to_json(xml)
    attr_key = get_config().xml.attr_key
    return [
        _with_envelope(element, element[attr_key]["id"], element_type)
        for element in _osm_root(result).get(element_type) or []
    ]


def clean_map_json(osm_map_json: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Convert a parsed map document into a mapping of element lists

    Only the element types present in the input appear in the output,
    along with bounds when the document has them.

    Args:
        osm_map_json: Parsed map API response, as returned by xml_to_json

    Returns:
        Mapping with node/way/relation lists and optional bounds
    """
    osm = _osm_root(osm_map_json)
    attr_key = get_config().xml.attr_key

    cleaned: Dict[str, Any] = {}
    for element_type in ELEMENT_TYPES:
        if element_type not in osm:
            continue
        cleaned[element_type] = [
            {**element, "_id": element[attr_key]["id"], "_type": element_type}
            for element in osm[element_type] or []
        ]

    if osm.get("bounds"):
        cleaned["bounds"] = osm["bounds"]
    return cleaned


async def convert_map_xml_to_json(xml: XMLInput) -> Dict[str, Any]:
    """Parse a raw map API response and clean it with clean_map_json"""
    result = await xml_to_json(xml)
    return clean_map_json(result)


def _flatten_note(note: Mapping[str, Any]) -> FlatMapping:
    flat_note = flatten_attributes(note)
    comments = flat_note.get("comments")
    comment_list = comments.get("comment") if isinstance(comments, Mapping) else None
    flat_note["comments"] = [flatten_attributes(comment) for comment in comment_list or []]
    return flat_note


async def convert_notes_xml_to_json(xml: XMLInput) -> List[FlatMapping]:
    """
    Convert a raw Notes API response into a list of flat notes

    Each note's comments become a list of flat comment mappings.
    """
    result = await xml_to_json(xml)
    notes = _osm_root(result).get("note") or []
    logger.debug(f"Converting {len(notes)} notes")
    return [_flatten_note(note) for note in notes]


async def convert_user_xml_to_json(xml: XMLInput) -> FlatMapping:
    """
    Convert a raw User API response into a flat user mapping

    Nested single structures (home, changesets, traces, ...) are flattened
    once, received blocks are flattened entry by entry.

    Raises:
        ElementNotFoundError: If the response holds no user
    """
    result = await xml_to_json(xml)
    raw_user = unwrap_first(_osm_root(result), "user")
    if not isinstance(raw_user, Mapping):
        logger.warning("No user in user response")
        raise ElementNotFoundError("user")

    user = reflatten_nested(flatten_attributes(raw_user))

    blocks = user.get("blocks")
    if isinstance(blocks, dict) and blocks.get("received"):
        blocks = dict(blocks)
        blocks["received"] = [flatten_attributes(block) for block in blocks["received"]]
        user["blocks"] = blocks
    return user
