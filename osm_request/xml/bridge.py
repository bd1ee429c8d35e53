"""
XML bridge

Converts between XML text and nested mappings on top of lxml, using the
following conventions for each element:
- attributes under the "$" key
- own character data under the "_" key
- child elements as lists keyed by tag name, even when single
- elements with neither attributes nor children collapse to their text
"""

import asyncio
import re
from typing import Any, Dict, Mapping, Union

from loguru import logger
from lxml import etree

from ..config import get_config
from .escape import stringify_value
from .models import RawNode, RawTree

# Leading declaration of a text document; its encoding no longer applies once decoded
_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml\s[^>]*\?>")


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def _own_text(element: etree._Element) -> str:
    """Text directly inside element, excluding descendants"""
    parts = [element.text or ""]
    for child in element:
        parts.append(child.tail or "")
    return "".join(parts)


def _element_to_node(element: etree._Element) -> RawNode:
    xml_config = get_config().xml
    node: Dict[str, Any] = {}

    if element.attrib:
        node[xml_config.attr_key] = {
            etree.QName(name).localname: value
            for name, value in element.attrib.items()
        }

    for child in element:
        if not isinstance(child.tag, str):
            # Entities and other non-element nodes
            continue
        node.setdefault(etree.QName(child).localname, []).append(_element_to_node(child))

    text = _own_text(element)
    if not node:
        return text
    if text.strip():
        node[xml_config.char_key] = text
    return node


def parse_xml(xml: Union[str, bytes]) -> RawTree:
    """
    Parse XML text into a nested mapping

    Args:
        xml: XML document, as text or bytes

    Returns:
        Mapping of the root tag name to the root node

    Raises:
        lxml.etree.XMLSyntaxError: If the document is malformed
    """
    if isinstance(xml, str):
        # lxml refuses str input that carries an encoding declaration
        xml = _XML_DECLARATION_RE.sub("", xml, count=1).strip()
    root = etree.fromstring(xml, parser=_make_parser())
    logger.debug(f"Parsed XML document <{etree.QName(root).localname}> (size {len(xml)})")
    return {etree.QName(root).localname: _element_to_node(root)}


async def xml_to_json(xml: Union[str, bytes]) -> RawTree:
    """
    Async wrapper for parse_xml

    Runs the parse in the default executor. Parse errors propagate unchanged.
    """
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, parse_xml, xml)
    except etree.XMLSyntaxError as e:
        logger.debug(f"XML parse failed: {e}")
        raise


def _fill_element(element: etree._Element, value: Any) -> None:
    xml_config = get_config().xml

    if not isinstance(value, Mapping):
        element.text = stringify_value(value)
        return

    for key, child_value in value.items():
        if key == xml_config.attr_key:
            for name, attr_value in (child_value or {}).items():
                element.set(name, stringify_value(attr_value))
        elif key == xml_config.char_key:
            element.text = stringify_value(child_value)
        elif isinstance(child_value, (list, tuple)):
            for item in child_value:
                _fill_element(etree.SubElement(element, key), item)
        else:
            _fill_element(etree.SubElement(element, key), child_value)


def json_to_xml(obj: Mapping[str, Any]) -> str:
    """
    Build an XML document from a nested mapping

    A mapping with a single key uses that key as the root tag, anything else
    is wrapped in the configured root element.

    Returns:
        XML text starting with the XML declaration
    """
    xml_config = get_config().xml

    if len(obj) == 1:
        root_name, root_value = next(iter(obj.items()))
        if isinstance(root_value, (list, tuple)):
            # A list cannot be the document element, wrap it
            root_name, root_value = xml_config.root_name, obj
    else:
        root_name, root_value = xml_config.root_name, obj

    root = etree.Element(root_name)
    _fill_element(root, root_value)
    etree.indent(root, space=xml_config.indent)

    declaration = f'<?xml version="{xml_config.xml_version}" encoding="{xml_config.encoding}"?>'
    body = etree.tostring(root, encoding="unicode")
    logger.debug(f"Built XML document <{root_name}> ({len(body)} chars)")
    return f"{declaration}\n{body}"
