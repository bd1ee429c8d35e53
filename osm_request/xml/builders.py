"""
OSM request document builders

Builds the changeset and preferences XML bodies sent to the OSM API.
Values are escaped, keys are written as given and must be markup-safe.
"""

from typing import Any, Dict, Mapping, Optional

from loguru import logger

from ..config import get_config
from ..version import __version__
from .escape import encode_xml, stringify_value

_LINE_SEPARATOR = "\n        "


def _library_stamp() -> str:
    return f"{get_config().library_name} {__version__}"


def _key_value_lines(element: str, values: Mapping[str, Any]) -> str:
    lines = [
        f'<{element} k="{key}" v="{encode_xml(stringify_value(value))}"/>'
        for key, value in values.items()
    ]
    return _LINE_SEPARATOR.join(lines)


def _changeset_document(created_by: str, comment: str, tags: Mapping[str, Any]) -> str:
    xml = f"""
    <osm>
      <changeset>
        <tag k="created_by" v="{encode_xml(created_by)}"/>
        <tag k="created_by:library" v="{_library_stamp()}"/>
        <tag k="comment" v="{encode_xml(comment)}"/>
        {_key_value_lines("tag", tags)}
      </changeset>
    </osm>
  """
    logger.debug(f"Built changeset document with {len(tags) + 3} tags")
    return xml


def build_changeset_xml(
    created_by: str = "",
    comment: str = "",
    optional_tags: Optional[Dict[str, Any]] = None
) -> str:
    """
    Build a stringified OSM changeset

    Args:
        created_by: Editor name for the created_by tag
        comment: Changeset comment
        optional_tags: Extra tags appended after the fixed ones, in order

    Returns:
        Changeset XML document
    """
    return _changeset_document(created_by, comment, optional_tags or {})


def build_changeset_from_object_xml(
    tags: Dict[str, Any],
    created_by: str = "",
    comment: str = ""
) -> str:
    """
    Build an OSM changeset from known tags, intended for update

    Args:
        tags: Tags appended after the fixed ones, in order
        created_by: Editor name for the created_by tag
        comment: Changeset comment

    Returns:
        Changeset XML document
    """
    return _changeset_document(created_by, comment, tags)


def build_preferences_from_object_xml(prefs: Dict[str, Any]) -> str:
    """Build an OSM preferences document, one <preference> per entry"""
    xml = f"""
    <osm>
      <preferences>
        {_key_value_lines("preference", prefs)}
      </preferences>
    </osm>
  """
    logger.debug(f"Built preferences document with {len(prefs)} preferences")
    return xml
