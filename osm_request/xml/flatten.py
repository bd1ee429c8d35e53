"""
Shape flattening for parsed XML nodes

The bridge wraps every child element in a list, even when the API only
ever sends one, and keeps attributes under a separate key:

    {
        "$": {"id": "5", "user": "alice"},
        "name": ["Main St"],
        "tags": [],
    }

flatten_attributes() hoists the attributes and unwraps single children:

    {"id": "5", "user": "alice", "name": "Main St"}
"""

from typing import Any, Dict, Mapping, Optional

from ..config import get_config
from .models import FlatMapping


def unwrap_first(node: Mapping[str, Any], key: str) -> Optional[Any]:
    """
    Return the first item stored under key, or None when there is nothing to unwrap

    Absent keys, falsy values and empty sequences all count as absent.
    Values that were never wrapped, such as character data, come back as is.
    """
    value = node.get(key)
    if not value:
        return None
    if isinstance(value, (list, tuple)):
        return value[0]
    return value


def flatten_attributes(node: Mapping[str, Any]) -> FlatMapping:
    """
    Flatten one parsed node into a plain mapping

    Siblings after the first item of a child list are dropped. Nested values
    keep their raw shape, call again on them for deeper flattening.
    """
    attr_key = get_config().xml.attr_key
    flat: Dict[str, Any] = dict(node.get(attr_key) or {})

    for key in node:
        if key == attr_key:
            continue
        value = unwrap_first(node, key)
        if value is None:
            continue
        flat[key] = value

    return flat


def is_raw_node(value: Any) -> bool:
    """True if value still carries an attribute mapping"""
    if not isinstance(value, Mapping):
        return False
    attributes = value.get(get_config().xml.attr_key)
    return isinstance(attributes, Mapping) and bool(attributes)


def reflatten_nested(mapping: Mapping[str, Any]) -> FlatMapping:
    """
    Flatten every value of an already flat mapping that still looks like a raw node

    Goes exactly one level deep. Values without attributes are kept as they
    are, so running it on its own output changes nothing.
    """
    return {
        key: flatten_attributes(value) if is_raw_node(value) else value
        for key, value in mapping.items()
    }
