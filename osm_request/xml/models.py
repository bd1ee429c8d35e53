"""
OSM XML data types

Type aliases for parsed XML trees and the errors raised by converters
"""

from typing import Any, Dict, List, Optional, Union

ELEMENT_TYPES = ("node", "way", "relation")

# A parsed XML element: either its text or a mapping of attributes ("$"),
# character data ("_") and child lists keyed by tag name
RawNode = Union[str, Dict[str, Any]]
RawTree = Dict[str, RawNode]
FlatMapping = Dict[str, Any]
ElementList = List[Dict[str, Any]]


class ElementNotFoundError(LookupError):
    """Raised when a response does not contain the element a converter expects"""

    def __init__(self, element_type: str, element_id: Optional[str] = None):
        self.element_type = element_type
        self.element_id = element_id
        if element_id is None:
            message = f"No <{element_type}> element in response"
        else:
            message = f"No <{element_type}> element in response for id {element_id}"
        super().__init__(message)
