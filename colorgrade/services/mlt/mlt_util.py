"""
Utility functions for reading MLT XML documents.
Independent helper functions that don't require class state.
"""

from typing import Callable, Optional, TypeVar
from xml.etree import ElementTree as ET

from colorgrade.constants import (
    MLT_PRODUCER_TAGS,
    MLT_PROPERTY_TAG,
    MEDIA_IDENTITY_PROPERTIES,
    LutInterpolation,
)

T = TypeVar("T")


def strip_timestamp(text: str) -> str:
    """
    Remove a keyframe timestamp prefix from a property value.

    Kdenlive stores animatable parameters as "00:00:00.000=3.5". The real
    value is whatever follows the last "=".

    Args:
        text: Raw property text

    Returns:
        Value without the timestamp prefix
    """
    if "=" in text:
        return text.rpartition("=")[2]
    return text


def parse_float(text: str) -> Optional[float]:
    """Parse a float, returning None on failure."""
    try:
        return float(text)
    except ValueError:
        return None


def parse_int(text: str) -> Optional[int]:
    """Parse an integer, returning None on failure."""
    try:
        return int(text)
    except ValueError:
        return None


def parse_unsigned(text: str) -> Optional[int]:
    """Parse a non-negative integer, returning None on failure."""
    value = parse_int(text)
    if value is None or value < 0:
        return None
    return value


def parse_string(text: str) -> Optional[str]:
    """Identity parser for string properties."""
    return text


def parse_interpolation(text: str) -> Optional[LutInterpolation]:
    """Parse a lut3d interpolation mode, returning None if unknown."""
    try:
        return LutInterpolation(text)
    except ValueError:
        return None


def get_property_text(element: ET.Element, name: str) -> Optional[str]:
    """
    Get the raw text of the first property with the given name.

    The element itself and all of its descendants are searched.

    Args:
        element: Element owning the property (filter, producer, ...)
        name: Value of the property's name attribute

    Returns:
        Property text, or None if missing or empty
    """
    for prop in element.iter(MLT_PROPERTY_TAG):
        if prop.get("name") == name:
            return prop.text or None
    return None


def get_property_value(
    element: ET.Element, name: str, parse: Callable[[str], Optional[T]]
) -> Optional[T]:
    """
    Get a typed property value with the timestamp prefix removed.

    Args:
        element: Element owning the property
        name: Property name
        parse: Parser returning None when the text is not a valid value

    Returns:
        Parsed value, or None if the property is missing or unparseable
    """
    text = get_property_text(element, name)
    if text is None:
        return None
    return parse(strip_timestamp(text))


def parse_mlt_document(xml_text: str, source: str = "input file") -> ET.Element:
    """
    Parse MLT XML text into its document element.

    Args:
        xml_text: Full XML document
        source: Description of the document, used in error messages

    Returns:
        Root element (<mlt>)

    Raises:
        ValueError: If the text is not well-formed XML
    """
    try:
        return ET.fromstring(xml_text.lstrip("\ufeff"))
    except ET.ParseError as e:
        raise ValueError(f"Could not parse {source} as XML: {e}") from e


def find_producer(root: ET.Element, producer_id: str) -> Optional[ET.Element]:
    """
    Find a producer or chain element by id.

    Args:
        root: MLT document element
        producer_id: Value of the id attribute

    Returns:
        First matching producer/chain, or None
    """
    for child in root:
        if child.tag in MLT_PRODUCER_TAGS and child.get("id") == producer_id:
            return child
    return None


def get_media_identity(producer: ET.Element) -> Optional[str]:
    """
    Get the media file identifying a producer.

    kdenlive:originalurl is preferred since resource may point to a proxy clip.

    Args:
        producer: Producer or chain element

    Returns:
        Media path as written in the project, or None
    """
    properties = [p for p in producer if p.tag == MLT_PROPERTY_TAG]
    for name in MEDIA_IDENTITY_PROPERTIES:
        for prop in properties:
            if prop.get("name") == name:
                return prop.text or None
    return None
