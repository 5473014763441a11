"""
Inserts filtergraph properties into Kdenlive project text.

The document is edited line by line instead of being re-serialized from the
parsed tree, so formatting, attribute order and whitespace of hand-edited
projects survive unchanged.
"""

import html
import io
import re
from typing import Optional
from xml.sax.saxutils import escape

from colorgrade.constants import (
    FILTERGRAPH_LINE_TEMPLATE,
    MEDIA_IDENTITY_PROPERTIES,
    PROPERTY_FILTERGRAPH,
)
from colorgrade.models import FilterGraphMap

FILTERGRAPH_MARKER = f'name="{PROPERTY_FILTERGRAPH}"'
MEDIA_PROPERTY_PATTERN = re.compile(
    r'<property name="(?:'
    + "|".join(re.escape(name) for name in MEDIA_IDENTITY_PROPERTIES)
    + r')">(?P<value>.*?)</property>'
)
PRODUCER_START_PATTERN = re.compile(r"<(?:producer|chain)[\s>/]")


def _line_ending(line: str, default: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith("\n"):
        return "\n"
    if line.endswith("\r"):
        return "\r"
    return default


def build_filtergraph_line(
    filter_string: str, append_filter: Optional[str] = None
) -> str:
    """
    Build the property line inserted into a producer (without line ending).

    Args:
        filter_string: Compiled filter chain of the producer
        append_filter: Optional filter appended to every chain

    Returns:
        XML property line
    """
    if append_filter:
        filter_string = f"{filter_string},{append_filter}"
    return FILTERGRAPH_LINE_TEMPLATE.format(value=escape(filter_string))


def rewrite_document(
    xml_text: str,
    filter_strings: FilterGraphMap,
    delete_existing: bool = False,
    append_filter: Optional[str] = None,
) -> str:
    """
    Insert a filtergraph property into every producer with a filter chain.

    For each line:
    1. With delete_existing, existing filtergraph properties are dropped.
    2. A kdenlive:originalurl or resource property whose value is a key of
       filter_strings gets a filtergraph property inserted right before it,
       at most once per producer/chain element.
    3. The line itself is copied unchanged.

    Args:
        xml_text: Original project text
        filter_strings: Mapping from media identity to filter chain
        delete_existing: Remove filtergraph properties already present
        append_filter: Optional filter appended to every inserted chain

    Returns:
        Rewritten project text
    """
    default_ending = "\r\n" if "\r\n" in xml_text else "\n"
    output: list[str] = []
    inserted_in_producer = False

    for line in io.StringIO(xml_text, newline=""):
        if PRODUCER_START_PATTERN.search(line):
            inserted_in_producer = False

        if delete_existing and FILTERGRAPH_MARKER in line:
            continue

        match = MEDIA_PROPERTY_PATTERN.search(line)
        if match and not inserted_in_producer:
            media = html.unescape(match.group("value"))
            filter_string = filter_strings.get(media)
            if filter_string is not None:
                output.append(
                    build_filtergraph_line(filter_string, append_filter)
                    + _line_ending(line, default_ending)
                )
                inserted_in_producer = True

        output.append(line)

    return "".join(output)
