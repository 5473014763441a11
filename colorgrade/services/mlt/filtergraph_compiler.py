"""
Collects the filter chains of a Kdenlive project per media file.
"""

from typing import Optional
from xml.etree import ElementTree as ET

from colorgrade.constants import MLT_ENTRY_TAG, MLT_FILTER_TAG, MLT_PLAYLIST_TAG
from colorgrade.models import FilterGraphMap
from colorgrade.services.mlt.filter_matcher import join_filters, parse_filter
from colorgrade.services.mlt.mlt_util import find_producer, get_media_identity
from colorgrade.util import print_progress


def resolve_media_identity(root: ET.Element, producer_id: str) -> Optional[str]:
    """
    Resolve the media file a playlist entry refers to.

    Args:
        root: MLT document element
        producer_id: Value of the entry's producer attribute

    Returns:
        kdenlive:originalurl of the producer, falling back to resource,
        or None if the producer does not exist or has neither
    """
    producer = find_producer(root, producer_id)
    if producer is None:
        return None
    return get_media_identity(producer)


def compile_entry(entry: ET.Element) -> str:
    """
    Build the filter chain of one playlist entry.

    Unsupported and disabled filters are skipped, the order of the remaining
    filters is kept.

    Args:
        entry: MLT <entry> element

    Returns:
        Comma separated filter chain, empty if nothing applies
    """
    filters = []
    for element in entry:
        if element.tag != MLT_FILTER_TAG:
            continue
        spec = parse_filter(element)
        if spec is not None:
            filters.append(spec)
    return join_filters(filters)


def compile_filtergraphs(root: ET.Element) -> FilterGraphMap:
    """
    Build the filtergraph string of every filtered clip in a project.

    When several entries resolve to the same media file the last one wins.

    Args:
        root: MLT document element

    Returns:
        Mapping from media identity to joined filter chain
    """
    filter_strings: FilterGraphMap = {}

    for playlist in root:
        if playlist.tag != MLT_PLAYLIST_TAG:
            continue
        for entry in playlist:
            if entry.tag != MLT_ENTRY_TAG:
                continue

            filter_string = compile_entry(entry)
            if not filter_string:
                continue

            producer_id = entry.get("producer")
            if producer_id is None:
                print_progress(
                    f"Entry in playlist {playlist.get('id')} has no producer, "
                    "skipping its filters",
                    prefix="!",
                )
                continue

            identity = resolve_media_identity(root, producer_id)
            if identity is None:
                print_progress(
                    f"No media file found for producer {producer_id}, "
                    "skipping its filters",
                    prefix="!",
                )
                continue

            filter_strings[identity] = filter_string

    return filter_strings
