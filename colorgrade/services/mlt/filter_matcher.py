"""
Recognizes Kdenlive filter elements and converts them to filter models.

Each supported MLT service has a parser that only produces a model when the
element's mlt_service matches and every required parameter parses.
"""

from typing import Callable, Optional
from xml.etree import ElementTree as ET

from colorgrade.constants import (
    DISABLED_VALUE,
    MLT_SERVICE_COLORTEMPERATURE,
    MLT_SERVICE_EQ,
    MLT_SERVICE_EXPOSURE,
    MLT_SERVICE_LUT3D,
    PROPERTY_DISABLE,
    PROPERTY_SERVICE,
)
from colorgrade.models import (
    ColorTemperatureFilter,
    EqFilter,
    ExposureFilter,
    FilterSpec,
    LutFilter,
)
from colorgrade.services.mlt.mlt_util import (
    get_property_value,
    parse_float,
    parse_int,
    parse_interpolation,
    parse_string,
    parse_unsigned,
)

# Filter kind -> MLT service it is read from
FILTER_SERVICES = {
    "exposure": MLT_SERVICE_EXPOSURE,
    "lut": MLT_SERVICE_LUT3D,
    "eq": MLT_SERVICE_EQ,
    "colortemperature": MLT_SERVICE_COLORTEMPERATURE,
}


def recognize(element: ET.Element, kind: str) -> bool:
    """
    Check whether a filter element belongs to the given filter kind.

    Args:
        element: MLT <filter> element
        kind: Filter kind (see FILTER_SERVICES)

    Returns:
        True if the element's mlt_service matches the kind's service
    """
    service = FILTER_SERVICES.get(kind)
    if service is None:
        return False
    return get_property_value(element, PROPERTY_SERVICE, parse_string) == service


def is_active(element: ET.Element) -> bool:
    """A filter is active unless its disable property is 1."""
    disabled = get_property_value(element, PROPERTY_DISABLE, parse_int)
    return disabled != DISABLED_VALUE


def _required(
    element: ET.Element, names: dict[str, tuple[str, Callable]]
) -> Optional[dict]:
    values = {}
    for field, (prop, parse) in names.items():
        value = get_property_value(element, prop, parse)
        if value is None:
            return None
        values[field] = value
    return values


def parse_lut(element: ET.Element) -> Optional[LutFilter]:
    if not recognize(element, "lut"):
        return None
    values = _required(
        element,
        {
            "file": ("av.file", parse_string),
            "interpolation": ("av.interp", parse_interpolation),
        },
    )
    if values is None:
        return None
    return LutFilter(is_active=is_active(element), **values)


def parse_eq(element: ET.Element) -> Optional[EqFilter]:
    if not recognize(element, "eq"):
        return None
    values = _required(
        element,
        {
            "contrast": ("av.contrast", parse_float),
            "brightness": ("av.brightness", parse_float),
            "saturation": ("av.saturation", parse_float),
            "gamma": ("av.gamma", parse_float),
        },
    )
    if values is None:
        return None
    # Per-channel gammas are optional
    for channel in ("gamma_r", "gamma_g", "gamma_b"):
        values[channel] = get_property_value(element, f"av.{channel}", parse_float)
    return EqFilter(is_active=is_active(element), **values)


def parse_exposure(element: ET.Element) -> Optional[ExposureFilter]:
    if not recognize(element, "exposure"):
        return None
    values = _required(
        element,
        {
            "exposure": ("av.exposure", parse_float),
            "black": ("av.black", parse_float),
        },
    )
    if values is None:
        return None
    return ExposureFilter(is_active=is_active(element), **values)


def parse_colortemperature(element: ET.Element) -> Optional[ColorTemperatureFilter]:
    if not recognize(element, "colortemperature"):
        return None
    values = _required(element, {"temperature": ("av.temperature", parse_unsigned)})
    if values is None:
        return None
    return ColorTemperatureFilter(is_active=is_active(element), **values)


# Tried in order, first match wins
FILTER_PARSERS: tuple[Callable[[ET.Element], Optional[FilterSpec]], ...] = (
    parse_lut,
    parse_eq,
    parse_exposure,
    parse_colortemperature,
)


def parse_filter(element: ET.Element) -> Optional[FilterSpec]:
    """
    Convert an MLT <filter> element into a filter model.

    Args:
        element: MLT <filter> element

    Returns:
        Filter model, or None if the service is unsupported or a required
        parameter is missing or invalid
    """
    for parser in FILTER_PARSERS:
        spec = parser(element)
        if spec is not None:
            return spec
    return None


def render_filter(spec: FilterSpec) -> str:
    """
    Render a filter model as an ffmpeg filter expression fragment.

    Args:
        spec: Any filter model

    Returns:
        Filter expression, e.g. "exposure=exposure=0.5:black=0"
    """
    return spec.to_filter_string()


def join_filters(filters: list[FilterSpec]) -> str:
    """
    Render the active filters and join them into one filter chain.

    Args:
        filters: Filters in application order

    Returns:
        Comma separated filter chain, empty if no filter is active
    """
    return ",".join(render_filter(f) for f in filters if f.is_active)
