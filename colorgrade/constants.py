"""
Static configuration constants for the filtergraph converter.
No logic allowed - only configuration values.
"""

from enum import Enum
from pathlib import Path
from dotenv import load_dotenv

# Base paths
PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / ".env"

# Load environment variables from .env file
# Try the project .env file first, then fall back to current working directory
load_dotenv(dotenv_path=ENV_FILE, verbose=False)
load_dotenv(verbose=False)  # Also check CWD

# MLT service identifiers recognized in Kdenlive projects
MLT_SERVICE_EXPOSURE = "avfilter.exposure"
MLT_SERVICE_LUT3D = "avfilter.lut3d"
MLT_SERVICE_EQ = "avfilter.eq"
MLT_SERVICE_COLORTEMPERATURE = "avfilter.colortemperature"

# MLT element names
MLT_PLAYLIST_TAG = "playlist"
MLT_ENTRY_TAG = "entry"
MLT_FILTER_TAG = "filter"
MLT_PROPERTY_TAG = "property"
MLT_PRODUCER_TAGS = ("producer", "chain")

# MLT property names
PROPERTY_SERVICE = "mlt_service"
PROPERTY_DISABLE = "disable"
PROPERTY_ORIGINAL_URL = "kdenlive:originalurl"
PROPERTY_RESOURCE = "resource"
PROPERTY_FILTERGRAPH = "filtergraph"

# Media identity lookup order (first match wins)
MEDIA_IDENTITY_PROPERTIES = (PROPERTY_ORIGINAL_URL, PROPERTY_RESOURCE)

# Line emitted by the rewriter for each producer
FILTERGRAPH_LINE_TEMPLATE = '  <property name="filtergraph">{value}</property>'

# "disable" property value marking a filter as inactive
DISABLED_VALUE = 1

# ffmpeg preview settings
PREVIEW_LOGLEVEL = "warning"

# Conversion command template placeholders
TEMPLATE_INPUT = "##input##"
TEMPLATE_CLI = "##cli##"
TEMPLATE_FILTER = "##filter##"
TEMPLATE_ENCODER = "##encoder##"
TEMPLATE_OUTPUT = "##output##"
DEFAULT_CONVERSION_TEMPLATE = (
    "ffmpeg ##input## ##cli## ##filter## ##encoder## ##output##"
)

# Suffix for converted media files (e.g., clip.mp4 -> clip_graded.mp4)
GRADED_OUTPUT_SUFFIX = "_graded"

# Environment variable names
ENV_APPEND_FILTER = "COLORGRADE_APPEND_FILTER"
ENV_CONVERSION_TEMPLATE = "COLORGRADE_CONVERSION_TEMPLATE"


class LutInterpolation(str, Enum):
    """Interpolation modes accepted by the lut3d filter."""

    NEAREST = "nearest"
    TRILINEAR = "trilinear"
    TETRAHEDRAL = "tetrahedral"
