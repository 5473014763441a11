"""
Internal Pydantic models.
These are the source of truth for filter and conversion data in the system.
"""

from pathlib import Path
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from colorgrade.constants import LutInterpolation
from colorgrade.util import format_number


class ExposureFilter(BaseModel):
    """
    Exposure correction (ffmpeg ``exposure`` filter).
    """

    kind: Literal["exposure"] = "exposure"
    is_active: bool = Field(False, description="Whether the filter is applied")
    exposure: float = Field(0.0, description="Exposure correction in EV")
    black: float = Field(0.0, description="Black level correction")

    def to_filter_string(self) -> str:
        return (
            f"exposure=exposure={format_number(self.exposure)}"
            f":black={format_number(self.black)}"
        )


class LutFilter(BaseModel):
    """
    3D LUT application (ffmpeg ``lut3d`` filter).
    """

    kind: Literal["lut"] = "lut"
    is_active: bool = Field(False, description="Whether the filter is applied")
    file: str = Field("", description="Path to the LUT file")
    interpolation: LutInterpolation = Field(
        LutInterpolation.TETRAHEDRAL, description="LUT interpolation mode"
    )

    def to_filter_string(self) -> str:
        return f"lut3d=file={self.file}:interp={self.interpolation.value}"


class EqFilter(BaseModel):
    """
    Brightness, contrast, saturation and gamma (ffmpeg ``eq`` filter).
    Per-channel gammas are only rendered when set.
    """

    kind: Literal["eq"] = "eq"
    is_active: bool = Field(False, description="Whether the filter is applied")
    contrast: float = Field(1.0, description="Contrast multiplier")
    brightness: float = Field(0.0, description="Brightness offset")
    saturation: float = Field(1.0, description="Saturation multiplier")
    gamma: float = Field(1.0, description="Overall gamma")
    gamma_r: Optional[float] = Field(None, description="Red channel gamma")
    gamma_g: Optional[float] = Field(None, description="Green channel gamma")
    gamma_b: Optional[float] = Field(None, description="Blue channel gamma")

    def to_filter_string(self) -> str:
        parts = [
            f"eq=contrast={format_number(self.contrast)}",
            f"brightness={format_number(self.brightness)}",
            f"saturation={format_number(self.saturation)}",
            f"gamma={format_number(self.gamma)}",
        ]
        for name in ("gamma_r", "gamma_g", "gamma_b"):
            value = getattr(self, name)
            if value is not None:
                parts.append(f"{name}={format_number(value)}")
        return ":".join(parts)


class ColorTemperatureFilter(BaseModel):
    """
    White balance shift (ffmpeg ``colortemperature`` filter), lightness preserved.
    """

    kind: Literal["colortemperature"] = "colortemperature"
    is_active: bool = Field(False, description="Whether the filter is applied")
    temperature: int = Field(6500, ge=0, description="Color temperature in Kelvin")

    def to_filter_string(self) -> str:
        return f"colortemperature=temperature={self.temperature}:pl=1"


class ColorBalanceFilter(BaseModel):
    """
    Per tone range RGB offsets (ffmpeg ``colorbalance`` filter).
    """

    kind: Literal["colorbalance"] = "colorbalance"
    is_active: bool = Field(False, description="Whether the filter is applied")
    shadows_red: float = 0.0
    shadows_green: float = 0.0
    shadows_blue: float = 0.0
    midtones_red: float = 0.0
    midtones_green: float = 0.0
    midtones_blue: float = 0.0
    highlights_red: float = 0.0
    highlights_green: float = 0.0
    highlights_blue: float = 0.0
    preserve_lightness: bool = Field(
        False, description="Kept for the editor, not rendered"
    )

    def to_filter_string(self) -> str:
        values = {
            "rs": self.shadows_red,
            "gs": self.shadows_green,
            "bs": self.shadows_blue,
            "rm": self.midtones_red,
            "gm": self.midtones_green,
            "bm": self.midtones_blue,
            "rh": self.highlights_red,
            "gh": self.highlights_green,
            "bh": self.highlights_blue,
        }
        args = ":".join(f"{key}={format_number(v)}" for key, v in values.items())
        return f"colorbalance={args}"


class CustomFilter(BaseModel):
    """
    Raw ffmpeg filter expression passed through unchanged.
    """

    kind: Literal["custom"] = "custom"
    is_active: bool = Field(False, description="Whether the filter is applied")
    expression: str = Field("", description="ffmpeg filter expression")

    def to_filter_string(self) -> str:
        return self.expression


class ScaleFilter(BaseModel):
    """
    Resize (ffmpeg ``scale`` filter), mostly used to speed up previews.
    """

    kind: Literal["scale"] = "scale"
    is_active: bool = Field(False, description="Whether the filter is applied")
    width: int = Field(1280, description="Output width in pixels")
    height: int = Field(720, description="Output height in pixels")

    def to_filter_string(self) -> str:
        return f"scale={self.width}:{self.height}"


FilterSpec = Annotated[
    Union[
        ExposureFilter,
        LutFilter,
        EqFilter,
        ColorTemperatureFilter,
        ColorBalanceFilter,
        CustomFilter,
        ScaleFilter,
    ],
    Field(discriminator="kind"),
]

# Media identity (originalurl or resource) -> joined filter expression
FilterGraphMap = dict[str, str]


class ConversionSettings(BaseModel):
    """
    Everything needed to build ffmpeg preview and conversion commands for one file.
    """

    input_file: Optional[Path] = Field(None, description="Source media file")
    output_file: Optional[Path] = Field(None, description="Converted media file")
    encoder: str = Field("", description="Video encoder passed to -c:v")
    skip_seconds: int = Field(0, ge=0, description="Seconds skipped with -ss")
    extra_args: list[str] = Field(
        default_factory=list, description="Additional ffmpeg arguments"
    )
    filters: list[FilterSpec] = Field(
        default_factory=list, description="Filters in application order"
    )
