"""
ffmpeg command building service.
Turns conversion settings and a filter chain into ffmpeg/ffplay arguments.
Nothing here runs a process; callers decide how to execute the arguments.
"""

import shlex
from pathlib import Path

from colorgrade.constants import (
    DEFAULT_CONVERSION_TEMPLATE,
    PREVIEW_LOGLEVEL,
    TEMPLATE_CLI,
    TEMPLATE_ENCODER,
    TEMPLATE_FILTER,
    TEMPLATE_INPUT,
    TEMPLATE_OUTPUT,
)
from colorgrade.models import ConversionSettings
from colorgrade.services.mlt.filter_matcher import join_filters


class FFmpegCommandBuilder:
    """
    Builds argument lists for frame previews, playback and conversion.
    """

    def __init__(self, settings: ConversionSettings):
        """
        Initialize the command builder.

        Args:
            settings: Input/output files, encoder, skip time and filters
        """
        self.settings = settings

    def filter_args(self) -> list[str]:
        """
        Get the -vf option for the active filters.

        Returns:
            ["-vf", chain], or an empty list if no filter is active
        """
        filter_string = join_filters(self.settings.filters)
        if not filter_string:
            return []
        return ["-vf", filter_string]

    def skip_args(self) -> list[str]:
        return ["-ss", str(self.settings.skip_seconds)]

    def input_args(self) -> list[str]:
        if self.settings.input_file is None:
            raise ValueError("No input file set")
        return ["-i", str(self.settings.input_file)]

    def encoder_args(self) -> list[str]:
        if not self.settings.encoder:
            return []
        return ["-c:v", self.settings.encoder]

    def output_args(self) -> list[str]:
        if self.settings.output_file is None:
            raise ValueError("No output file set")
        return [str(self.settings.output_file)]

    def preview_frame_args(self, preview_path: Path | str) -> list[str]:
        """
        Build ffmpeg arguments extracting a single filtered frame.

        Args:
            preview_path: Image file the frame is written to

        Returns:
            Argument list (without the ffmpeg executable)
        """
        return [
            "-y",
            "-loglevel",
            PREVIEW_LOGLEVEL,
            *self.skip_args(),
            *self.input_args(),
            "-frames:v",
            "1",
            *self.settings.extra_args,
            *self.filter_args(),
            str(preview_path),
        ]

    def play_args(self) -> list[str]:
        """
        Build ffplay arguments playing the filtered input.

        Returns:
            Argument list (without the ffplay executable)
        """
        return [
            *self.skip_args(),
            *self.input_args(),
            *self.settings.extra_args,
            *self.filter_args(),
        ]

    def conversion_command(self, template: str = DEFAULT_CONVERSION_TEMPLATE) -> str:
        """
        Fill a conversion command template.

        Placeholders: ##input##, ##cli##, ##filter##, ##encoder##, ##output##.
        Arguments are shell quoted where needed.

        Args:
            template: Command template

        Returns:
            Command line with all placeholders replaced
        """
        replacements = {
            TEMPLATE_INPUT: self.input_args,
            TEMPLATE_CLI: lambda: self.settings.extra_args,
            TEMPLATE_FILTER: self.filter_args,
            TEMPLATE_ENCODER: self.encoder_args,
            TEMPLATE_OUTPUT: self.output_args,
        }
        command = template
        for placeholder, get_args in replacements.items():
            if placeholder in command:
                command = command.replace(placeholder, shlex.join(get_args()))
        return command
