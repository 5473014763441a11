"""ffmpeg command building service."""

from colorgrade.services.ffmpeg.command_builder import FFmpegCommandBuilder

__all__ = ["FFmpegCommandBuilder"]
