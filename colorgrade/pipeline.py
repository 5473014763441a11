"""
Pipeline orchestration functions.
Each function covers one step between project files on disk and the
filtergraph services.
"""

from pathlib import Path
from typing import Optional

from colorgrade.constants import DEFAULT_CONVERSION_TEMPLATE, GRADED_OUTPUT_SUFFIX
from colorgrade.models import ConversionSettings, CustomFilter, FilterGraphMap
from colorgrade.services.ffmpeg import FFmpegCommandBuilder
from colorgrade.services.mlt import compile_filtergraphs, rewrite_document
from colorgrade.services.mlt.mlt_util import parse_mlt_document
from colorgrade.util import (
    build_suffixed_path,
    print_progress,
    read_text_file,
    write_text_file,
)


def extract_filtergraphs(input_path: Path | str) -> FilterGraphMap:
    """
    Read a Kdenlive project and compile the filter chain of every clip.

    Args:
        input_path: Kdenlive project file

    Returns:
        Mapping from media identity to filter chain

    Raises:
        FileNotFoundError: If the project doesn't exist
        RuntimeError: If the project can't be read
        ValueError: If the project is not valid XML
    """
    print_progress(f"Reading project: {input_path}")
    xml_text = read_text_file(input_path)
    root = parse_mlt_document(xml_text, source=f"input file {input_path}")
    return compile_filtergraphs(root)


def convert_project(
    input_path: Path | str,
    output_path: Path | str,
    insert_into: Optional[Path | str] = None,
    delete_existing: bool = False,
    append_filter: Optional[str] = None,
) -> FilterGraphMap:
    """
    Write a copy of a project with a filtergraph property per filtered clip.

    Filters are always taken from input_path. The text they are inserted into
    comes from insert_into when given, otherwise from input_path. The output
    is built completely before anything is written.

    Args:
        input_path: Project the filters are extracted from
        output_path: Where the rewritten project is written
        insert_into: Optional project receiving the filtergraph properties
        delete_existing: Remove filtergraph properties already present
        append_filter: Optional filter appended to every inserted chain

    Returns:
        The filter chains that were inserted, keyed by media identity

    Raises:
        FileNotFoundError: If an input file doesn't exist
        RuntimeError: If a file can't be read or written
        ValueError: If the input project is not valid XML
    """
    filter_strings = extract_filtergraphs(input_path)
    print_progress(f"Found filters for {len(filter_strings)} media file(s)")
    for media, filter_string in filter_strings.items():
        print_progress(f"{media}: {filter_string}", prefix="  -")

    if insert_into is not None:
        print_progress(f"Inserting into: {insert_into}")
        target_text = read_text_file(insert_into, description="insert_into file")
    else:
        target_text = read_text_file(input_path)

    output_text = rewrite_document(
        target_text,
        filter_strings,
        delete_existing=delete_existing,
        append_filter=append_filter,
    )

    write_text_file(output_path, output_text)
    print_progress(f"Project written: {output_path}")
    return filter_strings


def generate_conversion_commands(
    filter_strings: FilterGraphMap,
    template: str = DEFAULT_CONVERSION_TEMPLATE,
    encoder: str = "",
    output_suffix: str = GRADED_OUTPUT_SUFFIX,
    append_filter: Optional[str] = None,
) -> list[str]:
    """
    Build one ffmpeg conversion command per graded media file.

    Args:
        filter_strings: Mapping from media identity to filter chain
        template: Conversion command template
        encoder: Video encoder, empty to let ffmpeg choose
        output_suffix: Appended to the media file stem for the output file
        append_filter: Optional filter appended to every chain

    Returns:
        Command lines in mapping order
    """
    commands = []
    for media, filter_string in filter_strings.items():
        if append_filter:
            filter_string = f"{filter_string},{append_filter}"
        settings = ConversionSettings(
            input_file=Path(media),
            output_file=build_suffixed_path(media, output_suffix),
            encoder=encoder,
            filters=[CustomFilter(is_active=True, expression=filter_string)],
        )
        commands.append(FFmpegCommandBuilder(settings).conversion_command(template))
    return commands
