import pytest

import main
from colorgrade.pipeline import (
    convert_project,
    extract_filtergraphs,
    generate_conversion_commands,
)
from tests.conftest import EXPECTED_FILTERGRAPHS, SAMPLE_PROJECT

TARGET_PROJECT = """<?xml version='1.0' encoding='utf-8'?>
<mlt LC_NUMERIC="C" producer="main_bin" version="7.14.0">
 <chain id="chain7">
  <property name="resource">/media/clip_b.mov</property>
  <property name="filtergraph">hflip</property>
 </chain>
</mlt>
"""


def test_extract_filtergraphs(project_file):
    assert extract_filtergraphs(project_file) == EXPECTED_FILTERGRAPHS


def test_convert_project_writes_output(project_file, tmp_path):
    output = tmp_path / "out.kdenlive"

    result = convert_project(project_file, output)

    assert result == EXPECTED_FILTERGRAPHS
    text = output.read_text(encoding="utf-8")
    assert text.count('name="filtergraph"') == 2
    assert project_file.read_text(encoding="utf-8") == SAMPLE_PROJECT


def test_convert_project_insert_into(project_file, tmp_path):
    target = tmp_path / "target.kdenlive"
    target.write_text(TARGET_PROJECT, encoding="utf-8")
    output = tmp_path / "out.kdenlive"

    convert_project(project_file, output, insert_into=target, delete_existing=True)

    assert output.read_text(encoding="utf-8") == TARGET_PROJECT.replace(
        '  <property name="filtergraph">hflip</property>\n', ""
    ).replace(
        '  <property name="resource">',
        '  <property name="filtergraph">colortemperature=temperature=5000:pl=1</property>\n'
        '  <property name="resource">',
    )


def test_missing_input_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        convert_project(tmp_path / "missing.kdenlive", tmp_path / "out.kdenlive")


def test_malformed_xml_raises_without_output(tmp_path):
    broken = tmp_path / "broken.kdenlive"
    broken.write_text("<mlt><playlist></mlt>", encoding="utf-8")
    output = tmp_path / "out.kdenlive"

    with pytest.raises(ValueError, match="Could not parse"):
        convert_project(broken, output)
    assert not output.exists()


def test_unwritable_output_raises(project_file, tmp_path):
    with pytest.raises(RuntimeError, match="Could not write output file"):
        convert_project(project_file, tmp_path / "missing_dir" / "out.kdenlive")


def test_generate_conversion_commands():
    commands = generate_conversion_commands(
        EXPECTED_FILTERGRAPHS, template="ffmpeg ##input## ##filter## ##output##"
    )

    assert commands == [
        "ffmpeg -i /media/clip_a.mp4 -vf exposure=exposure=0.5:black=0 "
        "/media/clip_a_graded.mp4",
        "ffmpeg -i /media/clip_b.mov -vf colortemperature=temperature=5000:pl=1 "
        "/media/clip_b_graded.mov",
    ]


def test_cli_converts_project(project_file, tmp_path, monkeypatch):
    monkeypatch.delenv("COLORGRADE_APPEND_FILTER", raising=False)
    output = tmp_path / "out.kdenlive"

    exit_code = main.run(
        [str(project_file), str(output), "-d", "--append-filter", "format=yuv420p"]
    )

    assert exit_code == 0
    assert (
        "exposure=exposure=0.5:black=0,format=yuv420p" in output.read_text(encoding="utf-8")
    )


def test_cli_prints_commands(project_file, tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("COLORGRADE_APPEND_FILTER", raising=False)
    monkeypatch.delenv("COLORGRADE_CONVERSION_TEMPLATE", raising=False)

    exit_code = main.run(
        [
            str(project_file),
            str(tmp_path / "out.kdenlive"),
            "--print-commands",
            "--encoder",
            "libx265",
        ]
    )

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "-c:v libx265 /media/clip_b_graded.mov" in out


def test_cli_reports_failure(tmp_path, capsys):
    exit_code = main.run([str(tmp_path / "missing.kdenlive"), str(tmp_path / "out")])

    assert exit_code == 1
    assert "Fatal error: File not found" in capsys.readouterr().err
