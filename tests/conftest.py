"""Shared fixtures: a small Kdenlive project and helpers to parse snippets."""

from xml.etree import ElementTree as ET

import pytest

SAMPLE_PROJECT = """<?xml version='1.0' encoding='utf-8'?>
<mlt LC_NUMERIC="C" producer="main_bin" version="7.14.0" root="/home/user/Videos">
 <profile frame_rate_num="25" frame_rate_den="1" width="1920" height="1080" progressive="1"/>
 <producer id="producer0" in="00:00:00.000" out="00:00:09.960">
  <property name="length">250</property>
  <property name="eof">pause</property>
  <property name="resource">/media/clip_a.mp4</property>
  <property name="mlt_service">avformat-novalidate</property>
  <property name="kdenlive:originalurl">/media/clip_a.mp4</property>
  <property name="kdenlive:clipname"/>
 </producer>
 <chain id="chain1" out="00:00:19.960">
  <property name="length">500</property>
  <property name="eof">pause</property>
  <property name="resource">/media/clip_b.mov</property>
  <property name="mlt_service">avformat-novalidate</property>
 </chain>
 <producer id="producer2" in="00:00:00.000" out="00:00:04.960">
  <property name="length">125</property>
  <property name="mlt_service">color</property>
 </producer>
 <playlist id="playlist0">
  <property name="kdenlive:audio_track">0</property>
  <entry producer="producer0" in="00:00:00.000" out="00:00:04.960">
   <property name="kdenlive:id">3</property>
   <filter id="filter0">
    <property name="mlt_service">avfilter.exposure</property>
    <property name="kdenlive_id">avfilter.exposure</property>
    <property name="av.exposure">00:00:00.000=0.5</property>
    <property name="av.black">00:00:00.000=0</property>
    <property name="kdenlive:collapsed">0</property>
   </filter>
   <filter id="filter1">
    <property name="mlt_service">avfilter.eq</property>
    <property name="av.contrast">00:00:00.000=1.2</property>
    <property name="av.brightness">00:00:00.000=0</property>
    <property name="av.saturation">00:00:00.000=1</property>
    <property name="av.gamma">00:00:00.000=1</property>
    <property name="disable">1</property>
   </filter>
  </entry>
  <blank length="25"/>
  <entry producer="chain1" in="00:00:00.000" out="00:00:09.960">
   <property name="kdenlive:id">4</property>
   <filter id="filter2">
    <property name="mlt_service">avfilter.colortemperature</property>
    <property name="av.temperature">00:00:00.000=5000</property>
   </filter>
   <filter id="filter3">
    <property name="mlt_service">frei0r.colgate</property>
    <property name="Neutral Color">#7f7f7f</property>
   </filter>
  </entry>
 </playlist>
 <playlist id="playlist1">
  <entry producer="producer2" in="00:00:00.000" out="00:00:04.960">
   <filter id="filter4">
    <property name="mlt_service">avfilter.exposure</property>
    <property name="av.exposure">1</property>
    <property name="av.black">0</property>
   </filter>
  </entry>
 </playlist>
 <tractor id="tractor0" in="00:00:00.000" out="00:00:09.960">
  <track producer="playlist0"/>
  <track producer="playlist1"/>
 </tractor>
</mlt>
"""

EXPECTED_FILTERGRAPHS = {
    "/media/clip_a.mp4": "exposure=exposure=0.5:black=0",
    "/media/clip_b.mov": "colortemperature=temperature=5000:pl=1",
}


@pytest.fixture
def sample_project() -> str:
    return SAMPLE_PROJECT


@pytest.fixture
def sample_root() -> ET.Element:
    return ET.fromstring(SAMPLE_PROJECT)


@pytest.fixture
def project_file(tmp_path):
    path = tmp_path / "project.kdenlive"
    path.write_text(SAMPLE_PROJECT, encoding="utf-8")
    return path


def make_filter(service: str, properties: dict[str, str]) -> ET.Element:
    """Build an MLT <filter> element with the given service and properties."""
    lines = [f'<filter id="f"><property name="mlt_service">{service}</property>']
    for name, value in properties.items():
        lines.append(f'<property name="{name}">{value}</property>')
    lines.append("</filter>")
    return ET.fromstring("".join(lines))
