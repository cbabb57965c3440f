"""Test module for avmorph.renderer

The tests are run using pytest.
"""

import pytest

from avmorph.commands import create_sub_path_commands
from avmorph.pathparser import parse_commands
from avmorph.renderer import (
    AvPathRenderer,
    RecordingRenderer,
    SvgwritePathRenderer,
    render_commands,
)

PATH_STRING = "M0 0 L10 0 Q15 5 20 0 C20 1 21 1 21 0 A2 2 0 0 1 25 0 Z"


def test_renderer_is_abstract():
    """Test that the backend interface can not be instantiated."""
    with pytest.raises(TypeError):
        AvPathRenderer()  # pylint: disable=abstract-class-instantiated


def test_recording_renderer_keeps_sub_path_order():
    """Test that sub-paths are rendered one after the other."""
    renderer = RecordingRenderer()
    render_commands(create_sub_path_commands(parse_commands("M0 0 L1 0 Z M5 5 L6 6")), renderer)

    assert [operation for operation, _ in renderer.operations] == [
        "move_to",
        "line_to",
        "close_path",
        "move_to",
        "line_to",
    ]
    assert renderer.operations[3] == ("move_to", (5.0, 5.0))


def test_render_nothing():
    """Test that an empty path renders nothing."""
    renderer = RecordingRenderer()
    render_commands([], renderer)

    assert renderer.operations == []


def test_svgwrite_renderer_path_data():
    """Test the path data collected in the svgwrite path element."""
    renderer = SvgwritePathRenderer(fill="none", stroke="black")
    render_commands(create_sub_path_commands(parse_commands(PATH_STRING)), renderer)

    assert renderer.d == (
        "M 0.0 0.0 L 10.0 0.0 Q 15.0 5.0 20.0 0.0 C 20.0 1.0 21.0 1.0 21.0 0.0 A 2.0 2.0 0.0 0 1 25.0 0.0 Z"
    )


def test_svgwrite_renderer_element():
    """Test that the svgwrite element carries the attributes and the path data."""
    renderer = SvgwritePathRenderer(fill="none", stroke="black")
    render_commands(create_sub_path_commands(parse_commands("M0 0 L10 0")), renderer)
    xml = renderer.path.tostring()

    assert xml.startswith("<path")
    assert 'd="M 0.0 0.0 L 10.0 0.0"' in xml
    assert 'stroke="black"' in xml
