"""SVG page with a row of frames to show the steps of a morph."""

from __future__ import annotations

import copy
import gzip
import io
from typing import Tuple

import svgwrite
import svgwrite.container
from svgwrite.extensions import Inkscape

from avmorph.geom import AvBox
from avmorph.renderer import SvgwritePathRenderer
from avmorph.svgpathdata import SvgPathData

FrameViewbox = Tuple[float, float, float, float]


class AvSvgPage:
    """A row of equally sized frames drawn with svgwrite.

    Frame _i_ is shifted right by i times the viewbox width. The drawing
    holds two Inkscape layers below the root group:
        - frames -- the rendered paths, always written
        - debug  -- bounding boxes, hidden and only written on request
    """

    def __init__(self, frame_viewbox: FrameViewbox, frame_count: int, frame_size_mm: float = 24.0):
        """
        Args:
            frame_viewbox (FrameViewbox): (x, y, width, height) of one frame
            frame_count (int): number of frames in the row
            frame_size_mm (float, optional): printed height of a frame. Defaults to 24.0.
        """
        self.frame_viewbox = frame_viewbox
        self.frame_count = frame_count

        vb_x, vb_y, vb_width, vb_height = frame_viewbox
        row_width = vb_width * frame_count
        mm_per_unit = frame_size_mm / vb_height
        # "full" profile, "tiny" limits the number of decimal places
        self.drawing = svgwrite.Drawing(
            size=(f"{row_width * mm_per_unit}mm", f"{frame_size_mm}mm"),
            viewBox=f"{vb_x} {vb_y} {row_width} {vb_height}",
            profile="full",
        )
        inkscape = Inkscape(self.drawing)
        self.main_layer: svgwrite.container.Group = inkscape.layer(label="frames", locked=False)
        self.debug_layer: svgwrite.container.Group = inkscape.layer(label="debug", locked=True, display="none")

    def _frame_group(self, index: int) -> svgwrite.container.Group:
        return self.drawing.g(transform=f"translate({self.frame_viewbox[2] * index},0)")

    def add_frame(self, index: int, path_data: SvgPathData, **extra) -> svgwrite.container.Group:
        """Render _path_data_ into frame _index_ (0 is the leftmost frame).

        The bounding box of the path is added to the debug layer.

        Args:
            index (int): frame position
            path_data (SvgPathData): the path to draw
            **extra: SVG attributes of the path element, e.g. stroke="black"

        Returns:
            svgwrite.container.Group: the frame group on the main layer
        """
        renderer = SvgwritePathRenderer(**extra)
        path_data.execute(renderer)
        frame = self._frame_group(index)
        frame.add(renderer.path)
        self.main_layer.add(frame)

        box = path_data.bounding_box
        if box is not None:
            self.add_bounding_box(index, box)
        return frame

    def add_bounding_box(self, index: int, box: AvBox, color: str = "red") -> None:
        """Outline _box_ in frame _index_ of the debug layer."""
        outline = self.drawing.rect(
            insert=(box.xmin, box.ymin),
            size=(box.width, box.height),
            fill="none",
            stroke=color,
            stroke_width=0.05,
        )
        frame = self._frame_group(index)
        frame.add(outline)
        self.debug_layer.add(frame)

    def tostring(self, include_debug_layer: bool = False, pretty: bool = False, indent: int = 2) -> str:
        """The SVG document as string, the page itself stays unchanged."""
        drawing = copy.deepcopy(self.drawing)
        root = self.drawing.g(id="root")
        if include_debug_layer:
            root.add(copy.deepcopy(self.debug_layer))
        root.add(copy.deepcopy(self.main_layer))
        drawing.add(root)

        buffer = io.StringIO()
        drawing.write(buffer, pretty=pretty, indent=indent)
        return buffer.getvalue()

    def save_as(
        self,
        filename: str,
        include_debug_layer: bool = False,
        pretty: bool = False,
        compressed: bool = False,
    ) -> None:
        """Write the page to _filename_, gzip compressed (svgz) if _compressed_ is set."""
        data = self.tostring(include_debug_layer, pretty).encode("utf-8")
        if compressed:
            data = gzip.compress(data)
        with open(filename, "wb") as svg_file:
            svg_file.write(data)
