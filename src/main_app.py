"""Main application: morph the two paths of a demo and save the frames as SVG page"""

import argparse
import logging
import sys

from avmorph.demos import DEMO_VIEWBOX, DEMOS, load_demo
from avmorph.page import AvSvgPage, FrameViewbox
from avmorph.svgpathdata import SvgPathData


def build_page(
    start: SvgPathData, end: SvgPathData, frame_count: int, viewbox: FrameViewbox = DEMO_VIEWBOX
) -> AvSvgPage:
    """Interpolate from _start_ to _end_ in _frame_count_ frames (start and end included).

    Raises:
        ShapeMismatchError: the paths are not morphable
    """
    page = AvSvgPage(viewbox, frame_count)
    # stroke width relative to the frame height, 0.2 in a 24x24 frame
    stroke_width = viewbox[3] / 120.0
    current = start.copy()
    for index in range(frame_count):
        fraction = index / (frame_count - 1) if frame_count > 1 else 0.0
        current.interpolate(start, end, fraction, strict=True)
        page.add_frame(index, current, fill="none", stroke="black", stroke_width=stroke_width)
    return page


def main(argv=None) -> int:
    """Main"""
    parser = argparse.ArgumentParser(description="Morph the paths of a demo into a row of frames.")
    parser.add_argument("demo", choices=sorted(DEMOS), help="name of the demo")
    parser.add_argument("-n", "--frames", type=int, default=5, help="number of frames (default: 5)")
    parser.add_argument("-o", "--output", default="main_app.svg", help="output file (default: main_app.svg)")
    parser.add_argument("--debug", action="store_true", help="include bounding boxes and debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    start, end = load_demo(args.demo)
    if not start.is_morphable_with(end):
        print(f"Demo {args.demo!r}: paths are not morphable, split commands until their structure matches.")
        return 1

    page = build_page(start, end, max(1, args.frames), DEMOS[args.demo].viewbox)
    page.save_as(args.output, include_debug_layer=args.debug, pretty=True)
    print(f"file saved: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
