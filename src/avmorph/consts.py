"""Central module containing constants used by the path data engine"""

from __future__ import annotations

import math

# Order of the Gauss-Legendre quadrature used for Bezier arc lengths
GAUSS_LEGENDRE_ORDER: int = 24

# Roots with an imaginary part below this value are treated as real
ROOT_IMAG_TOLERANCE: float = 1.0e-9
# Roots this far outside [0, 1] are still clamped onto the curve
ROOT_RANGE_TOLERANCE: float = 1.0e-9
# Relative size below which polynomial coefficients are trimmed
POLY_COEFF_TOLERANCE: float = 1.0e-12

# Indices of large-arc-flag and sweep-flag inside the 9 raw arc arguments
#   (x0, y0, rx, ry, x_axis_rotation, large_arc_flag, sweep_flag, x1, y1)
ARC_LARGE_ARC_FLAG_INDEX: int = 5
ARC_SWEEP_FLAG_INDEX: int = 6
ARC_FLAG_INDICES = (ARC_LARGE_ARC_FLAG_INDEX, ARC_SWEEP_FLAG_INDEX)
ARC_ARGS_COUNT: int = 9

# Maximum sweep covered by a single cubic when approximating an arc
ARC_MAX_SEGMENT_SWEEP: float = math.pi / 2.0

# Significant digits when serializing numbers into a path string
SVG_NUMBER_PRECISION: int = 10


def main():
    """Main"""
    print("GAUSS_LEGENDRE_ORDER:", GAUSS_LEGENDRE_ORDER)
    print("ARC_FLAG_INDICES:    ", ARC_FLAG_INDICES)
    print("SVG_NUMBER_PRECISION:", SVG_NUMBER_PRECISION)


if __name__ == "__main__":
    main()
