"""Vector path data engine: measuring, morphing and splitting SVG path geometry."""
