"""c1mapping - C1 support points for cubic boundary mappings.

c1mapping computes the extra interpolation points that a degree-3 geometric
mapping needs along the edges of a two-dimensional cell. Edges on a curved
boundary get points on a cubic that matches the boundary normals at both
vertices, so the mapping is tangent-continuous across cells. Interior edges
are subdivided along the straight chord.

Example:
    $ c1mapping annulus.json

This will create annulus-support-points.json with two points per edge of
every cell.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
