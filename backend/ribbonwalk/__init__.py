"""RibbonWalk — tangent circle chains rendered as extruded ribbons."""

__version__ = "0.1.0"
