"""RibbonWalk chain generation engine."""

from ribbonwalk.engine.registry import stage, Layer, get_registry
from ribbonwalk.engine.context import ArcSegment, ChainResult, Circle, Scene
from ribbonwalk.engine.pipeline import Pipeline, build_scene

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "ArcSegment",
    "ChainResult",
    "Circle",
    "Scene",
    "Pipeline",
    "build_scene",
]
