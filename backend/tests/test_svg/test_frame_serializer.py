"""Tests for frame SVG serialization."""

import math
import re

from ribbonwalk.engine.context import ArcSegment
from ribbonwalk.engine.config import SceneConfig
from ribbonwalk.render.renderer import render
from ribbonwalk.svg.serializer import arc_path_data, scene_elements, serialize_frame, serialize_scene


def test_arc_path_quarter_turn():
    d = arc_path_data([ArcSegment(0, 0, 10, 0.0, math.pi / 2, cw=True)])
    assert d == "M10 0 A10 10 0 0 1 0 10"


def test_arc_path_large_arc_flag():
    d = arc_path_data([ArcSegment(0, 0, 10, 0.0, 3 * math.pi / 2, cw=True)])
    assert " 0 1 1 " in d


def test_full_turn_split_in_two():
    d = arc_path_data([ArcSegment(0, 0, 10, 1.0, 1.0, cw=True)])
    assert d.count("A") == 2


def test_one_subpath_per_arc(hand_scene):
    d = arc_path_data(hand_scene.arcs)
    assert d.count("M") == len(hand_scene.arcs)


def test_frame_svg_structure(hand_scene):
    svg = serialize_frame(render(hand_scene, 0), title="frame 0")
    assert svg.startswith("<?xml")
    assert "<title>frame 0</title>" in svg
    assert svg.count("<g") == hand_scene.config.layers
    # body + outline per layer
    assert svg.count("<use") == 2 * hand_scene.config.layers
    assert 'stroke="rgb(0,255,255)"' in svg
    assert svg.rstrip().endswith("</svg>")


def test_translate_transform_written(hand_scene):
    svg = serialize_frame(render(hand_scene, 0))
    assert 'transform="translate(-7 7)"' in svg
    # front layer has no transform
    assert "  <g>" in svg


def test_perspective_transform_written(hand_scene):
    cfg = SceneConfig(canvas_width=500, canvas_height=500, layers=3, depth_mode="perspective")
    svg = serialize_frame(render(hand_scene, 0, config=cfg))
    assert re.search(r"translate\(250 250\) scale\(0\.980100\) translate\(-250 -250\)", svg)


def test_empty_arcs_frame_is_background_only(hand_scene):
    hand_scene.arcs = []
    svg = serialize_frame(render(hand_scene, 0))
    assert "<rect" in svg
    assert "<use" not in svg
    assert "<path" not in svg


def test_fillers_written(hand_scene):
    from ribbonwalk.engine.context import Circle

    hand_scene.fillers = [Circle(400, 400, 15)]
    svg = serialize_frame(render(hand_scene, 0))
    assert '<circle cx="400" cy="400" r="15"' in svg


def test_flat_scene_svg(hand_scene):
    svg = serialize_scene(scene_elements(hand_scene), 500, 500)
    assert svg.count("<circle") == len(hand_scene.chain)
    assert svg.count("<path") == 1
    assert 'viewBox="0 0 500 500"' in svg
