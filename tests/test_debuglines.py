import numpy as np
import pytest

from heartengine.bbox import BoundingBox
from heartengine.debuglines import (
    SkeletonLines,
    SkeletonNode,
    box_lines,
    joint_color,
    joint_marker,
    scene_box_lines,
    skeleton_lines,
)


def at(name, t, children=()):
    m = np.identity(4)
    m[:3, 3] = t
    return SkeletonNode(name, m, list(children))


def test_box_lines_are_cube_edges():
    low, high = np.array([0.0, 1.0, 2.0]), np.array([3.0, 5.0, 4.0])
    pts = box_lines(low, high)
    assert pts.shape == (24, 3)
    for p in pts:
        assert all(p[i] in (low[i], high[i]) for i in range(3))
    corners = {tuple(p) for p in pts}
    assert len(corners) == 8
    for c in corners:
        assert sum(1 for p in pts if tuple(p) == c) == 3
    for a, b in zip(pts[0::2], pts[1::2]):
        assert np.count_nonzero(a != b) == 1


def test_scene_box_lines_concatenates():
    boxes = [BoundingBox((0, 0, 0), (1, 1, 1)), BoundingBox((2, 2, 2), (3, 3, 3))]
    pts = scene_box_lines(boxes)
    assert pts.shape == (48, 3)
    assert np.array_equal(pts[24:], box_lines(boxes[1].low, boxes[1].high))
    assert scene_box_lines([]).shape == (0, 3)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("spine_01", (0.0, 1.0, 0.0)),
        ("left_hand", (0.0, 0.6, 1.0)),
        ("right_foot", (1.0, 0.5, 0.0)),
        ("hair_tip", (1.0, 1.0, 0.0)),
        ("root", (1.0, 0.4, 0.7)),
    ],
)
def test_joint_color(name, expected):
    assert np.allclose(joint_color(name), expected)


def test_joint_marker_is_centred_cross():
    pos = np.array([1.0, 2.0, 3.0])
    verts, cols = joint_marker(pos, 0.5, (1, 0, 0))
    assert len(verts) == 6 and len(cols) == 6
    for a, b in zip(verts[0::2], verts[1::2]):
        assert np.allclose((a + b) / 2, pos)
        assert np.isclose(np.linalg.norm(b - a), 1.0)
    assert all(np.allclose(c, (1, 0, 0)) for c in cols)


def test_skeleton_skips_origin_joint_but_visits_children():
    grandchild = at("hand", (2, 0, 0))
    child = at("arm", (1, 0, 0), [grandchild])
    root = at("root", (0, 0, 0), [child])
    lines = skeleton_lines(root)
    assert len(lines.vertices) == 14
    assert len(lines.colors) == 14
    assert np.allclose(lines.vertices[6], child.position)
    assert np.allclose(lines.vertices[7], grandchild.position)


def test_skeleton_scale_applies_to_positions():
    child = at("leg", (0, 3, 0))
    root = at("spine", (0, 1, 0), [child])
    base = skeleton_lines(root, scale=1.0, joint_radius=0.0)
    doubled = skeleton_lines(root, scale=2.0, joint_radius=0.0)
    for a, b in zip(base.vertices, doubled.vertices):
        assert np.allclose(b, a * 2)


def test_bone_color_is_brightened_joint_color():
    child = at("foot", (0, 3, 0))
    root = at("spine", (0, 1, 0), [child])
    lines = skeleton_lines(root)
    bone = lines.colors[6]
    assert np.allclose(bone, joint_color("spine") * 0.8 + 0.2)


def test_empty_skeleton():
    assert skeleton_lines(None).vertices == []
    assert skeleton_lines(None).interleaved().shape == (0, 3)


def test_interleaved_defaults_to_white():
    lines = SkeletonLines(
        vertices=[np.array([1.0, 2.0, 3.0]), np.array([4.0, 5.0, 6.0])],
        colors=[np.array([0.0, 1.0, 0.0])],
    )
    data = lines.interleaved()
    assert data.shape == (4, 3)
    assert np.allclose(data[0], lines.vertices[0])
    assert np.allclose(data[1], lines.colors[0])
    assert np.allclose(data[2], lines.vertices[1])
    assert np.allclose(data[3], (1, 1, 1))