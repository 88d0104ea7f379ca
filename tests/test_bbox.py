import numpy as np
import pytest

from heartengine.bbox import (
    BoundingBox,
    SkinnedVertex,
    mesh_bbox,
    model_local_bbox,
    skinned_mesh_bbox,
    static_mesh_bbox,
)


def translation(t):
    m = np.identity(4)
    m[:3, 3] = t
    return m


def test_mesh_bbox_empty_is_zero_box():
    box = mesh_bbox([])
    assert np.array_equal(box.low, np.zeros(3))
    assert np.array_equal(box.high, np.zeros(3))


def test_mesh_bbox_takes_componentwise_extremes():
    box = mesh_bbox([(1, 5, -2), (3, -1, 4)])
    assert np.array_equal(box.low, [1, -1, -2])
    assert np.array_equal(box.high, [3, 5, 4])


def test_center_of_symmetric_box_is_origin():
    box = BoundingBox((-1, -2, -3), (1, 2, 3))
    assert np.allclose(box.center(), [0, 0, 0])


def test_intersects_is_inclusive_and_symmetric():
    a = BoundingBox((0, 0, 0), (1, 1, 1))
    b = BoundingBox((1, 0, 0), (2, 1, 1))
    c = BoundingBox((1.5, 0, 0), (2, 1, 1))
    assert a.intersects(b) and b.intersects(a)
    assert not a.intersects(c) and not c.intersects(a)


def test_merge_encloses_both():
    a = BoundingBox((0, 0, 0), (1, 1, 1))
    b = BoundingBox((-2, 3, 0.5), (0.5, 4, 5))
    m = a.merge(b)
    assert np.all(m.low <= a.low) and np.all(m.low <= b.low)
    assert np.all(m.high >= a.high) and np.all(m.high >= b.high)
    assert np.array_equal(m.low, np.minimum(a.low, b.low))


def test_transformed_identity_and_translation():
    box = BoundingBox((-1, 0, 2), (1, 3, 4))
    same = box.transformed(np.identity(4))
    assert np.allclose(same.low, box.low) and np.allclose(same.high, box.high)
    t = np.array([5.0, -2.0, 1.0])
    moved = box.transformed(translation(t))
    assert np.allclose(moved.low, box.low + t)
    assert np.allclose(moved.high, box.high + t)


def test_transformed_scaling():
    box = BoundingBox((-1, 0, 2), (1, 3, 4))
    s = np.diag([2.0, 2.0, 2.0, 1.0])
    scaled = box.transformed(s)
    assert np.allclose(scaled.low, box.low * 2)
    assert np.allclose(scaled.high, box.high * 2)


def test_skinned_without_weights_uses_bind_positions():
    verts = [SkinnedVertex((1, 2, 3)), SkinnedVertex((-1, 0, 5))]
    box = skinned_mesh_bbox(verts, [translation((10, 10, 10))])
    expected = mesh_bbox([(1, 2, 3), (-1, 0, 5)])
    assert np.allclose(box.low, expected.low) and np.allclose(box.high, expected.high)


def test_skinned_single_joint_moves_vertices():
    t = np.array([2.0, 0.0, -1.0])
    verts = [SkinnedVertex((1, 1, 1), (0, -1, -1, -1), (1.0, 0, 0, 0))]
    box = skinned_mesh_bbox(verts, [translation(t)])
    assert np.allclose(box.low, np.array([1, 1, 1]) + t)


def test_skinned_blend_is_weight_normalised():
    t = np.array([4.0, 0.0, 0.0])
    verts = [SkinnedVertex((0, 0, 0), (0, 1, -1, -1), (0.25, 0.25, 0, 0))]
    box = skinned_mesh_bbox(verts, [np.identity(4), translation(t)])
    assert np.allclose(box.low, t / 2)


def test_skinned_ignores_out_of_range_joint():
    verts = [SkinnedVertex((1, 2, 3), (7, -1, -1, -1), (1.0, 0, 0, 0))]
    box = skinned_mesh_bbox(verts, [translation((9, 9, 9))])
    assert np.allclose(box.low, [1, 2, 3])


def test_static_mesh_bbox_without_node_keeps_box():
    box = BoundingBox((0, 1, 2), (3, 4, 5))
    out = static_mesh_bbox(box)
    assert np.allclose(out.low, box.low) and np.allclose(out.high, box.high)


def test_model_local_bbox_merges_and_empty_is_inverted():
    a = BoundingBox((0, 0, 0), (1, 1, 1))
    b = BoundingBox((2, -1, 0), (3, 0, 4))
    merged = model_local_bbox([a, b])
    assert np.array_equal(merged.low, a.merge(b).low)
    assert np.array_equal(merged.high, a.merge(b).high)
    empty = model_local_bbox([])
    assert np.all(empty.low > empty.high)


@pytest.mark.parametrize("t", [(1, 2, 3), (-4, 0, 0.5)])
def test_center_follows_translation(t):
    box = BoundingBox((0, 0, 0), (2, 2, 2))
    assert np.allclose(box.transformed(translation(t)).center(), box.center() + np.array(t))