"""Axis-aligned bounding boxes and helpers to compute them for meshes and models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

import numpy as np

_FLOAT_MAX = float(np.finfo(np.float32).max)
_FLOAT_LOWEST = -_FLOAT_MAX


def _vec3(value) -> np.ndarray:
    arr = np.asarray(value, dtype=float).reshape(3)
    return arr.copy()


@dataclass(eq=False)
class BoundingBox:
    """An axis-aligned box given by its lower and upper corners."""

    low: np.ndarray
    high: np.ndarray

    def __post_init__(self) -> None:
        self.low = _vec3(self.low)
        self.high = _vec3(self.high)

    @classmethod
    def empty(cls) -> "BoundingBox":
        """An inverted box that any merge will replace."""
        return cls((_FLOAT_MAX,) * 3, (_FLOAT_LOWEST,) * 3)

    def center(self) -> np.ndarray:
        return (self.low + self.high) * 0.5

    def intersects(self, other: "BoundingBox") -> bool:
        """Inclusive overlap test: touching boxes intersect."""
        return bool(np.all(self.low <= other.high) and np.all(self.high >= other.low))

    def merge(self, other: "BoundingBox") -> "BoundingBox":
        return BoundingBox(np.minimum(self.low, other.low), np.maximum(self.high, other.high))

    def transformed(self, matrix) -> "BoundingBox":
        """Box enclosing the eight corners after applying a 4x4 matrix."""
        m = np.asarray(matrix, dtype=float).reshape(4, 4)
        result = BoundingBox.empty()
        for corner in range(8):
            point = np.array(
                [
                    self.high[0] if corner & 1 else self.low[0],
                    self.high[1] if corner & 2 else self.low[1],
                    self.high[2] if corner & 4 else self.low[2],
                    1.0,
                ]
            )
            p = (m @ point)[:3]
            result.low = np.minimum(result.low, p)
            result.high = np.maximum(result.high, p)
        return result


@dataclass
class SkinnedVertex:
    """A vertex position with up to four joint influences."""

    position: Sequence[float]
    bone_ids: Sequence[int] = field(default_factory=lambda: (-1, -1, -1, -1))
    bone_weights: Sequence[float] = field(default_factory=lambda: (0.0, 0.0, 0.0, 0.0))


def mesh_bbox(positions: Iterable[Sequence[float]]) -> BoundingBox:
    """Box around vertex positions; a zero box when there are none."""
    points = [_vec3(p) for p in positions]
    if not points:
        return BoundingBox((0.0, 0.0, 0.0), (0.0, 0.0, 0.0))
    stacked = np.stack(points)
    return BoundingBox(stacked.min(axis=0), stacked.max(axis=0))


def skinned_mesh_bbox(vertices: Iterable[SkinnedVertex], joint_matrices: Sequence) -> BoundingBox:
    """Box around vertices after linear blend skinning with the given joint matrices."""
    joints = [np.asarray(m, dtype=float).reshape(4, 4) for m in joint_matrices]
    box = BoundingBox.empty()
    for vertex in vertices:
        pos = np.append(_vec3(vertex.position), 1.0)
        skinned = np.zeros(4)
        total = 0.0
        for joint_id, weight in zip(vertex.bone_ids, vertex.bone_weights):
            if weight > 0.0 and 0 <= joint_id < len(joints):
                skinned += weight * (joints[joint_id] @ pos)
                total += weight
        if total > 0.0:
            pos = skinned / total
        p = pos[:3]
        box.low = np.minimum(box.low, p)
        box.high = np.maximum(box.high, p)
    return box


def static_mesh_bbox(local_box: BoundingBox, node_matrix=None) -> BoundingBox:
    """Mesh box moved by its node matrix, or unchanged in extent without a node."""
    matrix = np.identity(4) if node_matrix is None else node_matrix
    return local_box.transformed(matrix)


def model_local_bbox(mesh_boxes: Iterable[BoundingBox]) -> BoundingBox:
    """Merge of all mesh boxes of a model; inverted when there are no meshes."""
    result = BoundingBox.empty()
    for box in mesh_boxes:
        result = result.merge(box)
    return result