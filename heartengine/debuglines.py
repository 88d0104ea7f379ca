"""Line geometry for debug drawing of bounding boxes and skeletons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

_MIN_JOINT_DISTANCE = 0.001
_WHITE = np.array([1.0, 1.0, 1.0])


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3).copy()


def box_lines(low, high) -> np.ndarray:
    """The 12 edges of a box as 24 line-list points."""
    lo, hi = _vec3(low), _vec3(high)

    def corner(x: bool, y: bool, z: bool) -> np.ndarray:
        return np.array([hi[0] if x else lo[0], hi[1] if y else lo[1], hi[2] if z else lo[2]])

    v000, v001 = corner(0, 0, 0), corner(0, 0, 1)
    v010, v011 = corner(0, 1, 0), corner(0, 1, 1)
    v100, v101 = corner(1, 0, 0), corner(1, 0, 1)
    v110, v111 = corner(1, 1, 0), corner(1, 1, 1)
    edges = [
        (v000, v001), (v001, v011), (v011, v010), (v010, v000),
        (v100, v101), (v101, v111), (v111, v110), (v110, v100),
        (v000, v100), (v001, v101), (v011, v111), (v010, v110),
    ]
    return np.array([p for edge in edges for p in edge])


def scene_box_lines(boxes: Iterable) -> np.ndarray:
    """Edge points for every box (objects with ``low`` and ``high``)."""
    parts = [box_lines(box.low, box.high) for box in boxes]
    if not parts:
        return np.zeros((0, 3))
    return np.concatenate(parts)


def joint_color(name: str) -> np.ndarray:
    """Colour a joint by the body part its name mentions."""
    if "spine" in name:
        return np.array([0.0, 1.0, 0.0])
    if "arm" in name or "hand" in name:
        return np.array([0.0, 0.6, 1.0])
    if "leg" in name or "foot" in name:
        return np.array([1.0, 0.5, 0.0])
    if "head" in name or "hair" in name:
        return np.array([1.0, 1.0, 0.0])
    return np.array([1.0, 0.4, 0.7])


def joint_marker(position, radius: float, color) -> Tuple[List[np.ndarray], List[np.ndarray]]:
    """A three-axis cross at a joint: six points and their colours."""
    p = _vec3(position)
    c = _vec3(color)
    vertices = []
    for axis in range(3):
        offset = np.zeros(3)
        offset[axis] = radius
        vertices.extend([p - offset, p + offset])
    return vertices, [c.copy() for _ in vertices]


@dataclass(eq=False)
class SkeletonNode:
    """A node of a skeleton hierarchy with its 4x4 node matrix."""

    name: str
    matrix: np.ndarray = field(default_factory=lambda: np.identity(4))
    children: List[Optional["SkeletonNode"]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.matrix = np.asarray(self.matrix, dtype=float).reshape(4, 4)

    @property
    def position(self) -> np.ndarray:
        return self.matrix[:3, 3].copy()


@dataclass
class SkeletonLines:
    """Line-list vertices with a colour per vertex."""

    vertices: List[np.ndarray] = field(default_factory=list)
    colors: List[np.ndarray] = field(default_factory=list)

    def interleaved(self) -> np.ndarray:
        """Position, colour, position, colour... with white for missing colours."""
        rows = []
        for i, vertex in enumerate(self.vertices):
            rows.append(vertex)
            rows.append(self.colors[i] if i < len(self.colors) else _WHITE)
        if not rows:
            return np.zeros((0, 3))
        return np.array(rows)


def _has_position(node: SkeletonNode) -> bool:
    return float(np.linalg.norm(node.position)) >= _MIN_JOINT_DISTANCE


def _collect(node: Optional[SkeletonNode], scale: float, radius: float, out: SkeletonLines) -> None:
    if node is None:
        return
    if _has_position(node):
        pos = node.position * scale
        color = joint_color(node.name)
        verts, cols = joint_marker(pos, radius, color)
        out.vertices.extend(verts)
        out.colors.extend(cols)
        bone_color = color * 0.8 + 0.2
        for child in node.children:
            if child is None or not _has_position(child):
                continue
            out.vertices.extend([pos.copy(), child.position * scale])
            out.colors.extend([bone_color.copy(), bone_color.copy()])
    for child in node.children:
        _collect(child, scale, radius, out)


def skeleton_lines(root: Optional[SkeletonNode], scale: float = 1.0, joint_radius: float = 0.01) -> SkeletonLines:
    """Joint markers and bones for a hierarchy; joints at the origin are skipped."""
    lines = SkeletonLines()
    _collect(root, scale, joint_radius, lines)
    return lines