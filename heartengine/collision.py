"""Axis-aligned collision detection and response between bodies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from heartengine.bbox import BoundingBox

_SLOP = 0.01
_CORRECTION_PERCENT = 0.4


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3).copy()


@dataclass(eq=False)
class Body:
    """A movable object with a world-space box that follows its position."""

    position: np.ndarray
    box: BoundingBox
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    inv_mass: float = 1.0
    restitution: float = 0.0
    name: str = ""
    on_collision: Optional[Callable[["Body"], None]] = None

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.velocity = _vec3(self.velocity)

    def center(self) -> np.ndarray:
        return self.box.center()

    def translate(self, offset) -> None:
        """Move the body and its world box by an offset."""
        delta = _vec3(offset)
        self.position = self.position + delta
        self.box = BoundingBox(self.box.low + delta, self.box.high + delta)


@dataclass(eq=False)
class AABBCollider:
    """Collider that uses its owner's world box."""

    owner: Body

    def bounds(self) -> BoundingBox:
        return self.owner.box


def resolve_collision(a: Body, b: Body) -> bool:
    """Separate two overlapping bodies along the axis of least penetration.

    Returns False when both bodies are static and nothing was done.
    """
    overlap = np.minimum(a.box.high - b.box.low, b.box.high - a.box.low)
    penetration = float(overlap.min())
    if penetration == overlap[0]:
        axis = 0
    elif penetration == overlap[1]:
        axis = 1
    else:
        axis = 2
    normal = np.zeros(3)
    normal[axis] = 1.0

    side = 1.0 if float(np.dot(b.center() - a.center(), normal)) >= 0.0 else -1.0
    push = normal * side

    inv_sum = a.inv_mass + b.inv_mass
    if inv_sum <= 0.0:
        return False

    if axis == 1:
        a.translate(-push * (penetration * (a.inv_mass / inv_sum)))
        b.translate(push * (penetration * (b.inv_mass / inv_sum)))
        if a.inv_mass > 0:
            a.velocity[1] = 0.0
        if b.inv_mass > 0:
            b.velocity[1] = 0.0
    else:
        magnitude = max(penetration - _SLOP, 0.0) / inv_sum * _CORRECTION_PERCENT
        correction = push * magnitude
        a.translate(-correction * a.inv_mass)
        b.translate(correction * b.inv_mass)

        vn = float(np.dot(a.velocity - b.velocity, push))
        if vn < 0.0:
            e = min(a.restitution, b.restitution)
            j = -(1.0 + e) * vn / inv_sum
            impulse = push * j
            a.velocity = a.velocity + impulse * a.inv_mass
            b.velocity = b.velocity - impulse * b.inv_mass

    if a.on_collision is not None:
        a.on_collision(b)
    if b.on_collision is not None:
        b.on_collision(a)
    return True


class CollisionSystem:
    """Brute-force pairwise collision checking over registered colliders."""

    def __init__(self) -> None:
        self.colliders: List[AABBCollider] = []

    def add(self, collider: AABBCollider) -> None:
        self.colliders.append(collider)

    def remove(self, collider: AABBCollider) -> None:
        self.colliders = [c for c in self.colliders if c is not collider]

    def update(self) -> None:
        """Resolve every intersecting pair; call after transforms are updated."""
        colliders = list(self.colliders)
        for i, first in enumerate(colliders):
            for second in colliders[i + 1:]:
                if first.bounds().intersects(second.bounds()):
                    resolve_collision(first.owner, second.owner)