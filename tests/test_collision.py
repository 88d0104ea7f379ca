import numpy as np

from heartengine.bbox import BoundingBox
from heartengine.collision import AABBCollider, Body, CollisionSystem, resolve_collision


def make_body(low, high, **kwargs):
    low = np.asarray(low, dtype=float)
    high = np.asarray(high, dtype=float)
    return Body(position=(low + high) / 2, box=BoundingBox(low, high), **kwargs)


def test_translate_moves_position_and_box():
    body = make_body((0, 0, 0), (2, 2, 2))
    start = body.position.copy()
    body.translate((1, -1, 3))
    assert np.allclose(body.position, start + np.array([1, -1, 3]))
    assert np.allclose(body.center(), body.position)


def test_static_bodies_are_left_alone():
    a = make_body((0, 0, 0), (2, 2, 2), inv_mass=0.0)
    b = make_body((1, 1, 1), (3, 3, 3), inv_mass=0.0)
    assert resolve_collision(a, b) is False
    assert np.allclose(a.box.high, (2, 2, 2))
    assert np.allclose(b.box.low, (1, 1, 1))


def test_vertical_contact_fully_separates_and_stops():
    a = make_body((0, 0, 0), (4, 1, 4), velocity=(1, -3, 0))
    b = make_body((0, 0.9, 0), (4, 2, 4), velocity=(0, 2, 0))
    assert resolve_collision(a, b) is True
    assert np.isclose(a.box.high[1], b.box.low[1])
    assert a.velocity[1] == 0.0 and b.velocity[1] == 0.0
    assert a.velocity[0] == 1.0


def test_vertical_contact_with_static_floor_moves_only_dynamic():
    floor = make_body((-5, -1, -5), (5, 0, 5), inv_mass=0.0, velocity=(0, 7, 0))
    box = make_body((0, -0.2, 0), (1, 0.8, 1), velocity=(0, -4, 0))
    resolve_collision(box, floor)
    assert np.allclose(floor.box.high, (5, 0, 5))
    assert np.isclose(box.box.low[1], floor.box.high[1])
    assert box.velocity[1] == 0.0
    assert floor.velocity[1] == 7.0


def test_horizontal_correction_reduces_overlap():
    a = make_body((0, 0, 0), (1, 5, 5))
    b = make_body((0.8, 0, 0), (2, 5, 5))
    before = a.box.high[0] - b.box.low[0]
    resolve_collision(a, b)
    after = a.box.high[0] - b.box.low[0]
    assert 0 < after < before
    assert a.position[0] < 0.5 and b.position[0] > 1.4


def test_horizontal_impulse_conserves_momentum():
    a = make_body((0, 0, 0), (1, 5, 5), velocity=(-1, 0, 0), restitution=0.5)
    b = make_body((0.8, 0, 0), (2, 5, 5), velocity=(0, 0, 0), restitution=0.5)
    total = a.velocity + b.velocity
    resolve_collision(a, b)
    assert np.allclose(a.velocity + b.velocity, total)
    assert a.velocity[0] > -1


def test_callbacks_receive_partner():
    seen = []
    a = make_body((0, 0, 0), (1, 1, 1), name="a", on_collision=lambda o: seen.append(("a", o.name)))
    b = make_body((0.5, 0.5, 0.5), (2, 2, 2), name="b", on_collision=lambda o: seen.append(("b", o.name)))
    resolve_collision(a, b)
    assert seen == [("a", "b"), ("b", "a")]


def test_system_only_resolves_intersecting_pairs():
    hits = []
    a = make_body((0, 0, 0), (1, 1, 1), on_collision=lambda o: hits.append(o))
    b = make_body((0.5, 0, 0), (1.5, 1, 1))
    c = make_body((10, 10, 10), (11, 11, 11), on_collision=lambda o: hits.append(o))
    system = CollisionSystem()
    for body in (a, b, c):
        system.add(AABBCollider(body))
    system.update()
    assert hits == [b]


def test_remove_collider_stops_checks():
    hits = []
    a = make_body((0, 0, 0), (1, 1, 1), on_collision=lambda o: hits.append(o))
    b = make_body((0.5, 0, 0), (1.5, 1, 1))
    system = CollisionSystem()
    ca, cb = AABBCollider(a), AABBCollider(b)
    system.add(ca)
    system.add(cb)
    system.remove(cb)
    system.update()
    assert hits == []
    assert system.colliders == [ca]


def test_collider_bounds_follow_owner():
    a = make_body((0, 0, 0), (1, 1, 1))
    collider = AABBCollider(a)
    a.translate((2, 0, 0))
    assert collider.bounds() is a.box