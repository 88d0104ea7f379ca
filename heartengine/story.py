"""Wiring of the whole story: the teacher's opening and the three character routes."""

from __future__ import annotations

from typing import Optional

from heartengine.dialog import NPC, Actor, DialogSystem
from heartengine.scripts_intro import init_begin
from heartengine.scripts_route_a import init_a
from heartengine.scripts_route_b import init_b
from heartengine.scripts_route_c import init_c

_ROUTES = {0: init_a, 1: init_b, 2: init_c}


def start_route(system: DialogSystem, actor: Optional[Actor], choice: int) -> NPC:
    """Begin the route picked at the selection quiz; unknown choices fall back to route A."""
    return _ROUTES.get(choice, init_a)(system, actor)


def new_game(system: DialogSystem, teacher: Optional[Actor]) -> NPC:
    """Put the opening script on the teacher and let the route choice start a route."""
    system.route_starter = start_route
    return init_begin(system, teacher)