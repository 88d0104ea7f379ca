import numpy as np
import pytest

from heartengine.dialog import Actor, Dialog, DialogSystem, DialogType, Quiz
from heartengine.presentation import (
    BAD_ENDING_TITLE,
    CONTINUE_HINT,
    FINISH_HINT,
    GOOD_ENDING_TITLE,
    INTERACT_PROMPT,
    IconLayout,
    ending_title,
    footer_hint,
    icon_layout,
    interaction_icons,
    is_narrative_line,
    page_label,
    split_speaker,
    visible_lines,
    world_to_screen,
)


@pytest.mark.parametrize(
    "line,expected",
    [
        ("（旁白）", True),
        ("(aside)", True),
        ("【系統】", True),
        ("老師：「你好」", False),
        ("", False),
    ],
)
def test_is_narrative_line(line, expected):
    assert is_narrative_line(line) is expected


def test_split_speaker_fullwidth():
    assert split_speaker("老師：「你好」") == ("老師", "「你好」")


def test_split_speaker_ascii_strips_leading_space():
    assert split_speaker("Bob:   hi there") == ("Bob", "hi there")


def test_split_speaker_without_colon():
    assert split_speaker("no speaker here") is None


def test_world_to_screen_identity_maps_origin_to_center():
    assert world_to_screen((0, 0, 0), np.identity(4), 800, 600) == (400.0, 300.0)


def test_world_to_screen_top_right_corner():
    x, y = world_to_screen((1, 1, 0), np.identity(4), 800, 600)
    assert x == pytest.approx(800.0)
    assert y == pytest.approx(0.0)


def test_world_to_screen_behind_camera():
    m = np.identity(4)
    m[3, 3] = -1.0
    assert world_to_screen((0, 0, 0), m, 800, 600) is None


def test_icon_layout_geometry_is_centered():
    layout = icon_layout((100.0, 50.0))
    assert isinstance(layout, IconLayout)
    assert layout.center == (100.0, 50.0)
    assert layout.rect_min[0] + layout.rect_max[0] == pytest.approx(200.0)
    assert layout.rect_min[1] < 50.0 < layout.rect_max[1]
    assert layout.dot_center[0] == 100.0
    assert layout.dot_center[1] > layout.rect_max[1]
    assert layout.text_anchor[1] > layout.dot_center[1]
    assert layout.text == INTERACT_PROMPT


def _system_with_npc(npc_pos=(0, 0, 0)):
    system = DialogSystem()
    actor = Actor("npc", position=npc_pos)
    npc = system.add_npc(actor, [Dialog(lines=["a：one", "b：two", "（three）"])])
    npc.route_enabled = True
    return system, npc


def test_interaction_icons_only_for_nearby_npcs():
    system, npc = _system_with_npc()
    far = system.add_npc(Actor("far", position=(0, 0, 0.5)), [Dialog(lines=["x"])])
    far.route_enabled = False
    system.update(Actor("Player", position=(0.5, 0, 0)), 0.1)
    icons = interaction_icons(system, np.identity(4) * 0.25 + np.diag([0, 0, 0, 0.75]), 800, 600)
    assert [n for n, _ in icons] == [npc]


def test_interaction_icons_skip_offscreen():
    system, npc = _system_with_npc()
    system.update(Actor("Player"), 0.1)
    assert npc.show_icon is True
    # marker sits at y = 1.5 which lies above the identity frustum
    assert interaction_icons(system, np.identity(4), 800, 600) == []


def test_dialog_progress_labels():
    system, npc = _system_with_npc()
    system.update(Actor("Player"), 0.1)
    system.press_interact()
    assert visible_lines(npc) == ["a：one"]
    assert page_label(npc) == "(1/3)"
    assert footer_hint(npc) == CONTINUE_HINT
    system.press_interact()
    system.press_interact()
    assert visible_lines(npc) == ["a：one", "b：two", "（three）"]
    assert page_label(npc) == "(3/3)"
    assert footer_hint(npc) == FINISH_HINT


def test_labels_reject_non_dialog():
    system = DialogSystem()
    npc = system.add_npc(None, [Quiz(question="q", options=["a"])])
    assert visible_lines(npc) == []
    with pytest.raises(ValueError):
        page_label(npc)
    with pytest.raises(ValueError):
        footer_hint(npc)


def test_visible_lines_for_ending_show_everything():
    system = DialogSystem()
    npc = system.add_npc(None, [Dialog(lines=["x", "y"], type=DialogType.GOODEND)])
    assert visible_lines(npc) == ["x", "y"]


def test_ending_titles():
    assert ending_title(True) == GOOD_ENDING_TITLE
    assert ending_title(False) == BAD_ENDING_TITLE
    assert ending_title(True) != ending_title(False)