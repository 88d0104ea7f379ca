import pytest

from heartengine.dialog import Actor, DialogSystem, DialogType, Quiz
from heartengine.scripts_intro import intro_script
from heartengine.scripts_route_a import route_a_script
from heartengine.scripts_route_b import route_b_script
from heartengine.scripts_route_c import route_c_script
from heartengine.story import new_game, start_route


def _first_line(script):
    return script[0].lines[0]


@pytest.mark.parametrize(
    "choice, script",
    [(0, route_a_script), (1, route_b_script), (2, route_c_script), (7, route_a_script), (-1, route_a_script)],
)
def test_start_route_picks_script(choice, script):
    system = DialogSystem()
    actor = Actor("teacher")
    npc = start_route(system, actor, choice)
    assert npc.dialogs[0].lines[0] == _first_line(script())
    assert npc.route_enabled is True
    assert npc.actor is actor


def test_new_game_sets_up_teacher():
    system = DialogSystem()
    teacher = Actor("teacher")
    npc = new_game(system, teacher)
    assert system.route_starter is start_route
    assert system.npcs == [npc]
    assert npc.dialogs[0].lines[0] == _first_line(intro_script())
    assert teacher.inv_mass == 0
    assert npc.route_enabled is True


def _play_intro(system, teacher_npc, route_choice):
    player = Actor("Player")
    system.update(player, 0.0)
    assert system.press_interact() is teacher_npc
    while teacher_npc.in_dialog:
        entry = teacher_npc.current
        if isinstance(entry, Quiz):
            if entry is teacher_npc.dialogs[-1]:
                system.choose_option(route_choice)
            else:
                system.choose_option(0)
            system.continue_quiz()
        else:
            system.press_interact()


@pytest.mark.parametrize("choice, script", [(0, route_a_script), (1, route_b_script), (2, route_c_script)])
def test_route_selection_starts_route_on_teacher(choice, script):
    system = DialogSystem()
    teacher = Actor("teacher")
    teacher_npc = new_game(system, teacher)
    _play_intro(system, teacher_npc, choice)
    assert teacher_npc.route_enabled is False
    assert len(system.npcs) == 2
    route_npc = system.npcs[1]
    assert route_npc.actor is teacher
    assert route_npc.route_enabled is True
    assert route_npc.dialogs[0].lines[0] == _first_line(script())
    assert route_npc.dialogs[-1].type is DialogType.BADEND


def test_route_npc_can_be_started_after_selection():
    system = DialogSystem()
    teacher = Actor("teacher")
    teacher_npc = new_game(system, teacher)
    _play_intro(system, teacher_npc, 1)
    system.update(Actor("Player"), 0.0)
    assert teacher_npc.show_icon is False
    started = system.press_interact()
    assert started is system.npcs[1]
    assert started.in_dialog is True
    assert started.script_index == 0
    assert started.total_score == 0