import pytest

from heartengine.dialog import Actor, DialogSystem, DialogType, Quiz
from heartengine.scripts_route_b import init_b, route_b_script


def _play(system, npc, pick):
    npc.show_icon = True
    assert system.press_interact() is npc
    ending = None
    chosen = []
    while npc.in_dialog:
        entry = npc.current
        if isinstance(entry, Quiz):
            index = pick(entry)
            chosen.append(entry.scores[index])
            system.choose_option(index)
            system.continue_quiz()
        elif entry.type is DialogType.DIALOG:
            system.press_interact()
        else:
            ending = entry.type
            system.finish_ending()
    return ending, chosen


def test_script_layout():
    script = route_b_script()
    D, Q = DialogType.DIALOG, DialogType.QUIZ
    assert [e.type for e in script] == [
        D, D, Q, Q, D, Q, Q, D, Q, Q, D, Q, Q, D, Q, Q,
        DialogType.GOODEND, DialogType.BADEND,
    ]


def test_quizzes_are_consistent():
    quizzes = [e for e in route_b_script() if isinstance(e, Quiz)]
    for quiz in quizzes:
        assert len(quiz.options) == len(quiz.scores) == len(quiz.feedback)
        assert 0 <= quiz.ans_index < len(quiz.options)
        assert quiz.scores[quiz.ans_index] == max(quiz.scores)
        assert quiz.user_index == -1


def test_pinned_text_from_script():
    script = route_b_script()
    assert script[0].lines[0] == "（你剛剛坐下，就被一疊粉紅色的劇本砸到。）"
    q21 = script[5]
    assert q21.options[q21.ans_index] == "A. 女主是溫柔體貼型，但其實擅長格鬥"
    assert script[-1].lines[-1] == "「你未能通關《遊戲程式與戀愛學特訓班》：林夢瑤路線｜未攻略成功，但故事仍在繼續中……」"


def test_each_call_builds_fresh_entries():
    first, second = route_b_script(), route_b_script()
    assert all(a is not b for a, b in zip(first, second))
    first[0].lines.append("extra")
    assert "extra" not in second[0].lines


def test_init_b_configures_npc():
    system = DialogSystem()
    actor = Actor(name="kiara")
    npc = init_b(system, actor)
    assert system.npcs == [npc]
    assert npc.actor is actor
    assert npc.route_enabled is True
    assert npc.in_dialog is False
    assert actor.inv_mass == 0


def test_lowest_scores_reach_good_ending():
    system = DialogSystem()
    npc = init_b(system, Actor(name="kiara"))
    ending, chosen = _play(system, npc, lambda q: q.scores.index(min(q.scores)))
    assert ending is DialogType.GOODEND
    assert npc.total_score == sum(chosen)
    assert npc.route_enabled is False


def test_correct_answers_reach_bad_ending():
    system = DialogSystem()
    npc = init_b(system, Actor(name="kiara"))
    ending, chosen = _play(system, npc, lambda q: q.ans_index)
    assert ending is DialogType.BADEND
    assert npc.total_score == sum(chosen)


def test_quiz_cannot_be_answered_twice():
    system = DialogSystem()
    npc = init_b(system, Actor(name="kiara"))
    npc.show_icon = True
    system.press_interact()
    while not isinstance(npc.current, Quiz):
        system.press_interact()
    system.choose_option(0)
    with pytest.raises(RuntimeError):
        system.choose_option(1)