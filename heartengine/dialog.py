"""NPC conversations: scripted dialogs, quizzes with scoring, and branching endings."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

INTERACTION_RANGE = 2.0
GOOD_ENDING_MAX_SCORE = 25
ROUTE_SELECTION_MARKER = "選擇你的學習路線"


class DialogType(enum.Enum):
    DIALOG = "dialog"
    QUIZ = "quiz"
    GOODEND = "goodend"
    BADEND = "badend"


@dataclass(eq=False)
class Dialog:
    """A sequence of lines; also used for good and bad endings."""

    lines: List[str] = field(default_factory=list)
    type: DialogType = DialogType.DIALOG


@dataclass(eq=False)
class Quiz:
    """A multiple-choice question; each option may carry a score and feedback."""

    question: str = ""
    options: List[str] = field(default_factory=list)
    scores: List[int] = field(default_factory=list)
    feedback: List[str] = field(default_factory=list)
    ans_index: int = -1
    user_index: int = -1

    @property
    def type(self) -> DialogType:
        return DialogType.QUIZ


Entry = Union[Dialog, Quiz]


@dataclass(eq=False)
class Actor:
    """A scene object an NPC is attached to, with its animation clips."""

    name: str
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))
    visible: bool = True
    inv_mass: float = 1.0
    clips: List[Tuple[Optional[str], float]] = field(default_factory=list)
    pose: Optional[Tuple[int, float]] = None

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=float).reshape(3).copy()
        self.scale = np.asarray(self.scale, dtype=float).reshape(3).copy()

    @property
    def clip_names(self) -> List[Optional[str]]:
        return [name for name, _ in self.clips]


@dataclass(eq=False)
class NPC:
    """Conversation state of one character."""

    actor: Optional[Actor]
    dialogs: List[Optional[Entry]] = field(default_factory=list)
    route_enabled: bool = False
    show_icon: bool = False
    in_dialog: bool = False
    script_index: int = 0
    line_index: int = 0
    total_score: int = 0
    playing_idle: bool = False
    idle_time: float = 0.0
    idle_index: int = -1

    @property
    def current(self) -> Optional[Entry]:
        if 0 <= self.script_index < len(self.dialogs):
            return self.dialogs[self.script_index]
        return None


def find_idle_animation_index(clip_names: Sequence[Optional[str]]) -> int:
    """Index of the first clip whose name contains "idle", else 0, or -1 without clips."""
    if not clip_names:
        return -1
    for index, name in enumerate(clip_names):
        if name is None:
            continue
        if "idle" in name.lower():
            return index
    return 0


RouteStarter = Callable[["DialogSystem", Optional[Actor], int], object]


def _reset_if_quiz(entry: Optional[Entry]) -> None:
    if isinstance(entry, Quiz):
        entry.user_index = -1


class DialogSystem:
    """Keeps the NPCs, advances their conversations and idle animations."""

    def __init__(self, route_starter: Optional[RouteStarter] = None) -> None:
        self.npcs: List[NPC] = []
        self.route_starter = route_starter
        self._warned_no_player = False

    def add_npc(self, actor: Optional[Actor], script: Sequence[Optional[Entry]]) -> NPC:
        npc = NPC(actor=actor, dialogs=list(script))
        self.npcs.append(npc)
        if actor is not None:
            npc.idle_index = find_idle_animation_index(actor.clip_names)
            if npc.idle_index != -1:
                self._start_idle(npc)
        return npc

    def active_npc(self) -> Optional[NPC]:
        return next((npc for npc in self.npcs if npc.in_dialog), None)

    # -- idle animation -------------------------------------------------

    def _start_idle(self, npc: NPC) -> None:
        actor = npc.actor
        if npc.idle_index == -1 or actor is None:
            return
        if npc.idle_index >= len(actor.clips) or actor.clips[npc.idle_index][0] is None:
            return
        npc.playing_idle = True
        npc.idle_time = 0.0
        actor.pose = (npc.idle_index, 0.0)

    def _update_idle(self, npc: NPC, dt: float) -> None:
        actor = npc.actor
        if actor is None or npc.idle_index == -1:
            return
        if npc.in_dialog:
            npc.playing_idle = False
            return
        if not npc.playing_idle:
            self._start_idle(npc)
            if not npc.playing_idle:
                return
        if npc.idle_index >= len(actor.clips) or actor.clips[npc.idle_index][0] is None:
            npc.playing_idle = False
            return
        duration = actor.clips[npc.idle_index][1]
        npc.idle_time += dt
        npc.idle_time = math.fmod(npc.idle_time, duration) if duration > 0.0 else 0.0
        actor.pose = (npc.idle_index, npc.idle_time)

    # -- per-frame update ----------------------------------------------

    def update(self, player: Optional[Actor], dt: float) -> None:
        """Advance idle animations and show icons for NPCs the player is near."""
        if player is None:
            if not self._warned_no_player:
                logger.warning("player not found; dialog interactions will not work")
                self._warned_no_player = True
            for npc in self.npcs:
                if npc.actor is not None and npc.actor.visible:
                    self._update_idle(npc, dt)
                npc.show_icon = False
            return

        for npc in self.npcs:
            if npc.actor is None or not npc.actor.visible:
                npc.show_icon = False
                continue
            self._update_idle(npc, dt)
            if npc.in_dialog:
                npc.show_icon = False
                continue
            if npc.route_enabled:
                distance = float(np.linalg.norm(player.position - npc.actor.position))
                npc.show_icon = distance <= INTERACTION_RANGE
            else:
                npc.show_icon = False

    # -- conversation flow ---------------------------------------------

    def _current_of_active(self) -> Tuple[NPC, Entry]:
        npc = self.active_npc()
        if npc is None:
            raise RuntimeError("no conversation in progress")
        entry = npc.current
        if entry is None:
            npc.in_dialog = False
            raise RuntimeError("conversation has no current entry")
        return npc, entry

    def press_interact(self) -> Optional[NPC]:
        """Handle a fresh press of the interact key; returns the NPC affected."""
        npc = self.active_npc()
        if npc is not None:
            entry = npc.current
            if entry is not None and entry.type is not DialogType.QUIZ:
                self._advance_dialog(npc)
            return npc
        for candidate in self.npcs:
            if candidate.show_icon and candidate.route_enabled:
                candidate.in_dialog = True
                candidate.script_index = 0
                candidate.line_index = 0
                candidate.total_score = 0
                if candidate.dialogs:
                    _reset_if_quiz(candidate.dialogs[0])
                return candidate
        return None

    def _advance_dialog(self, npc: NPC) -> None:
        entry = npc.current
        if entry is None:
            npc.in_dialog = False
            return
        if entry.type is not DialogType.DIALOG:
            return
        npc.line_index += 1
        if npc.line_index >= len(entry.lines):
            npc.script_index += 1
            npc.line_index = 0
            if npc.script_index < len(npc.dialogs):
                _reset_if_quiz(npc.dialogs[npc.script_index])
            else:
                npc.in_dialog = False

    def choose_option(self, index: int) -> None:
        """Answer the active quiz with the option at ``index``."""
        npc, entry = self._current_of_active()
        if not isinstance(entry, Quiz):
            raise RuntimeError("current entry is not a quiz")
        if entry.user_index != -1:
            raise RuntimeError("quiz already answered")
        if not 0 <= index < len(entry.options):
            raise IndexError(f"option {index} out of range")
        entry.user_index = index
        if index < len(entry.scores):
            npc.total_score += entry.scores[index]

    def continue_quiz(self) -> None:
        """Move past an answered quiz, branching to an ending after the last one."""
        npc, entry = self._current_of_active()
        if not isinstance(entry, Quiz):
            raise RuntimeError("current entry is not a quiz")
        if entry.user_index == -1:
            raise RuntimeError("quiz not answered yet")

        if ROUTE_SELECTION_MARKER in entry.question:
            npc.in_dialog = False
            npc.route_enabled = False
            if self.route_starter is not None:
                self.route_starter(self, npc.actor, entry.user_index)
            return

        following = list(enumerate(npc.dialogs))[npc.script_index + 1:]
        is_last_quiz = True
        for _, item in following:
            if item is None:
                continue
            if item.type is DialogType.QUIZ:
                is_last_quiz = False
                break
            if item.type in (DialogType.GOODEND, DialogType.BADEND):
                break

        if not is_last_quiz:
            npc.script_index += 1
            npc.line_index = 0
            if npc.script_index < len(npc.dialogs):
                _reset_if_quiz(npc.dialogs[npc.script_index])
            return

        good_index: Optional[int] = None
        bad_index: Optional[int] = None
        for i, item in following:
            if item is None:
                continue
            if item.type is DialogType.GOODEND:
                good_index = i
            if item.type is DialogType.BADEND:
                bad_index = i
            if good_index is not None and bad_index is not None:
                break

        wants_good = npc.total_score <= GOOD_ENDING_MAX_SCORE
        if wants_good and good_index is not None:
            npc.script_index = good_index
        elif not wants_good and bad_index is not None:
            npc.script_index = bad_index
        elif good_index is not None:
            npc.script_index = good_index
        elif bad_index is not None:
            npc.script_index = bad_index
        else:
            npc.script_index += 1
        npc.line_index = 0

        if npc.script_index < len(npc.dialogs):
            _reset_if_quiz(npc.dialogs[npc.script_index])
        else:
            npc.in_dialog = False

    def finish_ending(self) -> None:
        """Close an ending screen; the NPC's route is then over."""
        npc, entry = self._current_of_active()
        if entry.type not in (DialogType.GOODEND, DialogType.BADEND):
            raise RuntimeError("current entry is not an ending")
        npc.in_dialog = False
        npc.route_enabled = False