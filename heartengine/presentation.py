"""Screen-side helpers for the dialog UI: icon placement, line styling and labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from heartengine.dialog import NPC, Dialog, DialogSystem, DialogType

INTERACT_PROMPT = "Press E to interact"
CONTINUE_HINT = "Press E to continue..."
FINISH_HINT = "Press E to finish..."
GOOD_ENDING_TITLE = "✅ 攻略成功!"
BAD_ENDING_TITLE = "❌ 攻略失敗"

_ICON_BASE_SIZE = 12.0
_ICON_HEIGHT_OFFSET = 0.5
_NARRATIVE_PREFIXES = ("（", "(", "【")
_ENDING_TYPES = (DialogType.GOODEND, DialogType.BADEND)


def is_narrative_line(line: str) -> bool:
    """True for stage directions: lines opening with a bracket."""
    return bool(line) and line.startswith(_NARRATIVE_PREFIXES)


def split_speaker(line: str) -> Optional[Tuple[str, str]]:
    """Split "speaker：content" (full-width or ASCII colon) or return None."""
    pos = line.find("：")
    if pos == -1:
        pos = line.find(":")
    if pos == -1:
        return None
    return line[:pos], line[pos + 1:].lstrip(" \t\n\r\f\v")


def world_to_screen(position, view_projection, width: int, height: int) -> Optional[Tuple[float, float]]:
    """Project a world point to pixel coordinates; None when behind the camera."""
    matrix = np.asarray(view_projection, dtype=float).reshape(4, 4)
    point = np.append(np.asarray(position, dtype=float).reshape(3), 1.0)
    clip = matrix @ point
    if clip[3] <= 0.0:
        return None
    ndc = clip[:3] / clip[3]
    x = (ndc[0] + 1.0) * 0.5 * float(width)
    y = (1.0 - ndc[1]) * 0.5 * float(height)
    return float(x), float(y)


@dataclass(frozen=True)
class IconLayout:
    """Geometry of the "!" interaction marker drawn above an NPC."""

    center: Tuple[float, float]
    rect_min: Tuple[float, float]
    rect_max: Tuple[float, float]
    dot_center: Tuple[float, float]
    dot_radius: float
    text_anchor: Tuple[float, float]
    text: str = INTERACT_PROMPT


def icon_layout(screen_position) -> IconLayout:
    """Marker geometry around a screen position; the text is centred on its anchor's x."""
    x, y = (float(v) for v in screen_position)
    base = _ICON_BASE_SIZE
    return IconLayout(
        center=(x, y),
        rect_min=(x - base * 0.2, y - base * 0.7),
        rect_max=(x + base * 0.2, y + base * 0.2),
        dot_center=(x, y + base * 0.5),
        dot_radius=base * 0.2,
        text_anchor=(x, y + base + 5.0),
    )


def interaction_icons(
    system: DialogSystem, view_projection, width: int, height: int
) -> List[Tuple[NPC, IconLayout]]:
    """Icons for every NPC that shows one and whose marker lands on screen."""
    icons = []
    for npc in system.npcs:
        actor = npc.actor
        if not npc.show_icon or actor is None or not actor.visible:
            continue
        anchor = actor.position + np.array([0.0, actor.scale[1] + _ICON_HEIGHT_OFFSET, 0.0])
        screen = world_to_screen(anchor, view_projection, width, height)
        if screen is None:
            continue
        x, y = screen
        if 0.0 <= x < float(width) and 0.0 <= y < float(height):
            icons.append((npc, icon_layout(screen)))
    return icons


def visible_lines(npc: NPC) -> List[str]:
    """Lines shown for the NPC's current entry: revealed dialog lines or a whole ending."""
    entry = npc.current
    if not isinstance(entry, Dialog):
        return []
    if entry.type in _ENDING_TYPES:
        return list(entry.lines)
    return entry.lines[: npc.line_index + 1]


def _current_dialog(npc: NPC) -> Dialog:
    entry = npc.current
    if not isinstance(entry, Dialog) or entry.type is not DialogType.DIALOG:
        raise ValueError("current entry is not a dialog")
    return entry


def page_label(npc: NPC) -> str:
    """Progress label such as "(2/5)" for the current dialog."""
    dialog = _current_dialog(npc)
    return f"({npc.line_index + 1}/{len(dialog.lines)})"


def footer_hint(npc: NPC) -> str:
    """Prompt under the dialog: continue until the last line, then finish."""
    dialog = _current_dialog(npc)
    if not dialog.lines or npc.line_index < len(dialog.lines) - 1:
        return CONTINUE_HINT
    return FINISH_HINT


def ending_title(good: bool) -> str:
    return GOOD_ENDING_TITLE if good else BAD_ENDING_TITLE