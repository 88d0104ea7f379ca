# heartengine

This package holds the game logic for a small dating-sim classroom adventure.
It does not depend on any window, GPU or UI toolkit. It contains these modules:

- **`heartengine.dialog`** runs conversations with NPCs.
  - An NPC (`NPC`) is attached to an `Actor`. A `DialogSystem` drives its script.
  - A script is a list of `Dialog` line sequences and scored `Quiz` questions.
  - After the last quiz, the NPC branches to a good ending if the total score is 25 or lower. Otherwise it branches to the bad ending.
  - While no conversation is running, the NPC plays an idle animation clip, which is recorded in `Actor.pose`.
- **Story content**:
  - `heartengine.scripts_intro` holds the teacher's opening conversation and the route choice.
  - `heartengine.scripts_route_a`, `heartengine.scripts_route_b` and `heartengine.scripts_route_c` hold the three character routes.
  - `heartengine.story` connects them.
- **`heartengine.presentation`** works out what a UI layer needs to draw:
  - `is_narrative_line` and `split_speaker` tell narrative lines from spoken ones.
  - `visible_lines`, `page_label`, `footer_hint` and `ending_title` give the text to show.
  - `world_to_screen`, `icon_layout` and `interaction_icons` place the interaction marker on screen.
- **`heartengine.bbox`** provides axis-aligned `BoundingBox` values with `center`, `intersects`, `merge` and `transformed`. It also has helpers that build boxes for meshes (`mesh_bbox`), skinned meshes (`skinned_mesh_bbox`), node-transformed meshes (`static_mesh_bbox`) and whole models (`model_local_bbox`).
- **`heartengine.collision`** resolves collisions between `Body` objects through `AABBCollider`s and a `CollisionSystem`:
  - It finds every pair of colliders whose boxes overlap.
  - It separates them along the axis where they overlap least.
  - On the Y axis it corrects the overlap fully and stops vertical motion.
  - On the other axes it corrects part of the overlap and applies a restitution impulse.
- **`heartengine.debuglines`** builds line-list geometry for debug drawing:
  - `box_lines` and `scene_box_lines` give box outlines.
  - `skeleton_lines` gives skeleton joints and bones, colour-coded by joint name with `joint_color`.

## Installation

```
pip install .
```

The package needs Python 3.10 or later. Its only runtime dependency is `numpy`.

## Running a story

```python
from heartengine.dialog import Actor, DialogSystem
from heartengine.story import new_game

system = DialogSystem()
teacher = Actor(name="teacher")
new_game(system, teacher)

player = Actor(name="Player")
system.update(player, dt=0.016)   # shows the icon of route NPCs within 2 units
npc = system.press_interact()     # starts the conversation with that NPC
system.press_interact()           # advances to the next dialog line
```

These methods drive the rest of a conversation:

| Method | What it does |
| --- | --- |
| `system.choose_option(index)` | Answers the current quiz. |
| `system.continue_quiz()` | Moves past an answered quiz. |
| `system.finish_ending()` | Closes an ending screen and ends that NPC's route. |
| `system.active_npc()` | Returns the NPC currently in conversation, or `None`. |

Calling them in the wrong state raises `RuntimeError`. `choose_option` raises `IndexError` for an option that does not exist.

`new_game` makes the route-selection quiz start a character route when you continue past it:

- The teacher's route is switched off.
- The chosen route is added as a new NPC on the same actor.

To start a route directly, call `heartengine.story.start_route(system, actor, choice)`. The choices are 0, 1 and 2. Any other value starts route A.

If `update` is called without a player, it logs a warning once. In that case it only advances idle animations and hides all icons.

## Collision

```python
from heartengine.bbox import BoundingBox
from heartengine.collision import AABBCollider, Body, CollisionSystem

floor = Body(position=(0, -1, 0), box=BoundingBox((-5, -1.5, -5), (5, -0.5, 5)), inv_mass=0.0)
crate = Body(position=(0, 0, 0), box=BoundingBox((-0.5, -0.6, -0.5), (0.5, 0.4, 0.5)))

world = CollisionSystem()
world.add(AABBCollider(floor))
world.add(AABBCollider(crate))
world.update()   # the crate is pushed up out of the floor
```

`Body.translate` moves a body together with its box. When two bodies are resolved, each one's `on_collision` callback, if set, is called with the other body. To resolve one pair directly, call `resolve_collision(a, b)`. It returns `False` when both bodies are static.

## What this package does not do

This package does not open a window, read keyboard input, draw anything or load models and animation files. The caller must:

- call `press_interact` when the interact key is pressed;
- feed actor positions and clip names and durations into `Actor`;
- turn the presentation helpers' results and the debug line arrays into actual drawing.

## Running the tests

```
pip install .[test]
pytest
```