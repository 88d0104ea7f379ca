"""Game logic for a dating-sim adventure: NPC dialogs and quizzes, story scripts, bounding boxes, collisions and debug lines."""

__version__ = "0.1.0"