"""
Input action definitions.

Actions abstract raw input (keys, buttons) into semantic actions, so the
dialog framework reacts to ``Action.ADVANCE`` rather than to the Return
key. This enables:
- Key rebinding
- Keyboard and gamepad driving the same conversation

Usage:
    if input.is_action_just_pressed(Action.ADVANCE):
        ...
"""

from enum import Enum, auto

import pygame


class Action(Enum):
    """
    Semantic input actions.

    Choice selection goes through the presentation slots, so the only
    action a conversation listens to is ADVANCE.
    """

    ADVANCE = auto()


# Default key bindings (can be customized)
DEFAULT_KEY_BINDINGS: dict[Action, list[int]] = {
    Action.ADVANCE: [pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE],
}

# Gamepad button bindings (SDL controller layout)
DEFAULT_GAMEPAD_BINDINGS: dict[Action, list[int]] = {
    Action.ADVANCE: [0],  # A button
}
