"""
Input handler with action-based abstraction.

Translates raw pygame keyboard and gamepad events into semantic Actions
and publishes them on the event bus once per frame.

Usage:
    # In the host loop
    for event in pygame.event.get():
        input_handler.process_event(event)
    input_handler.update()

    # Anyone interested in actions subscribes to the bus
    bus.subscribe(InputEvent.ACTION_PRESSED, on_action)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import pygame

from dialog_engine.core.actions import (
    Action,
    DEFAULT_KEY_BINDINGS,
    DEFAULT_GAMEPAD_BINDINGS,
)
from dialog_engine.core.events import EventBus


class InputEvent(Enum):
    """Input-specific events."""
    ACTION_PRESSED = "input.action_pressed"
    ACTION_RELEASED = "input.action_released"


@dataclass
class InputState:
    """Complete input state for current frame."""
    actions_pressed: set[Action] = field(default_factory=set)
    actions_just_pressed: set[Action] = field(default_factory=set)
    actions_just_released: set[Action] = field(default_factory=set)

    keys_pressed: set[int] = field(default_factory=set)
    buttons_pressed: set[int] = field(default_factory=set)


class InputHandler:
    """
    Handles keyboard and gamepad input.

    Pressed state is accumulated by ``process_event``; ``update`` turns
    it into just-pressed/just-released sets and publishes them.
    """

    def __init__(
        self,
        event_bus: EventBus | None = None,
        key_bindings: dict[Action, list[int]] | None = None,
    ):
        self.event_bus = event_bus

        self._state = InputState()
        self._prev_actions: set[Action] = set()

        # action -> keys
        source = key_bindings if key_bindings is not None else DEFAULT_KEY_BINDINGS
        self._key_bindings = {action: list(keys) for action, keys in source.items()}
        self._reverse_key_bindings: dict[int, list[Action]] = {}
        self._rebuild_reverse_bindings()

        self._gamepad_bindings = {
            action: list(buttons) for action, buttons in DEFAULT_GAMEPAD_BINDINGS.items()
        }
        # Opened joysticks must be kept alive to keep receiving events
        self._gamepads: dict[int, Any] = {}

    def _rebuild_reverse_bindings(self) -> None:
        """Build reverse lookup: key -> actions."""
        self._reverse_key_bindings.clear()
        for action, keys in self._key_bindings.items():
            for key in keys:
                self._reverse_key_bindings.setdefault(key, []).append(action)

    # Public API

    def is_action_pressed(self, action: Action) -> bool:
        """Check if an action is currently held down."""
        return action in self._state.actions_pressed

    def is_action_just_pressed(self, action: Action) -> bool:
        """Check if an action was pressed this frame."""
        return action in self._state.actions_just_pressed

    def is_action_just_released(self, action: Action) -> bool:
        return action in self._state.actions_just_released

    # Key binding management

    def bind_key(self, action: Action, key: int) -> None:
        """Add a key binding for an action."""
        keys = self._key_bindings.setdefault(action, [])
        if key not in keys:
            keys.append(key)
        self._rebuild_reverse_bindings()

    def unbind_key(self, action: Action, key: int) -> None:
        """Remove a key binding for an action."""
        keys = self._key_bindings.get(action, [])
        if key in keys:
            keys.remove(key)
        self._rebuild_reverse_bindings()

    def get_bindings(self, action: Action) -> list[int]:
        """Get all key bindings for an action."""
        return self._key_bindings.get(action, []).copy()

    # Frame update

    def process_event(self, event: pygame.event.Event) -> None:
        """Process a pygame event."""
        if event.type == pygame.KEYDOWN:
            self._state.keys_pressed.add(event.key)
            self._refresh_actions()

        elif event.type == pygame.KEYUP:
            self._state.keys_pressed.discard(event.key)
            self._refresh_actions()

        elif event.type == pygame.JOYBUTTONDOWN:
            self._state.buttons_pressed.add(event.button)
            self._refresh_actions()

        elif event.type == pygame.JOYBUTTONUP:
            self._state.buttons_pressed.discard(event.button)
            self._refresh_actions()

        elif event.type == pygame.JOYDEVICEADDED:
            joy = pygame.joystick.Joystick(event.device_index)
            self._gamepads[joy.get_instance_id()] = joy

        elif event.type == pygame.JOYDEVICEREMOVED:
            self._gamepads.pop(event.instance_id, None)

    def update(self) -> None:
        """
        Update input state for a new frame.

        Call this once per frame after feeding the frame's events.
        """
        pressed = self._state.actions_pressed
        self._state.actions_just_pressed = pressed - self._prev_actions
        self._state.actions_just_released = self._prev_actions - pressed

        if self.event_bus:
            for action in self._state.actions_just_pressed:
                self.event_bus.publish(InputEvent.ACTION_PRESSED, action=action)
            for action in self._state.actions_just_released:
                self.event_bus.publish(InputEvent.ACTION_RELEASED, action=action)

        self._prev_actions = pressed.copy()

    def _refresh_actions(self) -> None:
        """Recompute held actions from held keys and buttons."""
        actions: set[Action] = set()
        for key in self._state.keys_pressed:
            actions.update(self._reverse_key_bindings.get(key, ()))
        for action, buttons in self._gamepad_bindings.items():
            if self._state.buttons_pressed.intersection(buttons):
                actions.add(action)
        self._state.actions_pressed = actions
