from __future__ import annotations

import pygame

from game_engine import Command
from lanedodge.core.contracts import CommandHandler, Unsubscribe

KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_SPACE: Command.CONFIRM,
}


def translate(event: pygame.event.Event) -> Command | None:
    """Map a raw pygame event to a game command (None for anything else)."""
    if event.type != pygame.KEYDOWN:
        return None
    return KEYMAP.get(event.key)


class PygameInputSource:
    """Turns the pygame event queue into game commands.

    `poll` is called once per host frame, between ticks, so a command is
    never delivered while a tick is running.
    """

    def __init__(self) -> None:
        self._handlers: list[CommandHandler] = []
        self.quit_requested = False

    def subscribe(self, handler: CommandHandler) -> Unsubscribe:
        if handler not in self._handlers:
            self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit_requested = True
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.quit_requested = True
            return
        command = translate(event)
        if command is None:
            return
        for handler in list(self._handlers):
            handler(command)

    def poll(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)
