from __future__ import annotations

from collections import deque

from game_engine import Command
from lanedodge.core.contracts import CommandHandler, Unsubscribe


class QueuedInputSource:
    """Scripted input: commands are queued by `push` and delivered on `flush`."""

    def __init__(self) -> None:
        self._handlers: list[CommandHandler] = []
        self._queue: deque[Command] = deque()

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: CommandHandler) -> Unsubscribe:
        if handler not in self._handlers:
            self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def push(self, command: Command) -> None:
        self._queue.append(command)

    def flush(self) -> int:
        delivered = 0
        while self._queue:
            command = self._queue.popleft()
            for handler in list(self._handlers):
                handler(command)
            delivered += 1
        return delivered
