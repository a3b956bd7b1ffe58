from __future__ import annotations

"""Renderer that records draw operations instead of touching pixels."""

from typing import Any, Sequence

from game_engine import Track, Vehicle

Frame = tuple[tuple[Any, ...], ...]


class RecordingRenderer:
    """Keeps the most recent `keep` frames as tuples of draw ops."""

    def __init__(self, keep: int = 1) -> None:
        if keep < 1:
            raise ValueError("keep must be >= 1")
        self.keep = keep
        self.frames: list[Frame] = []
        self.frames_rendered = 0

    def render_frame(self, player: Vehicle, obstacles: Sequence[Vehicle], track: Track) -> None:
        ops: list[tuple[Any, ...]] = [("clear", track.width, track.height)]
        for x in track.divider_xs():
            ops.append(("line", x, 0, x, track.height))
        ops.append(("rect", player.color, *player.rect()))
        for o in obstacles:
            ops.append(("rect", o.color, *o.rect()))

        self.frames.append(tuple(ops))
        if len(self.frames) > self.keep:
            del self.frames[: len(self.frames) - self.keep]
        self.frames_rendered += 1

    @property
    def last_frame(self) -> Frame | None:
        return self.frames[-1] if self.frames else None
