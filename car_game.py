#!/usr/bin/env python3
"""
LANEDODGE — 2D lane dodge game
Dodge the oncoming cars. Every new car makes traffic a little faster.

Requirements:
    pip install pygame numpy
"""

import sys

from lanedodge.backends.desktop.app_game import run
from lanedodge.config.loader import load_settings
from lanedodge.core.contracts import SurfaceUnavailableError


def main():
    settings = load_settings(backend="pygame")
    try:
        best = run(settings)
    except SurfaceUnavailableError as exc:
        print(f"[game] {exc}")
        sys.exit(1)
    print(f"Best score this session: {best}")


if __name__ == "__main__":
    main()
