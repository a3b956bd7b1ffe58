from __future__ import annotations

from lanedodge.backends.base import DisplayBackend
from lanedodge.backends.headless.adapter import HeadlessBackend
from lanedodge.backends.desktop.adapter import PygameBackend

_BACKENDS = {
    "pygame": PygameBackend,
    "headless": HeadlessBackend,
}


def load_backend(name: str) -> DisplayBackend:
    try:
        return _BACKENDS[name]()
    except KeyError as exc:
        raise ValueError(f"Unknown backend: {name!r}. Expected one of {sorted(_BACKENDS)}") from exc


def available_backends() -> list[str]:
    return sorted(_BACKENDS)
