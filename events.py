from dataclasses import dataclass
from typing import List

# Mismo valor que glfw.KEY_ESCAPE, así este módulo no depende de glfw
KEY_ESCAPE = 256
# Mismo valor que glfw.MOUSE_BUTTON_LEFT
MOUSE_BUTTON_LEFT = 0


@dataclass
class Quit:
    pass


@dataclass
class KeyDown:
    key: int


@dataclass
class MouseMotion:
    x: float
    y: float
    left_pressed: bool


@dataclass
class MouseButtonUp:
    button: int = MOUSE_BUTTON_LEFT


class EventQueue:
    """Cola de eventos de entrada en orden de llegada"""

    def __init__(self):
        self._pending: List[object] = []

    def push(self, event):
        self._pending.append(event)

    def drain(self) -> List[object]:
        """Devolver los eventos pendientes y vaciar la cola (no bloquea)"""
        events = self._pending
        self._pending = []
        return events

    def __len__(self):
        return len(self._pending)


def is_quit(event) -> bool:
    """Quit o Escape terminan cualquiera de los dos programas"""
    if isinstance(event, Quit):
        return True
    return isinstance(event, KeyDown) and event.key == KEY_ESCAPE
