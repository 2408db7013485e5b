import logging

import numpy as np

from ball import Ball, RADIUS
from events import MouseButtonUp, MouseMotion, is_quit
from utils import rasterize_disc

logger = logging.getLogger(__name__)


class Simulation:
    """Estado de la simulación: la pelota, la arena y el último timestamp"""

    def __init__(self, width: float, height: float, now: float, radius: float = RADIUS):
        self.width = width
        self.height = height
        self.ball = Ball(width / 2.0, height / 2.0, radius)
        self.last_update = now
        self.running = True

    def handle_events(self, events):
        """Procesar un lote de eventos en orden de llegada"""
        for event in events:
            if is_quit(event):
                self.running = False
                return

            elif isinstance(event, MouseMotion):
                if not event.left_pressed:
                    continue
                # Una vez arrastrando se sigue al cursor aunque salga del radio
                if self.ball.dragged or self.ball.contains(event.x, event.y):
                    if not self.ball.dragged:
                        logger.debug("Arrastre iniciado en (%.0f, %.0f)", event.x, event.y)
                    self.ball.drag_to(event.x, event.y)

            elif isinstance(event, MouseButtonUp):
                self.ball.release()

    def update(self, now: float) -> float:
        """Avanzar la física hasta `now`; devuelve el delta time usado"""
        delta_time = now - self.last_update
        self.last_update = now

        self.ball.update(delta_time, self.width, self.height)
        return delta_time

    def disc_points(self) -> np.ndarray:
        """Píxeles de la pelota con centro y radio truncados a enteros"""
        x, y = self.ball.position
        return rasterize_disc(int(x), int(y), int(self.ball.radius))
