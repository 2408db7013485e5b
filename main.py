import logging
import sys
import time

import glfw
import pyrr
from OpenGL.GL import glViewport

from ball import COLOR
from discRenderer import DiscRenderer
from errors import SimulatorError
from logging_config import setup_logging
from simulation import Simulation
from utils import screen_projection
from window import TransparentWindow

# Pausa fija al final de cada frame (no adaptativa)
FRAME_INTERVAL = 1.0 / 60.0
TITLE = "Bouncing Ball"

logger = logging.getLogger(__name__)


class BallSimulator:
    """Aplicación principal: una pelota en una ventana transparente"""

    def __init__(self):
        self.window = TransparentWindow(TITLE)
        self.renderer = None
        self.simulation = None

        self.view = None
        self.projection = None

    def init(self):
        """Crear la ventana del tamaño de la pantalla y preparar OpenGL"""
        self.window.init()
        width, height = self.window.width, self.window.height

        fb_width, fb_height = self.window.framebuffer_size()
        glViewport(0, 0, fb_width, fb_height)

        self.renderer = DiscRenderer()
        self.renderer.init_gl()
        self.renderer.point_size = fb_width / width

        # Coordenadas de ventana en px, igual que las del cursor
        self.projection = screen_projection(width, height)
        self.view = pyrr.matrix44.create_identity(dtype="f4")

        self.simulation = Simulation(width, height, glfw.get_time())
        logger.info("Arena de %dx%d px", width, height)

    def run(self):
        """Loop principal"""
        simulation = self.simulation

        while True:
            # Eventos
            simulation.handle_events(self.window.poll_events())
            if not simulation.running:
                break

            # Física
            simulation.update(glfw.get_time())

            # Renderizar
            self.renderer.clear()
            self.renderer.set_draw_color(COLOR)
            self.renderer.draw_points(
                simulation.disc_points(), self.projection, self.view
            )
            self.window.present()

            time.sleep(FRAME_INTERVAL)

        logger.info("Saliendo")

    def cleanup(self):
        if self.renderer:
            self.renderer.cleanup()
        self.window.terminate()


def main():
    """Función principal"""
    setup_logging()

    simulator = BallSimulator()
    try:
        simulator.init()
        simulator.run()
    except SimulatorError:
        logger.exception("Error fatal")
        return 1
    finally:
        simulator.cleanup()

    return 0


if __name__ == "__main__":
    sys.exit(main())
