import logging
from typing import Optional

import glfw

from errors import StartupError
from events import EventQueue, KeyDown, MouseButtonUp, MouseMotion, Quit
from utils import centered_origin

logger = logging.getLogger(__name__)


class TransparentWindow:
    """Ventana glfw sin bordes y con framebuffer transparente"""

    def __init__(
        self, title: str, width: Optional[int] = None, height: Optional[int] = None
    ):
        self.title = title
        # None = tamaño nativo de la pantalla principal
        self.width = width
        self.height = height
        self.window = None
        self.events = EventQueue()

    def init(self):
        """Inicializar GLFW, crear la ventana y el contexto OpenGL"""
        if not glfw.init():
            raise StartupError("No se pudo inicializar GLFW")

        try:
            self._create()
        except StartupError:
            glfw.terminate()
            raise

        glfw.make_context_current(self.window)
        self._install_callbacks()

        if not glfw.get_window_attrib(self.window, glfw.TRANSPARENT_FRAMEBUFFER):
            logger.warning("El framebuffer no es transparente en este sistema")

        logger.info("Ventana '%s' creada (%dx%d)", self.title, self.width, self.height)

    def _create(self):
        monitor = glfw.get_primary_monitor()
        mode = glfw.get_video_mode(monitor) if monitor else None
        if not mode:
            raise StartupError("No se pudo obtener el modo de la pantalla principal")

        screen_width, screen_height = mode.size.width, mode.size.height
        if self.width is None or self.height is None:
            self.width, self.height = screen_width, screen_height

        # Configurar ventana
        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
        glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
        glfw.window_hint(glfw.TRANSPARENT_FRAMEBUFFER, glfw.TRUE)
        glfw.window_hint(glfw.DECORATED, glfw.FALSE)

        self.window = glfw.create_window(
            self.width, self.height, self.title, None, None
        )
        if not self.window:
            raise StartupError("No se pudo crear la ventana")

        glfw.set_window_pos(
            self.window,
            *centered_origin(screen_width, screen_height, self.width, self.height),
        )

    def _install_callbacks(self):
        glfw.set_window_close_callback(self.window, self.close_callback)
        glfw.set_key_callback(self.window, self.key_callback)
        glfw.set_cursor_pos_callback(self.window, self.cursor_pos_callback)
        glfw.set_mouse_button_callback(self.window, self.mouse_button_callback)

    def close_callback(self, window):
        self.events.push(Quit())

    def key_callback(self, window, key, scancode, action, mods):
        if action == glfw.PRESS:
            self.events.push(KeyDown(key))

    def cursor_pos_callback(self, window, x, y):
        left = glfw.get_mouse_button(window, glfw.MOUSE_BUTTON_LEFT) == glfw.PRESS
        self.events.push(MouseMotion(x, y, left))

    def mouse_button_callback(self, window, button, action, mods):
        if action == glfw.RELEASE:
            self.events.push(MouseButtonUp(button))

    def poll_events(self):
        """Procesar eventos de glfw sin bloquear y devolver los pendientes"""
        glfw.poll_events()
        return self.events.drain()

    def framebuffer_size(self):
        return glfw.get_framebuffer_size(self.window)

    def present(self):
        glfw.swap_buffers(self.window)

    def terminate(self):
        if self.window:
            glfw.destroy_window(self.window)
            self.window = None
        glfw.terminate()
