from OpenGL.GL import *
from OpenGL.GL.shaders import compileProgram, compileShader
from OpenGL.error import GLError

import ctypes
import logging
import sys
import time

import glfw
import numpy as np

from animation import Animation, load_gif
from errors import RenderError, SimulatorError, StartupError
from events import is_quit
from logging_config import setup_logging
from utils import screen_projection
from window import TransparentWindow

FRAME_INTERVAL = 1.0 / 60.0
TITLE = "GIF Viewer"
DEFAULT_GIF_PATH = "animation.gif"

logger = logging.getLogger(__name__)


class TextureRenderer:
    """Dibuja una imagen RGBA como un quad texturizado"""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

        self.vertex_shader = """
        #version 330 core
        layout (location = 0) in vec2 aPos;
        layout (location = 1) in vec2 aTexCoord;

        uniform mat4 projection;

        out vec2 texCoord;

        void main() {
            gl_Position = projection * vec4(aPos, 0.0, 1.0);
            texCoord = aTexCoord;
        }
        """

        self.fragment_shader = """
        #version 330 core
        in vec2 texCoord;
        out vec4 FragColor;

        uniform sampler2D image;

        void main() {
            FragColor = texture(image, texCoord);
        }
        """

        self.shader_program = None
        self.vao = None
        self.vbo = None
        self.texture = None

    def init_gl(self):
        """Inicializar shaders, quad y textura"""
        w, h = float(self.width), float(self.height)
        # x, y, u, v (la fila 0 de la imagen es la de arriba)
        quad = np.array(
            [
                [0.0, 0.0, 0.0, 0.0],
                [w, 0.0, 1.0, 0.0],
                [0.0, h, 0.0, 1.0],
                [w, h, 1.0, 1.0],
            ],
            dtype=np.float32,
        )

        try:
            self.shader_program = compileProgram(
                compileShader(self.vertex_shader, GL_VERTEX_SHADER),
                compileShader(self.fragment_shader, GL_FRAGMENT_SHADER),
            )

            self.vao = glGenVertexArrays(1)
            self.vbo = glGenBuffers(1)

            glBindVertexArray(self.vao)
            glBindBuffer(GL_ARRAY_BUFFER, self.vbo)
            glBufferData(GL_ARRAY_BUFFER, quad.nbytes, quad, GL_STATIC_DRAW)

            # Posición (2 floats)
            glVertexAttribPointer(0, 2, GL_FLOAT, GL_FALSE, 16, ctypes.c_void_p(0))
            glEnableVertexAttribArray(0)

            # Coordenadas de textura (2 floats)
            glVertexAttribPointer(1, 2, GL_FLOAT, GL_FALSE, 16, ctypes.c_void_p(8))
            glEnableVertexAttribArray(1)

            glBindVertexArray(0)

            self.texture = glGenTextures(1)
            glBindTexture(GL_TEXTURE_2D, self.texture)
            glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
            glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
            glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
            glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)
            glPixelStorei(GL_UNPACK_ALIGNMENT, 1)

            glEnable(GL_BLEND)
            glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        except (GLError, RuntimeError) as e:
            raise StartupError(f"No se pudo preparar OpenGL: {e}") from e

    def upload(self, image: np.ndarray):
        """Subir un frame RGBA (H, W, 4) a la textura"""
        try:
            glBindTexture(GL_TEXTURE_2D, self.texture)
            glTexImage2D(
                GL_TEXTURE_2D,
                0,
                GL_RGBA8,
                image.shape[1],
                image.shape[0],
                0,
                GL_RGBA,
                GL_UNSIGNED_BYTE,
                np.ascontiguousarray(image),
            )
        except GLError as e:
            raise RenderError(f"No se pudo subir el frame: {e}") from e

    def render(self, projection: np.ndarray):
        try:
            glClearColor(0.0, 0.0, 0.0, 0.0)
            glClear(GL_COLOR_BUFFER_BIT)

            glUseProgram(self.shader_program)
            proj_loc = glGetUniformLocation(self.shader_program, "projection")
            glUniformMatrix4fv(proj_loc, 1, GL_FALSE, projection)

            glActiveTexture(GL_TEXTURE0)
            glBindTexture(GL_TEXTURE_2D, self.texture)

            glBindVertexArray(self.vao)
            glDrawArrays(GL_TRIANGLE_STRIP, 0, 4)
            glBindVertexArray(0)
        except GLError as e:
            raise RenderError(f"No se pudo dibujar el frame: {e}") from e

    def cleanup(self):
        """Liberar recursos"""
        if self.vao:
            glDeleteVertexArrays(1, [self.vao])
        if self.vbo:
            glDeleteBuffers(1, [self.vbo])
        if self.texture:
            glDeleteTextures([self.texture])
        if self.shader_program:
            glDeleteProgram(self.shader_program)


class GifViewer:
    """Reproduce un GIF en bucle en una ventana transparente de su tamaño"""

    def __init__(self, animation: Animation):
        self.animation = animation
        width, height = animation.size
        self.window = TransparentWindow(TITLE, width, height)
        self.renderer = None
        self.projection = None
        self.start_time = 0.0
        self.current_index = None

    def init(self):
        self.window.init()

        fb_width, fb_height = self.window.framebuffer_size()
        glViewport(0, 0, fb_width, fb_height)

        self.renderer = TextureRenderer(self.window.width, self.window.height)
        self.renderer.init_gl()
        self.projection = screen_projection(self.window.width, self.window.height)

        self.start_time = glfw.get_time()

    def run(self):
        """Loop principal"""
        while True:
            if any(is_quit(event) for event in self.window.poll_events()):
                break

            elapsed = glfw.get_time() - self.start_time
            index = self.animation.index_at(elapsed)

            # Solo se sube la textura cuando cambia el frame
            if index != self.current_index:
                self.renderer.upload(self.animation.frames[index].image)
                self.current_index = index

            self.renderer.render(self.projection)
            self.window.present()

            time.sleep(FRAME_INTERVAL)

        logger.info("Saliendo")

    def cleanup(self):
        if self.renderer:
            self.renderer.cleanup()
        self.window.terminate()


def main(argv=None):
    """Función principal"""
    setup_logging()

    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else DEFAULT_GIF_PATH

    try:
        viewer = GifViewer(load_gif(path))
    except SimulatorError:
        logger.exception("Error fatal")
        return 1

    try:
        viewer.init()
        viewer.run()
    except SimulatorError:
        logger.exception("Error fatal")
        return 1
    finally:
        viewer.cleanup()

    return 0


if __name__ == "__main__":
    sys.exit(main())
