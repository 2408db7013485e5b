from OpenGL.GL import *
from OpenGL.GL.shaders import compileProgram, compileShader
from OpenGL.error import GLError

import ctypes
import logging

import numpy as np

from errors import RenderError, StartupError
from utils import to_gl_color

logger = logging.getLogger(__name__)


class DiscRenderer:
    """Dibuja puntos sueltos de un color sobre un fondo transparente"""

    def __init__(self):
        # Shaders
        self.vertex_shader = """
        #version 330 core
        layout (location = 0) in vec2 aPos;

        uniform mat4 projection;
        uniform mat4 view;
        uniform float pointSize;

        void main() {
            gl_Position = projection * view * vec4(aPos, 0.0, 1.0);
            gl_PointSize = pointSize;
        }
        """

        self.fragment_shader = """
        #version 330 core
        uniform vec4 drawColor;
        out vec4 FragColor;

        void main() {
            FragColor = drawColor;
        }
        """

        self.shader_program = None
        self.vao = None
        self.vbo = None

        self.draw_color = to_gl_color((255, 255, 255, 255))
        # Tamaño del píxel de ventana en píxeles de framebuffer (HiDPI)
        self.point_size = 1.0

    def init_gl(self):
        """Inicializar recursos de OpenGL"""
        try:
            # Compilar shaders
            self.shader_program = compileProgram(
                compileShader(self.vertex_shader, GL_VERTEX_SHADER),
                compileShader(self.fragment_shader, GL_FRAGMENT_SHADER),
            )

            # Crear VAO y VBO
            self.vao = glGenVertexArrays(1)
            self.vbo = glGenBuffers(1)

            glBindVertexArray(self.vao)
            glBindBuffer(GL_ARRAY_BUFFER, self.vbo)

            # Posición (2 floats)
            glVertexAttribPointer(0, 2, GL_FLOAT, GL_FALSE, 8, ctypes.c_void_p(0))
            glEnableVertexAttribArray(0)

            glBindVertexArray(0)

            # Alpha blending normal, para que el clear transparente se vea
            glEnable(GL_BLEND)
            glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
            glEnable(GL_PROGRAM_POINT_SIZE)
        except (GLError, RuntimeError) as e:
            # compileProgram lanza RuntimeError si falla el link/compilado
            raise StartupError(f"No se pudo preparar OpenGL: {e}") from e

    def clear(self):
        """Limpiar a transparente (alpha = 0)"""
        glClearColor(0.0, 0.0, 0.0, 0.0)
        glClear(GL_COLOR_BUFFER_BIT)

    def set_draw_color(self, color):
        self.draw_color = to_gl_color(color)

    def draw_points(self, points: np.ndarray, projection: np.ndarray, view: np.ndarray):
        """Dibujar un array (N, 2) de píxeles enteros con el color actual"""
        if len(points) == 0:
            return

        # Centro del píxel
        vertices = np.ascontiguousarray(points, dtype=np.float32) + 0.5

        try:
            glUseProgram(self.shader_program)

            # Establecer uniforms
            proj_loc = glGetUniformLocation(self.shader_program, "projection")
            view_loc = glGetUniformLocation(self.shader_program, "view")
            size_loc = glGetUniformLocation(self.shader_program, "pointSize")
            color_loc = glGetUniformLocation(self.shader_program, "drawColor")
            glUniformMatrix4fv(proj_loc, 1, GL_FALSE, projection)
            glUniformMatrix4fv(view_loc, 1, GL_FALSE, view)
            glUniform1f(size_loc, self.point_size)
            glUniform4fv(color_loc, 1, self.draw_color)

            # Actualizar VBO
            glBindVertexArray(self.vao)
            glBindBuffer(GL_ARRAY_BUFFER, self.vbo)
            glBufferData(GL_ARRAY_BUFFER, vertices.nbytes, vertices, GL_DYNAMIC_DRAW)

            # Dibujar
            glDrawArrays(GL_POINTS, 0, len(vertices))

            glBindVertexArray(0)
        except GLError as e:
            raise RenderError(f"Falló el dibujo de {len(vertices)} puntos: {e}") from e

    def cleanup(self):
        """Liberar recursos"""
        if self.vao:
            glDeleteVertexArrays(1, [self.vao])
        if self.vbo:
            glDeleteBuffers(1, [self.vbo])
        if self.shader_program:
            glDeleteProgram(self.shader_program)
        logger.debug("Recursos de OpenGL liberados")
