import numpy as np
import pyrr


def rasterize_disc(x: int, y: int, radius: int) -> np.ndarray:
    """
    Puntos enteros de un disco relleno centrado en (x, y).
    Recorre una caja de (2r)x(2r) con offset = r - i y se queda con los
    que cumplen dx² + dy² <= r². Devuelve un array (N, 2) de int32.
    """
    if radius <= 0:
        return np.empty((0, 2), dtype=np.int32)

    offsets = radius - np.arange(2 * radius, dtype=np.int32)
    dx, dy = np.meshgrid(offsets, offsets, indexing="ij")
    inside = dx * dx + dy * dy <= radius * radius

    points = np.column_stack((x + dx[inside], y + dy[inside]))
    return points.astype(np.int32)


def to_gl_color(color) -> np.ndarray:
    """Color RGBA 0-255 a floats 0-1"""
    return np.array(color, dtype=np.float32) / 255.0


def screen_projection(width: float, height: float) -> np.ndarray:
    """Proyección ortográfica en px con origen arriba a la izquierda"""
    # bottom = height y top = 0 invierten el eje y, igual que el cursor
    return pyrr.matrix44.create_orthogonal_projection_matrix(
        0.0, width, height, 0.0, -1.0, 1.0, dtype=np.float32
    )


def centered_origin(outer_width, outer_height, width, height):
    """Esquina superior izquierda para centrar un rectángulo en otro"""
    return ((outer_width - width) // 2, (outer_height - height) // 2)
