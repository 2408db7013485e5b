class SimulatorError(Exception):
    """Error base de los programas de escritorio"""


class StartupError(SimulatorError):
    """No se pudo obtener la pantalla, la ventana o la superficie de dibujo"""


class RenderError(SimulatorError):
    """Falló una llamada de dibujo en mitad de un frame"""
