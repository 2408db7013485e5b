import numpy as np

# CONSTANTS
# Gravedad en px/s² (el eje y crece hacia abajo)
GRAVITY = 500.0
# Factor aplicado a la velocidad al chocar con un borde
RESTITUTION = -0.8
# Resistencia del aire (fracción de velocidad perdida por segundo)
AIR_RESISTANCE = 0.5
# Radio por defecto en px
RADIUS = 25.0
# Color coral opaco (RGBA 0-255)
COLOR = (255, 100, 100, 255)


class Ball:
    """Pelota arrastrable con gravedad, rebote y resistencia del aire"""

    def __init__(self, x: float, y: float, radius: float = RADIUS):
        if radius <= 0:
            raise ValueError(f"El radio debe ser positivo, no {radius}")

        self.position = np.array([x, y], dtype=np.float64)
        self.velocity = np.zeros(2, dtype=np.float64)
        self.radius = float(radius)
        self.dragged = False

    def contains(self, x: float, y: float) -> bool:
        """True si el punto (x, y) cae dentro del disco (borde incluido)"""
        dx = x - self.position[0]
        dy = y - self.position[1]
        return dx * dx + dy * dy <= self.radius * self.radius

    def drag_to(self, x: float, y: float):
        self.dragged = True
        self.position[0] = x
        self.position[1] = y
        self.velocity[:] = 0.0

    def release(self):
        self.dragged = False

    def update(self, delta_time: float, width: float, height: float):
        """Avanzar la física un paso de delta_time segundos (Euler explícito)"""
        if self.dragged:
            return

        # Apply gravity
        self.velocity[1] += GRAVITY * delta_time

        # Update position
        self.position += self.velocity * delta_time

        self.collide_with_walls(width, height)

        # Resistencia del aire. Con delta_time > 2s el factor es negativo
        # y la velocidad cambia de signo.
        self.velocity *= 1.0 - AIR_RESISTANCE * delta_time

    def collide_with_walls(self, width: float, height: float):
        """Mantener el centro dentro de [radio, dimensión - radio] en cada eje"""
        r = self.radius

        for axis, limit in ((0, width), (1, height)):
            if self.position[axis] < r:
                self.position[axis] = r
                self.velocity[axis] *= RESTITUTION
            elif self.position[axis] > limit - r:
                self.position[axis] = limit - r
                self.velocity[axis] *= RESTITUTION
