import logging
from dataclasses import dataclass
from typing import List

import numpy as np
from PIL import Image, UnidentifiedImageError

from errors import StartupError

# Retardo por defecto cuando el GIF no trae duración (o trae 0), en ms
DEFAULT_FRAME_DELAY_MS = 100

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """Un frame de la animación: duración en segundos y píxeles RGBA (H, W, 4)"""

    duration: float
    image: np.ndarray

    @property
    def width(self) -> int:
        return self.image.shape[1]

    @property
    def height(self) -> int:
        return self.image.shape[0]


class Animation:
    """Secuencia ordenada de frames que se reproduce en bucle"""

    def __init__(self, frames: List[Frame]):
        if not frames:
            raise ValueError("Una animación necesita al menos un frame")
        for frame in frames:
            if frame.duration <= 0:
                raise ValueError(f"Duración de frame no válida: {frame.duration}")

        self.frames = frames
        self.total_duration = sum(frame.duration for frame in frames)

    def index_at(self, elapsed: float) -> int:
        """Índice del frame visible tras `elapsed` segundos (en bucle)"""
        t = elapsed % self.total_duration

        end = 0.0
        for i, frame in enumerate(self.frames):
            end += frame.duration
            if t < end:
                return i

        # Error de redondeo al acumular: t queda justo en el final
        return len(self.frames) - 1

    def frame_at(self, elapsed: float) -> Frame:
        return self.frames[self.index_at(elapsed)]

    @property
    def size(self):
        first = self.frames[0]
        return first.width, first.height

    def __len__(self):
        return len(self.frames)


def load_gif(path) -> Animation:
    """Decodificar todos los frames de un GIF a RGBA con sus retardos"""
    try:
        im = Image.open(path)
    except (OSError, UnidentifiedImageError) as e:
        raise StartupError(f"No se pudo abrir el GIF {path}: {e}") from e

    frames = []
    with im:
        try:
            i = 0
            while True:
                im.seek(i)
                delay = im.info.get("duration") or DEFAULT_FRAME_DELAY_MS
                frames.append(Frame(delay / 1000.0, np.array(im.convert("RGBA"))))
                i += 1
        except EOFError:
            pass
        except OSError as e:
            # Cabecera válida pero datos truncados o corruptos
            raise StartupError(f"No se pudo decodificar el GIF {path}: {e}") from e

    if not frames:
        raise StartupError(f"El GIF {path} no tiene frames")

    logger.info("GIF %s: %d frames", path, len(frames))
    return Animation(frames)
