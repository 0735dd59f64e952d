"""
Загружает PNG/JPG → RGBA‑массив numpy, готовый к загрузке в GPU.
"""

from pathlib import Path
from PIL import Image
import numpy as np
from wavefront3d.utils.logger import logger

def load_texture(path) -> np.ndarray:
    """
    Загружает изображение через Pillow.
    Возвращает массив uint8 формы (H, W, 4).
    """
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"Texture not found: {p}")

    with Image.open(p) as img:
        pixels = np.array(img.convert("RGBA"), dtype=np.uint8)

    h, w = pixels.shape[:2]
    logger.debug(f"[TextureLoader] Loaded texture {p} ({w}x{h})")
    return pixels
