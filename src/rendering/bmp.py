"""24-bit BMP export of rendered images."""

import logging
import os
from pathlib import Path

import cv2
import numpy as np

logger = logging.getLogger(__name__)

BMP_SUFFIX = ".bmp"


def encode_bmp(image: np.ndarray) -> bytes:
    """Encodes an image as an uncompressed 24-bit BMP.

    The file has a 14-byte file header and a 40-byte DIB header, bottom-up
    rows padded to 4 bytes and BGR pixel order.

    Args:
        image: uint8 BGR image of shape (h, w, 3). Grayscale (h, w) and BGRA
            (h, w, 4) images are converted to BGR first.

    Returns:
        The BMP file contents.
    """
    image = np.asarray(image)
    if image.dtype != np.uint8:
        raise ValueError(f"image must be uint8, got {image.dtype}")

    if image.ndim == 2:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
    elif image.ndim == 3 and image.shape[2] == 4:
        image = cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)
    elif image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"unsupported image shape {image.shape}")

    ok, buffer = cv2.imencode(BMP_SUFFIX, image)
    if not ok:
        raise RuntimeError("OpenCV failed to encode the image as BMP")
    return buffer.tobytes()


def save_bmp(image: np.ndarray, path: str | os.PathLike) -> Path:
    """Writes ``image`` to ``path`` as a 24-bit BMP.

    A ``.bmp`` suffix is appended when ``path`` lacks one.

    Returns:
        The path actually written.
    """
    path = Path(path)
    if path.suffix.lower() != BMP_SUFFIX:
        path = path.with_name(path.name + BMP_SUFFIX)

    data = encode_bmp(image)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info(f"Saved BMP to {path}")
    return path
