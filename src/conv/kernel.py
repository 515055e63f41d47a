"""Module for the Laplacian kernel and its wraparound application rule."""

import numpy as np

from model.pixel_buffer import Pixel, PixelBuffer

FILTER_WIDTH = 3
FILTER_HEIGHT = 3
RGB_MAX = 255

LAPLACIAN = np.array([
    [-1, -1, -1],
    [-1,  8, -1],
    [-1, -1, -1],
], dtype=np.int16)
LAPLACIAN.flags.writeable = False


def clamp(values: np.ndarray) -> np.ndarray:
    """Clip accumulated channel values into [0, 255] as ``uint8``."""
    return np.clip(values, 0, RGB_MAX).astype(np.uint8)


def convolve_pixel(source: PixelBuffer, x: int, y: int) -> Pixel:
    """Apply the kernel to the pixel at ``(x, y)``.

    Neighbours outside the image wrap around to the opposite edge.

    Args:
        source (PixelBuffer): Image to read from.
        x (int): Column of the target pixel.
        y (int): Row of the target pixel.

    Returns:
        Pixel: The clamped filter response.
    """
    w, h = source.width, source.height
    red = green = blue = 0

    for filterx in range(FILTER_WIDTH):
        for filtery in range(FILTER_HEIGHT):
            imagex = (x - FILTER_WIDTH // 2 + filterx + w) % w
            imagey = (y - FILTER_HEIGHT // 2 + filtery + h) % h
            weight = int(LAPLACIAN[filterx, filtery])
            r, g, b = source.pixel(imagex, imagey)
            red += r * weight
            green += g * weight
            blue += b * weight

    return Pixel(
        min(max(red, 0), RGB_MAX),
        min(max(green, 0), RGB_MAX),
        min(max(blue, 0), RGB_MAX),
    )


def convolve_rows(pixels: np.ndarray, start: int, stop: int) -> np.ndarray:
    """Apply the kernel to every pixel of rows ``[start, stop)``.

    Same rule as ``convolve_pixel``, computed one kernel tap at a time over
    the whole row range.

    Args:
        pixels (np.ndarray): Source array of shape (height, width, 3).
        start (int): First row to filter.
        stop (int): Row after the last one to filter.

    Returns:
        np.ndarray: ``uint8`` array of shape (stop - start, width, 3).
    """
    h, w = pixels.shape[:2]
    rows = np.arange(start, stop)
    cols = np.arange(w)
    acc = np.zeros((stop - start, w, pixels.shape[2]), dtype=np.int32)

    for filterx in range(FILTER_WIDTH):
        imagex = (cols - FILTER_WIDTH // 2 + filterx + w) % w
        for filtery in range(FILTER_HEIGHT):
            imagey = (rows - FILTER_HEIGHT // 2 + filtery + h) % h
            sample = pixels[np.ix_(imagey, imagex)]
            acc += sample.astype(np.int32) * int(LAPLACIAN[filterx, filtery])

    return clamp(acc)
