"""Module for the RGB pixel buffer shared by the loader and the convolvers."""

from __future__ import annotations

import numpy as np

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple, Sequence
from conv.errors import ConfigurationError

if TYPE_CHECKING:
    from conv.partition import Partition

CHANNELS = 3


class Pixel(NamedTuple):
    """A single RGB pixel."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class RowSlice:
    """Writable view over the rows of one partition of a result buffer."""

    partition: "Partition"
    rows: np.ndarray


class PixelBuffer:
    """Row-major RGB image of ``width * height`` pixels.

    Pixels are stored as a ``uint8`` array of shape ``(height, width, 3)``,
    so the flat index of ``(x, y)`` is ``y * width + x``.
    """

    pixels: np.ndarray

    def __init__(self, pixels: np.ndarray) -> None:
        """Initialize PixelBuffer class.

        Args:
            pixels (np.ndarray): Array of shape (height, width, 3).

        Raises:
            ConfigurationError: If the array is not a non-empty uint8 RGB raster.
        """
        pixels = np.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
            raise ConfigurationError(
                f"expected a (height, width, {CHANNELS}) array, got shape {pixels.shape}"
            )
        height, width = pixels.shape[:2]
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"image dimensions must be positive, got {width}x{height}")
        if pixels.dtype != np.uint8:
            raise ConfigurationError(f"expected uint8 pixels, got {pixels.dtype}")
        self.pixels = pixels

    @classmethod
    def allocate(cls, width: int, height: int) -> PixelBuffer:
        """Allocate a buffer whose cells are undefined until written.

        Args:
            width (int): Width of the image.
            height (int): Height of the image.
        """
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"image dimensions must be positive, got {width}x{height}")
        return cls(np.empty((height, width, CHANNELS), dtype=np.uint8))

    @classmethod
    def from_bytes(cls, data: bytes, width: int, height: int) -> PixelBuffer:
        """Build a buffer from raw row-major RGB bytes.

        Args:
            data (bytes): Exactly ``width * height * 3`` bytes.
            width (int): Width of the image.
            height (int): Height of the image.

        Raises:
            ConfigurationError: If the dimensions are not positive or the
                byte count does not match them.
        """
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"image dimensions must be positive, got {width}x{height}")
        expected = width * height * CHANNELS
        if len(data) != expected:
            raise ConfigurationError(
                f"{width}x{height} image needs {expected} bytes, got {len(data)}"
            )
        flat = np.frombuffer(data, dtype=np.uint8)
        return cls(flat.reshape((height, width, CHANNELS)).copy())

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def readonly(self) -> bool:
        return not self.pixels.flags.writeable

    def __len__(self) -> int:
        return self.width * self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.pixels.shape == other.pixels.shape and bool(np.array_equal(self.pixels, other.pixels))

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"

    def index(self, x: int, y: int) -> int:
        """Flat row-major index of the pixel at ``(x, y)``."""
        return y * self.width + x

    def pixel(self, x: int, y: int) -> Pixel:
        r, g, b = self.pixels[y, x]
        return Pixel(int(r), int(g), int(b))

    def to_bytes(self) -> bytes:
        return self.pixels.tobytes()

    def freeze(self) -> PixelBuffer:
        """Mark the buffer read-only and return it."""
        self.pixels.flags.writeable = False
        return self

    def split(self, partitions: Sequence["Partition"]) -> list[RowSlice]:
        """Split the buffer into one writable row view per partition.

        Args:
            partitions (Sequence[Partition]): Row ranges that tile the image.

        Returns:
            list[RowSlice]: Disjoint views, in partition order.

        Raises:
            ConfigurationError: If the partitions leave gaps, overlap or run
                past the last row, or if the buffer is read-only.
        """
        if self.readonly:
            raise ConfigurationError("cannot split a read-only buffer for writing")

        next_row = 0
        for part in partitions:
            if part.start != next_row or part.size < 0:
                raise ConfigurationError(
                    f"partition {part} does not continue at row {next_row}"
                )
            next_row = part.stop
        if next_row != self.height:
            raise ConfigurationError(
                f"partitions cover {next_row} rows of a {self.height}-row image"
            )

        return [RowSlice(part, self.pixels[part.start:part.stop]) for part in partitions]
