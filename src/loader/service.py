"""Module for loading and saving binary PPM images."""

import logging
import os

from pathlib import Path
from PIL import Image
from conv.errors import ColorRangeError, ConfigurationError, ImageFormatError, ImageIOError
from model.pixel_buffer import CHANNELS, PixelBuffer

logger = logging.getLogger(__name__)

WHITESPACE = b" \t\n\v\f\r"


class Loader:
    """Class for loading and saving P6 images."""
    magic = b"P6"
    max_value = 255
    suffix = "_laplacian"
    extension = ".ppm"

    @classmethod
    def load(cls, image_path: str | Path) -> PixelBuffer:
        """Load a P6 image from the given path.

        Args:
            image_path (str | Path): Path to the image file.

        Raises:
            ImageIOError: If the file cannot be read or is truncated.
            ImageFormatError: If the header is not a valid P6 header.
            ColorRangeError: If the max channel value is not 255.
            ConfigurationError: If the image has a zero dimension.
        """
        try:
            data = Path(image_path).read_bytes()
        except OSError as exc:
            raise ImageIOError(f"cannot read {image_path}: {exc}") from exc

        width, height, offset = cls.parse_header(data)
        if width == 0 or height == 0:
            raise ConfigurationError(f"{image_path} has zero dimension {width}x{height}")

        size = width * height * CHANNELS
        raster = data[offset:offset + size]
        if len(raster) < size:
            raise ImageIOError(
                f"{image_path} is truncated: expected {size} pixel bytes, found {len(raster)}"
            )

        logger.info("Loaded %s (%dx%d)", image_path, width, height)
        return PixelBuffer.from_bytes(raster, width, height)

    @classmethod
    def parse_header(cls, data: bytes) -> tuple[int, int, int]:
        """Parse the header of a P6 image.

        Args:
            data (bytes): Contents of the file.

        Returns:
            tuple[int, int, int]: Width, height and the offset of the first
                pixel byte.
        """
        magic, pos = cls._next_token(data, 0)
        if magic != cls.magic:
            raise ImageFormatError(f"invalid file type {magic[:16]!r}, expected {cls.magic!r}")

        fields = []
        for name in ("width", "height", "max value"):
            token, pos = cls._next_token(data, pos)
            if not token.isdigit():
                raise ImageFormatError(f"invalid {name} {token[:16]!r} in header")
            fields.append(int(token))
        width, height, max_value = fields

        if max_value != cls.max_value:
            raise ColorRangeError(f"invalid color mode: max value {max_value}, expected {cls.max_value}")

        # a single whitespace byte separates the header from the raster
        if pos >= len(data) or data[pos] not in WHITESPACE:
            raise ImageFormatError("missing whitespace after header")
        return width, height, pos + 1

    @staticmethod
    def _next_token(data: bytes, pos: int) -> tuple[bytes, int]:
        """Return the next header token and the position right after it."""
        while pos < len(data):
            if data[pos] in WHITESPACE:
                pos += 1
            elif data[pos] == ord("#"):
                end = data.find(b"\n", pos)
                pos = len(data) if end < 0 else end + 1
            else:
                break

        start = pos
        while pos < len(data) and data[pos] not in WHITESPACE and data[pos] != ord("#"):
            pos += 1
        if start == pos:
            raise ImageFormatError("unexpected end of header")
        return data[start:pos], pos

    @classmethod
    def save(cls, image: PixelBuffer, image_path: str | Path) -> Path:
        """Save the image as P6.

        Args:
            image (PixelBuffer): Image to write.
            image_path (str | Path): Destination path.

        Raises:
            ImageIOError: If the file cannot be created or written.
        """
        path = Path(image_path)
        # written beside the target and moved over it only once complete
        partial = path.with_name(f"{path.name}.tmp")
        try:
            Image.fromarray(image.pixels).save(partial, format="PPM")
            os.replace(partial, path)
        except OSError as exc:
            partial.unlink(missing_ok=True)
            raise ImageIOError(f"cannot write {path}: {exc}") from exc

        logger.info("Saved %s (%dx%d)", path, image.width, image.height)
        return path

    @classmethod
    def output_path(cls, image_path: str | Path) -> Path:
        """Return the path the filtered image is saved to.

        Args:
            image_path (str | Path): Path of the input image.
        """
        path = Path(image_path)
        return path.with_name(f"{path.stem}{cls.suffix}{cls.extension}")
