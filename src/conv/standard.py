"""Module for sequential convolution."""

import logging

from conv.abstract import Conv2D
from conv.kernel import convolve_pixel
from model.pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


class Standard(Conv2D):
    """Applies the kernel pixel by pixel on the calling thread."""

    def run(self, source: PixelBuffer) -> PixelBuffer:
        """Run convolution operation on the given image.

        Args:
            source (PixelBuffer): Image to apply convolution on.

        Returns:
            PixelBuffer: Convolved image.
        """
        output = self.allocate_result(source)

        for y in range(source.height):
            for x in range(source.width):
                output.pixels[y, x] = convolve_pixel(source, x, y)

        logger.debug("Standard convolution filtered %dx%d pixels", source.width, source.height)
        return output
