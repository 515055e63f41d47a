"""Abstract base classes for convolution operations."""

from abc import ABC, abstractmethod

from model.pixel_buffer import PixelBuffer


class Conv2D(ABC):
    """Abstract base class for Laplacian convolution operations."""

    @abstractmethod
    def run(self, source: PixelBuffer, *args, **kwargs) -> PixelBuffer:
        """Run convolution operation on the given image.

        Args:
            source (PixelBuffer): Image to apply convolution on.

        Returns:
            PixelBuffer: Convolved image, same size as ``source``.
        """
        pass

    @staticmethod
    def allocate_result(source: PixelBuffer) -> PixelBuffer:
        """Allocate the output buffer for ``source``."""
        return PixelBuffer.allocate(source.width, source.height)
