"""Errors raised while loading, filtering and saving images."""


class FilterError(Exception):
    """Base class for every error of the filter pipeline."""


class ConfigurationError(FilterError):
    """Invalid worker count, image dimensions or partition layout."""


class ImageFormatError(FilterError):
    """The input does not carry a valid P6 header."""


class ColorRangeError(ImageFormatError):
    """The header declares a max channel value other than 255."""


class ImageIOError(FilterError):
    """Reading or writing an image file failed."""


class ResourceError(FilterError):
    """A worker could not be started."""
