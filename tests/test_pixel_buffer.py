import numpy as np
import pytest

from conv.errors import ConfigurationError
from conv.partition import Partition, partition
from model.pixel_buffer import Pixel, PixelBuffer


def test_from_bytes_is_row_major():
    data = bytes(range(2 * 3 * 3))
    image = PixelBuffer.from_bytes(data, width=2, height=3)

    assert (image.width, image.height) == (2, 3)
    assert len(image) == 6
    assert image.index(1, 2) == 5
    assert image.pixel(1, 2) == Pixel(15, 16, 17)
    assert image.to_bytes() == data


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (-1, 2)])
def test_rejects_empty_dimensions(width, height):
    with pytest.raises(ConfigurationError):
        PixelBuffer.from_bytes(b"", width, height)
    with pytest.raises(ConfigurationError):
        PixelBuffer.allocate(width, height)


def test_rejects_wrong_length():
    with pytest.raises(ConfigurationError):
        PixelBuffer.from_bytes(b"\x00" * 11, width=2, height=2)


def test_rejects_non_rgb_array():
    with pytest.raises(ConfigurationError):
        PixelBuffer(np.zeros((4, 4), dtype=np.uint8))


def test_freeze_blocks_writes(random_image):
    random_image.freeze()
    assert random_image.readonly
    with pytest.raises(ValueError):
        random_image.pixels[0, 0] = 1


def test_split_gives_disjoint_views():
    image = PixelBuffer.allocate(4, 10)
    slices = image.split(partition(10, 3))

    for value, block in enumerate(slices):
        block.rows[...] = value

    assert [b.rows.shape[0] for b in slices] == [3, 3, 4]
    assert (image.pixels[0:3] == 0).all()
    assert (image.pixels[3:6] == 1).all()
    assert (image.pixels[6:10] == 2).all()


@pytest.mark.parametrize("parts", [
    [Partition(0, 4), Partition(5, 5)],
    [Partition(0, 6), Partition(5, 5)],
    [Partition(0, 4)],
    [Partition(0, 4), Partition(4, 7)],
])
def test_split_rejects_bad_tiling(parts):
    with pytest.raises(ConfigurationError):
        PixelBuffer.allocate(3, 10).split(parts)


def test_split_rejects_read_only_buffer(random_image):
    with pytest.raises(ConfigurationError):
        random_image.freeze().split(partition(random_image.height, 2))


@pytest.mark.parametrize("dtype", [np.int64, np.float32, np.uint16])
def test_rejects_non_uint8_array(dtype):
    with pytest.raises(ConfigurationError):
        PixelBuffer(np.zeros((2, 2, 3), dtype=dtype))
