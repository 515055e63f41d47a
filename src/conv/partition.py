"""Module for dividing image rows between workers."""

import logging

from dataclasses import dataclass
from conv.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Partition:
    """Half-open row range ``[start, start + size)`` owned by one worker."""

    start: int
    size: int

    @property
    def stop(self) -> int:
        return self.start + self.size

    def __len__(self) -> int:
        return self.size


def partition(height: int, num_workers: int) -> list[Partition]:
    """Divide ``height`` rows into ``num_workers`` contiguous partitions.

    Every partition gets ``height // num_workers`` rows except the last one,
    which also takes the remainder.

    Args:
        height (int): Number of rows of the image.
        num_workers (int): Number of partitions to produce.

    Returns:
        list[Partition]: Partitions ordered by starting row.

    Raises:
        ConfigurationError: If ``height`` or ``num_workers`` is below one.
    """
    if num_workers < 1:
        raise ConfigurationError(f"need at least one worker, got {num_workers}")
    if height < 1:
        raise ConfigurationError(f"need at least one row, got {height}")

    work = height // num_workers
    partitions = [Partition(i * work, work) for i in range(num_workers - 1)]
    last_start = work * (num_workers - 1)
    partitions.append(Partition(last_start, height - last_start))

    logger.debug("Split %d rows into %d partitions of %d (last %d)",
                 height, num_workers, work, partitions[-1].size)
    return partitions
