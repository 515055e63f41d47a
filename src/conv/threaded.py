"""Module for row-partitioned parallel convolution."""

import logging

from concurrent.futures import ALL_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Sequence
from conv.abstract import Conv2D
from conv.errors import ResourceError
from conv.kernel import convolve_rows
from conv.partition import Partition
from model.pixel_buffer import PixelBuffer, RowSlice

logger = logging.getLogger(__name__)


class Threaded(Conv2D):
    """Runs one worker thread per row partition."""

    def run(self, source: PixelBuffer, partitions: Sequence[Partition]) -> PixelBuffer:
        """Run convolution operation on the given image.

        Each worker reads the whole source and writes only the rows of its
        own partition, so no locking is needed beyond the final join.

        Args:
            source (PixelBuffer): Image to apply convolution on.
            partitions (Sequence[Partition]): Row ranges tiling the image,
                one per worker.

        Returns:
            PixelBuffer: Convolved image.

        Raises:
            ConfigurationError: If the partitions do not tile the image.
            ResourceError: If a worker thread cannot be started.
        """
        shared = source.pixels.view()
        shared.flags.writeable = False

        output = self.allocate_result(source)
        slices = output.split(partitions)

        def process_block(block: RowSlice) -> Partition:
            """Process image block.

            Args:
                block (RowSlice): Partition and the result rows it owns.

            Returns:
                Partition: The partition that was filled.
            """
            part = block.partition
            if part.size:
                block.rows[...] = convolve_rows(shared, part.start, part.stop)
            return part

        futures: list[Future] = []
        with ThreadPoolExecutor(max_workers=len(slices), thread_name_prefix="laplacian") as executor:
            try:
                for block in slices:
                    futures.append(executor.submit(process_block, block))
            except RuntimeError as exc:
                raise ResourceError(f"could not start worker {len(futures)}: {exc}") from exc

            wait(futures, return_when=ALL_COMPLETED)

        for future in futures:
            part = future.result()
            logger.debug("Worker finished rows %d-%d", part.start, part.stop)

        return output
