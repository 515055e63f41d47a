"""Main module for the application."""

import argparse
import logging
import sys
import time

from config import DEFAULT_WORKERS, Settings
from conv.errors import FilterError
from conv.partition import partition
from conv.threaded import Threaded
from loader.service import Loader

logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="laplacian-filter",
        description="Apply a 3x3 Laplacian edge filter to a P6 image.",
    )
    parser.add_argument("input", help="path of the P6 image to filter")
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=None,
        help=f"number of worker threads (default: $LAPLACIAN_WORKERS or {DEFAULT_WORKERS})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Filter one image and report the elapsed time.

    Args:
        argv (list[str] | None): Command line arguments, without the program name.

    Returns:
        int: Exit status.
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S',
    )
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env(workers=args.workers)
    except FilterError as exc:
        logger.error("%s", exc)
        return 1
    logging.getLogger().setLevel(settings.log_level)

    try:
        image = Loader.load(args.input).freeze()

        start_time = time.time()
        partitions = partition(image.height, settings.workers)
        result = Threaded().run(image, partitions)
        end_time = time.time()

        output_path = Loader.save(result, Loader.output_path(args.input))
    except FilterError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Filtered image written to %s", output_path)
    print(f"Elapsed Time: {end_time - start_time:.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
