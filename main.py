#!/usr/bin/env python3
"""
Command-line front end: read an image, run one processing method, write the result.

    python main.py -i input.bmp -m equalize -o output.bmp

Methods: histogram, equalize, cutout (alias fixed_binarize), two_peaks,
median_grey_level, plot.
"""

import argparse
import logging
import sys
from pathlib import Path

from commands import Command, ProcessingConfig, method_names, run_command
from image_io import read_image, save_image
from image_processing import DEFAULT_CUTOFF

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rgb-tone", description="Process some method of image processing")
    parser.add_argument("-i", "--input", required=True, type=Path, help="The input image")
    parser.add_argument("-m", "--method", required=True,
                        help="The processing method: " + ", ".join(method_names()))
    parser.add_argument("-o", "--output", required=True, type=Path, help="The output image")
    parser.add_argument("--cutoff", type=int, default=DEFAULT_CUTOFF,
                        help="Cutoff for the cutout method (0..255, default %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log file header info and per-channel details")
    return parser


def parse_config(argv=None):
    args = build_parser().parse_args(argv)
    config = ProcessingConfig(method=args.method, input_path=args.input,
                              output_path=args.output, cutoff=args.cutoff)
    return config, args.verbose


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def run(config: ProcessingConfig) -> int:
    logger.info("Using args: %s %s %s", config.input_path, config.method, config.output_path)

    if config.command is Command.UNKNOWN:
        logger.error("Unknown command: %s", config.method)
        return 1

    try:
        img, info = read_image(config.input_path)
        for k, v in info.items():
            logger.debug("%s: %s", k, v)
        result = run_command(img, config)
        save_image(result, config.output_path)
    except (OSError, ValueError, NotImplementedError) as e:
        logger.error("Failed to process %s: %s", config.input_path, e)
        return 1
    return 0


def main(argv=None) -> int:
    config, verbose = parse_config(argv)
    setup_logging(verbose)
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
