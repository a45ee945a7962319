"""
Command line entry point for SiteScribe.

Usage:
    sitescribe https://example.com [--config config.json] [--output data]
"""

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

from . import __description__, __version__
from .config import DEFAULT_CONFIG_NAME, LOG_LEVELS, ConfigError, OutputOptions, load_config
from .core.controller import CrawlController
from .core.logger import get_logger, initialize_logging, parse_log_level
from .utils.validators import validate_url


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='sitescribe', description=__description__)
    parser.add_argument('url', nargs='?', help='Base URL of the site to crawl')
    parser.add_argument('-c', '--config', default=DEFAULT_CONFIG_NAME,
                        help=f'Path to the JSON configuration file (default: {DEFAULT_CONFIG_NAME})')
    parser.add_argument('-o', '--output',
                        help='Output directory, overrides outputOptions.outputDirectory')
    parser.add_argument('--log-level', choices=LOG_LEVELS,
                        help='Log level, overrides logLevel')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run a crawl from command line arguments and return the exit code."""
    args = build_parser().parse_args(argv)

    if not args.url:
        print("Please provide a base URL as a command-line argument", file=sys.stderr)
        return 1

    is_valid, base_url, error = validate_url(args.url)
    if not is_valid:
        print(f"Invalid base URL '{args.url}': {error}", file=sys.stderr)
        return 1

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if args.output:
        config = replace(config, output=OutputOptions(output_directory=args.output))
    if args.log_level:
        config = replace(config, log_level=args.log_level)

    initialize_logging(parse_log_level(config.log_level), config.log_directory)
    logger = get_logger('cli')

    controller = CrawlController(base_url, config)
    try:
        stats = controller.run()
        logger.info(
            f"Processed {stats['processed']} of {stats['discovered']} routes "
            f"({stats['excluded']} excluded)"
        )
    except Exception as e:
        logger.error(f"Error while scraping: {e}")
        logger.debug("Unhandled crawl error", exc_info=True)
    finally:
        controller.close()

    return 0


if __name__ == '__main__':
    sys.exit(main())
