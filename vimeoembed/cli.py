"""
Command-line interface printing Vimeo embed snippets.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .ConfigManager import ConfigManager
from .VimeoEmbedError import VimeoEmbedError
from .core import embed, thumbnail


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", handlers=[logging.StreamHandler(sys.stderr)])


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Vimeo Embed - Render HTML snippets for Vimeo videos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s https://vimeo.com/12345678
  %(prog)s --thumbnail https://vimeo.com/12345678
  %(prog)s --config site.yaml https://vimeo.com/12345678

        """,
    )

    parser.add_argument("url", help="URL of the Vimeo page for the video")

    parser.add_argument("--thumbnail", "-t", action="store_true", help="Render the thumbnail card instead of the embed")

    parser.add_argument("--config", "-c", type=Path, help="Configuration file (defaults to the XDG config search)")

    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Render the snippet for a single URL and print it to stdout."""
    args = parse_arguments(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        config = ConfigManager().load_config(args.config)
    except ValueError as e:
        logger.error(f"Configuration error: {str(e)}")
        sys.exit(1)

    render = thumbnail if args.thumbnail else embed
    logger.debug(f"Rendering {'thumbnail' if args.thumbnail else 'embed'} for {args.url}")

    try:
        html = render(args.url, config)
    except VimeoEmbedError as e:
        logger.error(e.message)
        if e.details:
            logger.debug(f"Details: {e.details}")
        sys.exit(1)

    print(html)


if __name__ == "__main__":
    main()
