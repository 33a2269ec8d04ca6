#!/usr/bin/env python3
"""
Docs Markdown - export a documentation site to local Markdown files.

Renders every page listed in the site's sitemap-pages.xml with Playwright,
converts the main content to Markdown, and downloads the page images next to
the Markdown files.

Usage:
    python -m docs_markdown.main --url https://docs.example.com/main

Output:
    ./markdown/<site-title>/<category>/<page>.md
    ./markdown/<site-title>/<category>/images/image_<page>_<n>.<ext>
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional
from urllib.parse import urlparse

from docs_markdown.crawler import DocsCrawler
from docs_markdown.utils.constants import DEFAULT_DOCS_URL
from docs_markdown.utils.log import (
    setup_logger,
    print_status,
    print_success,
    print_error,
    print_warning
)


# Exit codes
EXIT_OK = 0
EXIT_FATAL = 1
EXIT_PARTIAL = 2


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='docs_markdown',
        description='Export a documentation site to Markdown files with local images',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s
    %(prog)s --url https://docs.example.com/main
        """
    )

    parser.add_argument(
        '--url', '-u',
        type=str,
        default=DEFAULT_DOCS_URL,
        help=f'Documentation root URL to scrape (default: {DEFAULT_DOCS_URL})'
    )

    return parser.parse_args(argv)


def validate_url(url: str) -> str:
    """
    Validate and normalize the input URL.

    Args:
        url: URL string to validate

    Returns:
        Normalized URL string

    Raises:
        ValueError: If URL is invalid
    """
    # Add protocol if missing
    if not url.startswith(('http://', 'https://')):
        url = 'https://' + url

    parsed = urlparse(url)

    if not parsed.netloc:
        raise ValueError(f"Invalid URL: {url}")

    return url.rstrip('/')


def print_summary(result) -> None:
    """
    Print the export summary.

    Args:
        result: CrawlResult object
    """
    print_status("=" * 60, "dim")
    print_status(f"  Pages written:     {result.pages_processed}/{result.pages_total}", "bold")
    print_status(f"  Failed pages:      {result.failed_pages}", "bold")
    print_status(f"  Images downloaded: {result.images_downloaded}", "bold")
    print_status(f"  Images failed:     {result.images_failed}", "bold")
    print_status(f"  Duration:          {result.duration_seconds:.1f} seconds", "bold")
    print_status("=" * 60, "dim")


def exit_code_for(result) -> int:
    """
    Map a crawl result to the process exit status.

    Args:
        result: CrawlResult object

    Returns:
        0 if every page converted, 2 if some pages failed, 1 if aborted
    """
    if result.aborted:
        return EXIT_FATAL
    if result.failed_pages:
        return EXIT_PARTIAL
    return EXIT_OK


async def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the exporter.

    Returns:
        Process exit code
    """
    args = parse_arguments(argv)

    setup_logger(level=logging.INFO)

    try:
        url = validate_url(args.url)

        crawler = DocsCrawler(url=url)
        result = await crawler.crawl()

    except ValueError as e:
        print_error(f"Invalid input: {e}")
        return EXIT_FATAL
    except Exception as e:
        print_error(f"Error: {e}")
        return EXIT_FATAL

    if result.aborted:
        return exit_code_for(result)

    print_summary(result)

    if result.failed_pages:
        print_warning(f"{result.failed_pages} pages could not be converted")
    else:
        print_success("All pages converted")

    return exit_code_for(result)


def run() -> None:
    """Entry point wrapper for running as module."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print_error("Crawl interrupted by user")
        sys.exit(EXIT_FATAL)


if __name__ == '__main__':
    run()
