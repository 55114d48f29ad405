#!/usr/bin/env python3
"""
Faculty Directory Scraper - Main CLI Interface

Loads each start URL, extracts faculty records with the dialect engine and
streams them to a CSV file.

Usage:
    python main.py https://music.ku.edu/people --method auto
    python main.py --urls-file urls.txt --static
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger
from tqdm import tqdm

from config.settings import (
    validate_config,
    OUTPUT_DIR,
    START_URLS,
    EXTRACTION_METHOD,
    MAX_REQUESTS_PER_CRAWL,
    ENABLE_PLAYWRIGHT,
    HEADLESS_BROWSER,
    ENABLE_AUTH,
    AUTH_USERNAME,
    AUTH_PASSWORD,
)
from faculty_scraper.extractor import EXTRACTION_METHODS, extract
from faculty_scraper.fetcher import fetch_page_static, handle_authentication, load_page, open_browser
from faculty_scraper.utils import setup_logger, validate_url, normalize_url
from faculty_scraper.writer import RecordWriter


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Extract faculty records from university directory pages')
    parser.add_argument('urls', nargs='*', help='Directory page URLs to scrape')
    parser.add_argument('--urls-file', '-f', type=Path,
                        help='File with one start URL per line')
    parser.add_argument('--method', '-m', default=EXTRACTION_METHOD, type=str.lower, choices=EXTRACTION_METHODS,
                        help='Layout to extract with (default: %(default)s)')
    parser.add_argument('--max-requests', type=int, default=MAX_REQUESTS_PER_CRAWL,
                        help='Maximum number of pages to scrape (default: %(default)s)')
    parser.add_argument('--static', action='store_true', default=not ENABLE_PLAYWRIGHT,
                        help='Fetch pages with requests instead of a browser')
    parser.add_argument('--headed', action='store_true',
                        help='Show the browser window')
    parser.add_argument('--output', '-o', type=Path, default=OUTPUT_DIR / 'faculty_records.csv',
                        help='CSV file to append records to (default: %(default)s)')
    return parser.parse_args(argv)


def collect_start_urls(urls: Iterable[str], urls_file: Optional[Path], limit: int) -> List[str]:
    """
    Merge command-line, file and configured start URLs.

    Args:
        urls: URLs given on the command line
        urls_file: Optional file with one URL per line ('#' starts a comment)
        limit: Maximum number of URLs to keep

    Returns:
        Normalized, de-duplicated URLs in the order given
    """
    candidates = list(urls)
    if urls_file:
        lines = urls_file.read_text().splitlines()
        candidates.extend(line.strip() for line in lines if line.strip() and not line.startswith('#'))
    if not candidates:
        candidates = list(START_URLS)

    start_urls = []
    for url in candidates:
        url = normalize_url(url)
        if not validate_url(url):
            logger.warning(f"Skipping invalid URL: {url}")
            continue
        if url not in start_urls:
            start_urls.append(url)

    return start_urls[:max(limit, 0)]


def run_crawl(urls: List[str], method: str, writer: RecordWriter, static: bool, headless: bool):
    """Scrape every URL, keeping one page's failure away from the rest."""
    if static:
        for url in tqdm(urls, desc='Pages'):
            if writer.is_page_completed(url):
                logger.info(f"Skipping completed page: {url}")
                continue
            try:
                page = fetch_page_static(url)
                if page is None:
                    continue
                writer.write_records(extract(page, method=method), url)
                writer.mark_page_completed(url)
            except Exception as e:
                logger.exception(f"Error processing {url}: {e}")
        return

    with open_browser(headless=headless) as browser_page:
        for url in tqdm(urls, desc='Pages'):
            if writer.is_page_completed(url):
                logger.info(f"Skipping completed page: {url}")
                continue
            try:
                page = load_page(browser_page, url)
                if page is None:
                    continue
                if ENABLE_AUTH:
                    handle_authentication(browser_page, AUTH_USERNAME, AUTH_PASSWORD)
                writer.write_records(extract(page, method=method), url)
                writer.mark_page_completed(url)
            except Exception as e:
                logger.exception(f"Error processing {url}: {e}")


def main(argv: Optional[List[str]] = None):
    """Main entry point for the scraper."""
    setup_logger("main")
    args = parse_args(argv)

    logger.info("Validating configuration...")
    validate_config()

    urls = collect_start_urls(args.urls, args.urls_file, args.max_requests)
    if not urls:
        logger.error("No start URLs given (pass URLs, --urls-file or set START_URLS)")
        sys.exit(1)

    logger.info(f"Scraping {len(urls)} pages with method '{args.method}'")
    writer = RecordWriter(args.output)

    try:
        run_crawl(urls, args.method, writer, static=args.static, headless=HEADLESS_BROWSER and not args.headed)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user (KeyboardInterrupt)")
        logger.info(f"Progress saved; rerun to resume. {writer.get_stats()}")
        sys.exit(1)

    stats = writer.get_stats()
    failed = [url for url in urls if not writer.is_page_completed(url)]
    if failed:
        logger.warning(f"{len(failed)} pages failed; rerun to retry them")
    else:
        writer.finalize()

    logger.success(f"Done: {stats['records_written']} records from {len(urls) - len(failed)} pages "
                   f"saved to {stats['output_file']}")


if __name__ == '__main__':
    main()
