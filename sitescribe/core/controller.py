"""
SiteScribe Orchestrator: runs the end-to-end crawl.

Collects routes from the seed page once, then processes them strictly one
at a time: exclusion check, optional delay, fetch, sanitize, save. The
manifest of processed routes is written when the loop finishes.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, List, Optional

from ..config import CrawlConfig
from ..utils.file_manager import FileManager
from ..utils.manifest import Manifest
from .content_fetcher import ContentFetcher
from .link_collector import LinkCollector
from .sanitizer import ContentSanitizer


class CrawlController:
    def __init__(self,
                 base_url: str,
                 config: CrawlConfig,
                 collector: Optional[LinkCollector] = None,
                 fetcher: Optional[ContentFetcher] = None,
                 sanitizer: Optional[ContentSanitizer] = None,
                 files: Optional[FileManager] = None,
                 logger: Optional[logging.Logger] = None):
        self.base_url = base_url
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.collector = collector or LinkCollector(config)
        self.fetcher = fetcher or ContentFetcher(config)
        self.sanitizer = sanitizer or ContentSanitizer(config.sanitize_mode)
        self.files = files or FileManager(config.output.output_directory)
        self.manifest = Manifest(str(self.files.txt_dir))

    def is_route_excluded(self, route: str) -> bool:
        """Substring match against every configured exclude pattern."""
        return any(pattern in route for pattern in self.config.exclude_routes)

    def run(self) -> Dict[str, int]:
        """Run the crawl and return per-stage counters."""
        stats = {"discovered": 0, "processed": 0, "excluded": 0, "empty_content": 0, "write_failed": 0}

        self.files.reset_output_directory()

        routes = self.collector.collect_routes(self.base_url)
        stats["discovered"] = len(routes)

        if not routes:
            self.logger.warning("No routes found to scrape.")
            return stats

        processed: List[str] = []
        delay = self.config.scraper.request_delay_secs

        for route in routes:
            full_url = f"{self.base_url}{route}"

            if self.is_route_excluded(route):
                self.logger.info(f"Skipping excluded route: {full_url}")
                stats["excluded"] += 1
                continue

            self.logger.info(f"Scraping: {full_url}")

            if delay > 0:
                time.sleep(delay)

            content = self.fetcher.fetch_content(full_url)
            if not content:
                # Empty pages are still written so every processed route has output
                stats["empty_content"] += 1

            cleaned = self.sanitizer.sanitize(content)
            txt_path, docx_path = self.files.save_content(route, cleaned, self.base_url)
            if txt_path is None or docx_path is None:
                stats["write_failed"] += 1

            processed.append(route)
            stats["processed"] += 1

        self.manifest.write(processed)

        self.logger.info("Scraping complete.")
        self.logger.debug(f"Crawl stats: {stats}")
        return stats

    def close(self):
        self.collector.close()
        self.fetcher.close()
