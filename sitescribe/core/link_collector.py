"""
Link Collection Module

Fetches the seed page once and collects the root-relative links found on
it. These routes are the complete work list of a crawl: links on the
visited pages are never followed.
"""

import logging
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from ..config import CrawlConfig


class LinkCollector:
    """
    Collects distinct internal routes (``/path`` style hrefs) from a page.

    Links containing a ``#`` anywhere are rejected outright, not trimmed.
    """

    def __init__(self, config: CrawlConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.logger = logging.getLogger(__name__)
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': config.scraper.user_agent})

    def collect_routes(self, base_url: str) -> List[str]:
        """
        Fetch ``base_url`` and return its internal routes.

        Args:
            base_url: The seed page URL

        Returns:
            Unique routes in order of first appearance, or an empty list if
            the page could not be fetched
        """
        self.logger.info(f"Collecting routes from: {base_url}")

        try:
            response = self.session.get(base_url, timeout=self.config.scraper.timeout_secs)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Error fetching routes from {base_url}: {e}")
            return []

        routes = self.extract_routes(response.text)
        self.logger.info(f"Found {len(routes)} routes on {base_url}")
        return routes

    @staticmethod
    def extract_routes(html_content: str) -> List[str]:
        """
        Extract root-relative hrefs from anchor elements.

        Args:
            html_content: Markup of the seed page

        Returns:
            Deduplicated routes in document order
        """
        soup = BeautifulSoup(html_content, 'lxml')
        seen = set()
        routes = []

        for anchor in soup.find_all('a', href=True):
            href = anchor['href']
            # Protocol-relative links point at another host
            if not href.startswith('/') or href.startswith('//'):
                continue
            if '#' in href:
                continue
            if href not in seen:
                seen.add(href)
                routes.append(href)

        return routes

    def close(self):
        """Close the HTTP session."""
        self.session.close()
